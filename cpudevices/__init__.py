"""Utilities for simulated devices: random helpers, checked storage, folders and a simple CPU stub."""

__version__ = "0.1.0"
__all__ = ["folders", "utils", "simple_cpu"]