"""A minimal CPU device: a pluggable log sink and a tick counter."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

BUFFER_SIZE = 256

LogFunc = Callable[[str, str], None]

_log_func: Optional[LogFunc] = None
_tick_count = 0


def set_log_func(func: Optional[LogFunc]) -> None:
    """Install the callable that receives ``(log_file, message)`` pairs."""
    global _log_func
    if func is not None and not callable(func):
        raise TypeError(f"log function must be callable, got {type(func).__name__}")
    _log_func = func


def mylog(log_file: str, fmt: str, *args) -> None:
    """Format a printf-style message, cap its length and hand it to the log sink."""
    if _log_func is None:
        raise RuntimeError("no log function has been set")
    message = (fmt % args)[: BUFFER_SIZE - 1]
    _log_func(log_file, message)


def tick() -> int:
    """Advance the device by one step and return how many steps have run."""
    global _tick_count
    _tick_count += 1
    return _tick_count


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: announce the device and exit successfully."""
    parser = argparse.ArgumentParser(prog="simple_cpu", description="Simple CPU device.")
    parser.parse_args(argv if argv is not None else [])
    print("Simple CPU main", end="")
    return 0


if __name__ == "__main__":
    import sys

    raise SystemExit(main(sys.argv[1:]))