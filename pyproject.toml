[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpudevices"
version = "0.1.0"
description = "Small utilities for device simulations: random helpers, hash-checked data storage, folder handling and a minimal CPU stub"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "cpu", "utilities", "random", "storage"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simple-cpu = "cpudevices.simple_cpu:main"

[tool.hatch.build.targets.wheel]
packages = ["cpudevices"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
