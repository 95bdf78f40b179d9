[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vm8"
version = "0.1.0"
description = "Gate-level building blocks for a small 8-bit virtual machine: clock, latches, a one-bit register and console demos"
requires-python = ">=3.10"
dependencies = []
keywords = ["digital logic", "latch", "nor gate", "clock", "register", "simulation", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Norwegian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vm8 = "vm8.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["vm8"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
