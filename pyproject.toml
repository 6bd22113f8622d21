[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxutil"
version = "0.1.0"
description = "Small utilities for voxel simulations: file helpers, logging, Perlin noise, sparse voxel grids and a command-line argument parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "perlin", "noise", "logging", "argparse", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voxutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
