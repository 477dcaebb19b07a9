[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lemkis"
version = "0.1.0"
description = "Teaching-oriented mathematics and concurrency toolkit: matrices, number theory, polynomials, positional expansions, recursion exercises, thread-safe queues and synchronization examples"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "matrix",
    "number theory",
    "polynomial",
    "fractions",
    "positional notation",
    "recursion",
    "concurrency",
    "queue",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lemkis"]

[tool.pytest.ini_options]
addopts = "-ra"
