[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sheetmath"
version = "0.1.0"
description = "Small number-theory and arithmetic puzzle solvers: primes, divisors, digit tricks and more"
requires-python = ">=3.10"
keywords = ["number theory", "primes", "divisors", "gcd", "competitive programming"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sheetmath = "sheetmath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sheetmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
