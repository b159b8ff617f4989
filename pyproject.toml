[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "handycalc"
version = "0.1.0"
description = "Small everyday calculators for geometry, series, finance, physics and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "calculator",
    "geometry",
    "arithmetic progression",
    "interest",
    "physics",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
handycalc = "handycalc.cli:main"

[tool.setuptools.packages.find]
include = ["handycalc*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
