[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enctools"
version = "0.1.0"
description = "Helpers for S-57 chart datasets: update-cell grouping, INI-style configuration, strict number parsing, UTF-8/UCS-2 codecs and tagged logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["s57", "enc", "nautical chart", "gis", "config", "ucs2"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enctools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
