[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acrotools"
version = "0.1.0"
description = "Checksums, path helpers, logging and utility functions for device programmer test stations"
requires-python = ">=3.10"
dependencies = []
keywords = ["crc16", "crc32", "checksum", "device programmer", "socket mapping", "logging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["acrotools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
