[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ansi_escapers"
version = "0.2.0"
description = "ANSI escape code creation, parsing and type-safe manipulation."
requires-python = ">=3.10"
dependencies = []
keywords = ["ansi", "escape", "terminal", "sgr", "color", "parser"]
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
    "Topic :: Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ansi_escapers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
