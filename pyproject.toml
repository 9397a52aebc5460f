[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unison2d"
version = "0.1.0"
description = "Building blocks for 2D games: math types, input handling, embedded assets, physics kernels and 2D shadow geometry"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game-engine",
    "2d",
    "input",
    "lighting",
    "shadows",
    "physics",
    "assets",
]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["unison2d"]

[tool.hatch.build.targets.sdist]
include = ["unison2d", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
