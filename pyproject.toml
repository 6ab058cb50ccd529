[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2024"
version = "0.1.0"
description = "Solvers for the 2024 Advent of Code puzzles, days 1 to 18"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aoc2024"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
