[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolve"
version = "0.1.0"
description = "Solvers for Advent of Code puzzles from 2018, 2019 and 2020, including an Intcode machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "intcode", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc-2018-01 = "aocsolve.y2018_day01:main"
aoc-2018-02 = "aocsolve.y2018_day02:main"
aoc-2018-03 = "aocsolve.y2018_day03:main"
aoc-2018-04 = "aocsolve.y2018_day04:main"
aoc-2018-05 = "aocsolve.y2018_day05:main"
aoc-2018-06 = "aocsolve.y2018_day06:main"
aoc-2018-07 = "aocsolve.y2018_day07:main"
aoc-2018-08 = "aocsolve.y2018_day08:main"
aoc-2018-09 = "aocsolve.y2018_day09:main"
aoc-2018-10 = "aocsolve.y2018_day10:main"
aoc-2018-11 = "aocsolve.y2018_day11:main"
aoc-2019-01 = "aocsolve.y2019_day01:main"
aoc-2019-02 = "aocsolve.y2019_day02:main"
aoc-2019-03 = "aocsolve.y2019_day03:main"
aoc-2019-04 = "aocsolve.y2019_day04:main"
aoc-2019-06 = "aocsolve.y2019_day06:main"
aoc-2019-07 = "aocsolve.y2019_day07:main"
aoc-2019-08 = "aocsolve.y2019_day08:main"
aoc-2020-02 = "aocsolve.y2020_day02:main"
aoc-2020-03 = "aocsolve.y2020_day03:main"
aoc-intcode = "aocsolve.intcode:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolve"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
