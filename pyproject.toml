[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "everybody_codes"
version = "0.1.0"
description = "Workspace helper for Everybody Codes quests: scaffold days, fetch inputs, run, time and submit solutions."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "everybody codes",
    "puzzles",
    "scaffolding",
    "benchmarking",
    "command line",
]
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
    "Topic :: Software Development :: Build Tools",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
everybody-codes = "everybody_codes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["everybody_codes"]

[tool.hatch.build.targets.sdist]
include = ["everybody_codes", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
