[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordgrid_puzzles"
version = "1.0.0"
description = "Solvers for four small puzzles: paired lists, level reports, corrupted instructions and letter grids"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "word search", "grid", "parsing"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
wordgrid-level1 = "wordgrid_puzzles.level1:main"
wordgrid-level2 = "wordgrid_puzzles.level2:main"
wordgrid-level3 = "wordgrid_puzzles.level3:main"
wordgrid-level4 = "wordgrid_puzzles.level4:main"

[tool.hatch.build.targets.wheel]
packages = ["wordgrid_puzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
