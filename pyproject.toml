[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazerunner"
version = "0.1.0"
description = "A maze game with random maze generation and depth-first and breadth-first solvers"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["maze", "game", "dfs", "bfs", "pathfinding", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mazerunner = "mazerunner.game:main"

[tool.hatch.build.targets.wheel]
packages = ["mazerunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
