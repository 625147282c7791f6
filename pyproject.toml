[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "routemaze"
version = "0.1.0"
description = "Route finding over weighted location graphs, plus maze generation and solving in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "dijkstra",
    "a-star",
    "shortest-path",
    "maze",
    "maze-generator",
    "maze-solver",
    "union-find",
    "curses",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
routemaze-route = "routemaze.route.app:main"
routemaze-generate = "routemaze.maze.generate_cli:main"
routemaze-solve = "routemaze.maze.solve_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["routemaze"]

[tool.hatch.build.targets.sdist]
include = ["routemaze", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
