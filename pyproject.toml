[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termchess"
version = "0.1.0"
description = "Play chess against a UCI engine such as Stockfish from the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "stockfish", "uci", "terminal", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termchess = "termchess.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["termchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
