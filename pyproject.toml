[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termtetris"
version = "0.1.0"
description = "Falling-block puzzle game drawn with ANSI escape codes in the terminal, plus a few small text utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetris", "terminal", "ansi", "game", "huffman", "word-count"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
termtetris = "termtetris.game:main"
termtetris-classic = "termtetris.classic_game:main"
termtetris-shapes = "termtetris.shapes:main"
termtetris-rand = "termtetris.rng:main"
termtetris-huffman = "termtetris.huffman:main"
termtetris-wordcount = "termtetris.wordcount:main"

[tool.hatch.build.targets.wheel]
packages = ["termtetris"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
