[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinkerkit"
version = "0.1.0"
description = "Puzzle helpers, number games and small text tools collected in one package"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "puzzle",
    "magic-square",
    "hashi",
    "word-game",
    "elo",
    "subset-sum",
    "expression-evaluator",
    "dice",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinkerkit-magic-square = "tinkerkit.magicsquare:main"
tinkerkit-combination = "tinkerkit.combination:main"
tinkerkit-wordgame = "tinkerkit.wordgame:main"
tinkerkit-hashi = "tinkerkit.hashi:main"
tinkerkit-dragonsroll = "tinkerkit.dragonsroll:main"
tinkerkit-calc = "tinkerkit.calcstack:main"
tinkerkit-dart = "tinkerkit.dart:main"
tinkerkit-respell = "tinkerkit.respelling:main"
tinkerkit-day1 = "tinkerkit.aoc_day1:main"
tinkerkit-day2 = "tinkerkit.aoc_day2:main"
tinkerkit-songs = "tinkerkit.songs:main"
tinkerkit-songs-update = "tinkerkit.songs:update_main"

[tool.hatch.build.targets.wheel]
packages = ["tinkerkit"]

[tool.pytest.ini_options]
addopts = "-ra"
