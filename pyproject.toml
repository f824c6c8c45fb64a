[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parallelrts"
version = "0.1.0"
description = "A small isometric real-time strategy game with buildings, trainable units, harvestable resources and an in-game menu"
requires-python = ">=3.10"
keywords = ["game", "strategy", "rts", "isometric", "tilemap", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
parallelrts = "parallelrts.display:main"

[tool.hatch.build.targets.wheel]
packages = ["parallelrts"]

[tool.pytest.ini_options]
addopts = "-ra"
