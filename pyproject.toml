[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warcards"
version = "0.1.0"
description = "The card game War for two players, with a turn log and game statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["cards", "war", "game", "simulation"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
warcards = "warcards.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["warcards"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
