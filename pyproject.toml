[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sharkboard"
version = "0.1.0"
description = "A terminal shark board game for several players, plus small arithmetic, text and record helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "board-game", "dice", "terminal", "shark"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sharkboard = "sharkboard.game:main"

[tool.hatch.build.targets.wheel]
packages = ["sharkboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
