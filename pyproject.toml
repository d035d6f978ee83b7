[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seabattle"
version = "0.1.0"
description = "A Sea Battle game: place your fleet on a 10x10 grid and trade shots with a computer opponent."
requires-python = ">=3.10"
dependencies = []
keywords = ["sea battle", "battleship", "board game", "game", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
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
seabattle = "seabattle.window:main"

[tool.hatch.build.targets.wheel]
packages = ["seabattle"]

[tool.pytest.ini_options]
addopts = "-ra"
