[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "torre_hanoi"
version = "1.0.0"
description = "Terminal Tower of Hanoi game with move suggestions and a saved match history"
requires-python = ">=3.10"
dependencies = []
keywords = ["hanoi", "tower of hanoi", "puzzle", "game", "terminal"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
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
torre-hanoi = "torre_hanoi.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["torre_hanoi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
