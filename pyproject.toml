[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kartroulette"
version = "0.1.0"
description = "Random kart racing loadouts and a shuffled course rotation"
requires-python = ">=3.10"
dependencies = []
keywords = ["kart", "racing", "randomizer", "loadout", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kartroulette = "kartroulette.app:main"

[tool.hatch.build.targets.wheel]
packages = ["kartroulette"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
