[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vtmsheet"
version = "0.1.0"
description = "Character sheet model and save files for Vampire: The Masquerade 5th edition"
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = ["vampire", "masquerade", "rpg", "character-sheet", "tabletop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vtmsheet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
