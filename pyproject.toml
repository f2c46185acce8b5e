[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jacksnake"
version = "0.1.0"
description = "A snake arcade game with sliding letter obstacles, built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["snake", "arcade", "game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
jacksnake = "jacksnake.game:main"

[tool.hatch.build.targets.wheel]
packages = ["jacksnake"]

[tool.pytest.ini_options]
addopts = "-ra"
