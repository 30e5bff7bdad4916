[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kittyloot"
version = "0.1.0"
description = "Items, loot placement, inventory and equipment for a cat-themed dungeon crawler"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "inventory", "loot", "items", "equipment", "sorting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
test = ["pytest"]

[project.scripts]
kittyloot-sort-demo = "kittyloot.sorting:main"

[tool.hatch.build.targets.wheel]
packages = ["kittyloot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
