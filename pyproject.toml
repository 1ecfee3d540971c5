[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hamletkit"
version = "0.1.0"
description = "Small role-playing toolkit: items, inventories, heroes, villains, villagers and villages"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "game", "inventory", "characters", "village"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hamletkit-demo = "hamletkit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["hamletkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
