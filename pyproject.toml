[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacegrid"
version = "0.1.0"
description = "Block definitions, inventories and delta-synchronised block state for a space construction game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "blocks", "grids", "inventory", "simulation", "delta"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spacegrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
