[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuiquarium"
version = "0.1.0"
description = "Evolving aquarium core: environment cycles, substrate zones, creature and producer genomes, and genetic operators."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "artificial-life",
    "evolution",
    "ecosystem",
    "genetics",
    "simulation",
    "aquarium",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tuiquarium"]

[tool.pytest.ini_options]
addopts = "-ra"
