[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bugsim"
version = "0.1.0"
description = "A small artificial-life simulation of grazing bugs, hunting bugs, food and a diffusing scent field"
requires-python = ">=3.10"
keywords = ["artificial life", "simulation", "genome", "predator", "prey", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bugsim = "bugsim.game:main"

[tool.hatch.build.targets.wheel]
packages = ["bugsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
