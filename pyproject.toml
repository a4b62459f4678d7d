[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tmviz"
version = "0.1.0"
description = "Load a single-tape Turing machine from a text file and watch it run step by step in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["turing machine", "automata", "simulation", "computation theory", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tmviz = "tmviz.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tmviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
