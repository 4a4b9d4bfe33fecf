[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "discretesets"
version = "0.1.0"
description = "Small discrete-mathematics toolkit: finite set operations, Cartesian products and Euler paths"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "discrete mathematics",
    "sets",
    "union",
    "intersection",
    "symmetric difference",
    "cartesian product",
    "relations",
    "graph",
    "euler path",
]
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
discretesets-euler = "discretesets.euler:main"
discretesets-numbers = "discretesets.numeric_sets:main"
discretesets-letters = "discretesets.letter_sets:main"
discretesets-relations = "discretesets.relations:main"

[tool.hatch.build.targets.wheel]
packages = ["discretesets"]

[tool.hatch.build.targets.sdist]
include = ["discretesets", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
