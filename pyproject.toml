[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dronefarm"
version = "0.1.0"
description = "Field grids, drone flight planning, pesticide records and widget geometry for a crop-spraying simulator"
requires-python = ">=3.10"
dependencies = []
keywords = ["drone", "agriculture", "simulation", "route planning", "pesticide"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["dronefarm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
