[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goalgrid"
version = "0.1.0"
description = "Interval-based soccer scoring model: offer validation, prospect exploration and outcome probability queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["soccer", "probability", "markets", "goalscorer", "handicap", "scoreline"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["goalgrid"]

[tool.pytest.ini_options]
addopts = "-ra"
