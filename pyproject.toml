[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rxutil"
version = "0.1.0"
description = "Parameter transforms, bounded link functions, stable sorting and argument checks for pharmacometric modelling"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "box-cox",
    "yeo-johnson",
    "logit",
    "probit",
    "timsort",
    "pharmacometrics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["rxutil"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
