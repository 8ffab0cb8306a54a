[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polycalc"
version = "0.1.0"
description = "Exact rational polynomial calculator with binomial-basis output and a Pascal's triangle helper"
requires-python = ">=3.10"
dependencies = []
keywords = ["polynomial", "binomial", "combinatorics", "pascal", "calculator", "rational"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polycalc = "polycalc.app:main"

[tool.hatch.build.targets.wheel]
packages = ["polycalc"]

[tool.pytest.ini_options]
addopts = "-ra"
