[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ldsconverge"
version = "0.1.0"
description = "Compare how fast white noise, stratified and low-discrepancy point sets converge when integrating 1D functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "low-discrepancy",
    "monte-carlo",
    "quasi-monte-carlo",
    "integration",
    "golden-ratio",
    "van-der-corput",
    "kritzinger",
    "thue-morse",
    "stratification",
    "pcg",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
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

[project.scripts]
ldsconverge = "ldsconverge.experiment:main"

[tool.hatch.build.targets.wheel]
packages = ["ldsconverge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
