[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "densematrix"
version = "0.1.0"
description = "Small dense matrix type with arithmetic, determinant, cofactors and inverse"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "linear algebra", "determinant", "inverse", "cofactor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["densematrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
