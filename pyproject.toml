[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshgen2d"
version = "0.1.0"
description = "Building blocks for two-dimensional structured meshes: points, grids, lines, polynomials and small dense matrices"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "grid", "geometry", "polynomial", "roots", "matrix", "lu-decomposition"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
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
test = ["pytest"]

[project.scripts]
meshgen2d = "meshgen2d.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["meshgen2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
