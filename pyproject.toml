[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridclusters"
version = "0.1.0"
description = "Count clusters of orthogonally connected true cells in a 2D boolean grid."
requires-python = ">=3.10"
keywords = ["grid", "clusters", "connected components", "bfs", "flood fill"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gridclusters = "gridclusters.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gridclusters"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
