[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classicalgos"
version = "0.1.0"
description = "Classic algorithms: sorting, shortest paths, spanning trees, knapsack, permutations, N-queens and topological sort"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "dijkstra",
    "floyd-warshall",
    "kruskal",
    "prim",
    "knapsack",
    "johnson-trotter",
    "n-queens",
    "topological-sort",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
classicalgos = "classicalgos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["classicalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
