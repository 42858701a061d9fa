[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalgo"
version = "0.1.0"
description = "Classic data structures and algorithms: linked lists, stacks, queues, hash tables, skip lists, probabilistic filters, sorting, searching, string search, trees and graph traversal."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "sorting",
    "searching",
    "string-search",
    "hash-table",
    "bloom-filter",
    "cuckoo-filter",
    "skip-list",
    "binary-search-tree",
    "graph-traversal",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalgo-bench = "dsalgo.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
