[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinystl"
version = "0.1.0"
description = "Classic data structures: bitmap, circular buffer, search trees, directed graph, queues, vector, suffix array and a small profiler"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "avl-tree",
    "binary-search-tree",
    "bitmap",
    "circular-buffer",
    "suffix-array",
    "priority-queue",
    "heap",
    "graph",
    "vector",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tinystl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
