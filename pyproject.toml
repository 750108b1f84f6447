[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ttakit"
version = "0.1.0"
description = "Tick-aware data structures, hashing, number-theoretic transforms and a priority thread pool"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "siphash",
    "hash table",
    "b-tree",
    "b+ tree",
    "heap",
    "ntt",
    "thread pool",
    "priority queue",
    "lifecycle",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ttakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
