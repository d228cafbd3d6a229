[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genstructs"
version = "0.1.0"
description = "Classic data structures: queues, a linked list, a vector with sorting helpers and a binary search tree."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "queue", "ring buffer", "linked list", "binary search tree", "vector", "sorting"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["genstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
