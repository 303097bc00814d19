[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ccstruct"
version = "1.0.0"
description = "Fixed-capacity arrays, stacks, queues, ring queues and a circular doubly linked list"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "array", "stack", "queue", "ring buffer", "linked list", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
packages = ["ccstruct"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
