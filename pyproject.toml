[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vdskit"
version = "0.1.0"
description = "Small classic data structures: a bounded array list, stacks and linked lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "stack", "array list"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vdskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
