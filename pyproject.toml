[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsaprep"
version = "0.1.0"
description = "Classic interview-prep data structures and algorithms: linked lists, stacks and binary trees."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "linked-list", "stack", "binary-tree", "interview"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsaprep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
