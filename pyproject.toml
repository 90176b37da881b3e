[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsbasics"
version = "0.1.0"
description = "Small, readable implementations of a doubly linked list, a fixed-capacity array queue and a linked stack."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "queue", "stack", "ring buffer"]
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
test = ["pytest"]

[project.scripts]
dsbasics-list-demo = "dsbasics.linked_list:main"
dsbasics-queue-demo = "dsbasics.array_queue:main"
dsbasics-stack-demo = "dsbasics.linked_stack:main"

[tool.hatch.build.targets.wheel]
packages = ["dsbasics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
