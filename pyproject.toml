[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data structures and algorithms: stacks, queues, linked lists, a binary search tree, sorting, bracket checking and postfix evaluation."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "stack",
    "queue",
    "linked-list",
    "binary-search-tree",
    "heap-sort",
    "quick-sort",
    "postfix",
]
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
dsakit-balanced = "dsakit.balanced:main"
dsakit-postfix = "dsakit.postfix:main"
dsakit-stack = "dsakit.array_stack:main"
dsakit-linked-stack = "dsakit.linked_stack:main"
dsakit-queue = "dsakit.circular_queue:main"
dsakit-sort = "dsakit.sorting:main"
dsakit-sll = "dsakit.singly_linked:main"
dsakit-cursor = "dsakit.cursor:main"
dsakit-dll = "dsakit.doubly_linked:main"
dsakit-bst = "dsakit.bst:main"

[tool.hatch.build.targets.wheel]
packages = ["dsakit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
