[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fortytools"
version = "0.1.0"
description = "Small command-line tools and data-structure helpers: tail, cat, a bit-level messaging codec, listing order rules, trees and lists"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tail",
    "cat",
    "binary-tree",
    "red-black-tree",
    "linked-list",
    "command-line",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ft-tail = "fortytools.tail:main"
tinycat = "fortytools.tinycat:main"
rbtree-demo = "fortytools.rbtree:main"
taskmaster-client = "fortytools.taskmaster_client:main"
taskmaster-server = "fortytools.taskmaster_server:main"

[tool.hatch.build.targets.wheel]
packages = ["fortytools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
