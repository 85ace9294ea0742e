[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mubiesflix"
version = "0.1.0"
description = "A small film catalogue keyed by director, built on a binary search tree, with a chained hash map alongside"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "hash map", "films", "catalogue", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mubiesflix = "mubiesflix.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mubiesflix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
