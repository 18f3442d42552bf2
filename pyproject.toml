[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "estructuras"
version = "0.1.0"
description = "Classic data structures (circular lists, bounded mapping, binary search tree, word tree, stack, queue, iterator) with a command interpreter to exercise them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "binary search tree",
    "avl",
    "trie",
    "circular list",
    "stack",
    "queue",
    "interpreter",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estructuras = "estructuras.interpreter:main"

[tool.setuptools]
packages = ["estructuras"]

[tool.pytest.ini_options]
addopts = "-ra"
