[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "fdmjc"
version = "0.1.0"
description = "Symbols, temporaries, graphs, syntax trees and instruction lists for a small FDMJ compiler"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "syntax tree", "llvm", "arm", "instructions", "trace scheduling"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["fdmjc*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
