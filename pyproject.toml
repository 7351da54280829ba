[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slrkit"
version = "0.1.0"
description = "SLR(1) table builder and table-driven parser for grammars written in a plain text format"
requires-python = ">=3.10"
dependencies = []
keywords = ["slr", "lr", "parser", "parsing", "grammar", "first", "follow", "compiler"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
slrkit = "slrkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["slrkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
