[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "barbiesh"
version = "0.1.0"
description = "A small interactive shell with builtins, pipelines, quoting, variable expansion and redirections"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "repl", "pipeline", "redirection", "expansion"]
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
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
barbiesh = "barbiesh.main:main"

[tool.setuptools.packages.find]
include = ["barbiesh*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
