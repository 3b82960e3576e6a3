[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xlex"
version = "0.1.0"
description = "Regular expression to NFA, DFA and minimal DFA construction, with small YAML reader building blocks"
requires-python = ">=3.10"
dependencies = []
keywords = ["regex", "nfa", "dfa", "automata", "lexer", "thompson", "subset-construction", "minimization"]
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

[tool.hatch.build.targets.wheel]
packages = ["xlex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
