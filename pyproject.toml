[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "syntaxgen"
version = "0.1.0"
description = "Lexical analyzers built from regular expressions, and syntax-directed translation driven by LR parse tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "parser", "lr", "dfa", "nfa", "regex", "compiler", "syntax-directed translation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["syntaxgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
