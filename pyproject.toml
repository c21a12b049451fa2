[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "compilerlab"
version = "0.1.0"
description = "Small compiler-construction tools: epsilon closures, NFA conversions, FIRST/FOLLOW sets, a lexer and two toy parsers"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "automata", "nfa", "dfa", "parsing", "lexer", "grammar", "first-follow"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
compilerlab-eclosure = "compilerlab.eclosure:main"
compilerlab-enfa = "compilerlab.enfa:main"
compilerlab-nfa-to-dfa = "compilerlab.subset:main"
compilerlab-shift-reduce = "compilerlab.shift_reduce:main"
compilerlab-first-follow = "compilerlab.first_follow:main"
compilerlab-lex = "compilerlab.lexer:main"
compilerlab-rd = "compilerlab.recursive_descent:main"

[tool.setuptools.packages.find]
include = ["compilerlab*"]

[tool.pytest.ini_options]
addopts = "-ra"
