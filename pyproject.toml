[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hydent"
version = "0.1.0"
description = "Front-end building blocks for the Hydent programming language: tokenizer, symbols, spans, diagnostics and syntax-tree nodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "tokenizer", "lexer", "syntax-tree", "programming-language"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hydent"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
