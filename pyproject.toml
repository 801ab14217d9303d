[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tomlite"
version = "0.1.0"
description = "A small TOML tokenizer and value model with helpers for typing, indexing and conversion"
requires-python = ">=3.10"
dependencies = []
keywords = ["toml", "tokenizer", "lexer", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tomlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
