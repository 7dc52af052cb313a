[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zelkel"
version = "0.1.0"
description = "Lexer and parser front end for the Zelkel programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "parser", "lexer", "language", "syntax tree"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
zelkel = "zelkel.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zelkel"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
