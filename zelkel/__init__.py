"""Lexer, parser and syntax tree for the Zelkel programming language."""

__version__ = "0.1.0"