"""Command line entry point: lex and parse a source file and print the tree."""

from __future__ import annotations

import argparse
import pprint
import sys
from pathlib import Path

from zelkel.lexer import LexError, lex
from zelkel.parser import ParseError, parse_program
from zelkel.syntax import Program


def line_col(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-based line and column of ``offset`` in ``source``."""
    prefix = source[:offset]
    if not prefix:
        return 1, 1
    lines = prefix.split("\n")
    if prefix.endswith("\n"):
        return len(lines), 1
    return len(lines), len(lines[-1]) + 1


def compile_source(source: str) -> Program:
    """Lex and parse ``source``; errors carry line and column in their message."""
    try:
        tokens = lex(source)
    except LexError as err:
        line, col = line_col(source, err.offset)
        message = f"Lex error at line {line}, col {col}: Unexpected character '{err.character}'"
        raise LexError(err.offset, err.character, message) from err

    try:
        return parse_program(tokens)
    except ParseError as err:
        if err.token is None:
            message = "Parse error at end of file"
        else:
            line, col = line_col(source, err.token.offset)
            message = f"Parse error at line {line}, col {col}: {err}"
        raise ParseError(err.token, err.expected, message) from err


def main(argv: list[str] | None = None) -> int:
    """Parse a source file (or standard input) and print its syntax tree."""
    arg_parser = argparse.ArgumentParser(
        prog="zelkel", description="Parse a source file and print its syntax tree."
    )
    arg_parser.add_argument("source", nargs="?", default="-", help="file to parse, or - for stdin")
    args = arg_parser.parse_args(argv)

    try:
        source = sys.stdin.read() if args.source == "-" else Path(args.source).read_text()
    except OSError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    try:
        program = compile_source(source)
    except (LexError, ParseError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print(pprint.pformat(program))
    return 0


if __name__ == "__main__":
    sys.exit(main())