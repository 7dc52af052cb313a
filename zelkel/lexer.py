"""Turns source text into a list of tokens."""

from __future__ import annotations

import re
from collections.abc import Iterator

from zelkel.tokens import KEYWORDS, SYMBOLS, Token, TokenKind

_WHITESPACE = " \t\r\n"
_DIGITS = re.compile(r"[0-9]+")
_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_STRING = re.compile(r'"[^"\\]*"')
_I64_MAX = 2**63 - 1


class LexError(ValueError):
    """Raised when the source holds text that starts no token."""

    def __init__(self, offset: int, character: str, message: str | None = None):
        self.offset = offset
        self.character = character
        super().__init__(
            message or f"unexpected character {character!r} at offset {offset}"
        )


def lex(source: str) -> list[Token]:
    """Lex the whole of ``source``; raise LexError if any of it is left over."""
    return list(_tokens(source))


def _tokens(source: str) -> Iterator[Token]:
    pos = 0
    end = len(source)
    while True:
        while pos < end and source[pos] in _WHITESPACE:
            pos += 1
        if pos >= end:
            return
        token, pos = _next_token(source, pos)
        yield token


def _next_token(source: str, pos: int) -> tuple[Token, int]:
    if match := _DIGITS.match(source, pos):
        value = int(match.group())
        if value > _I64_MAX:
            raise LexError(
                pos, source[pos], f"integer literal out of range at offset {pos}"
            )
        return Token(TokenKind.INT, pos, value), match.end()

    for text, kind in SYMBOLS:
        if source.startswith(text, pos):
            return Token(kind, pos), pos + len(text)

    if match := _IDENT.match(source, pos):
        word = match.group()
        kind = KEYWORDS.get(word)
        token = Token(kind, pos) if kind else Token(TokenKind.IDENT, pos, word)
        return token, match.end()

    if match := _STRING.match(source, pos):
        return Token(TokenKind.STR, pos, match.group()[1:-1]), match.end()

    raise LexError(pos, source[pos])