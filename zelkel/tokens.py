"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Every kind of token the language knows."""

    FN = "fn"
    CLASS = "class"
    STATIC = "static"
    MUT = "mut"
    VAL = "val"
    REQUIRE = "require"
    RETURN = "return"
    LBRACE = "{"
    RBRACE = "}"
    LPAREN = "("
    RPAREN = ")"
    SEMI = ";"
    DOUBLE_COLON = "::"
    COLON = ":"
    COMMA = ","
    ARROW = "->"
    DOT = "."
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    EQ = "="
    AMPERSAND = "&"
    BANG = "!"
    INT = "integer"
    STR = "string"
    IDENT = "identifier"


# Tried in this order, so longer symbols come before their prefixes.
SYMBOLS: tuple[tuple[str, TokenKind], ...] = (
    ("->", TokenKind.ARROW),
    ("::", TokenKind.DOUBLE_COLON),
    ("+", TokenKind.PLUS),
    ("-", TokenKind.MINUS),
    ("*", TokenKind.STAR),
    ("/", TokenKind.SLASH),
    ("=", TokenKind.EQ),
    ("&", TokenKind.AMPERSAND),
    ("!", TokenKind.BANG),
    (";", TokenKind.SEMI),
    (":", TokenKind.COLON),
    (",", TokenKind.COMMA),
    (".", TokenKind.DOT),
    ("{", TokenKind.LBRACE),
    ("}", TokenKind.RBRACE),
    ("(", TokenKind.LPAREN),
    (")", TokenKind.RPAREN),
)

KEYWORDS: dict[str, TokenKind] = {
    "fn": TokenKind.FN,
    "class": TokenKind.CLASS,
    "static": TokenKind.STATIC,
    "mut": TokenKind.MUT,
    "val": TokenKind.VAL,
    "path": TokenKind.REQUIRE,
    "return": TokenKind.RETURN,
    "require": TokenKind.REQUIRE,
}


@dataclass(frozen=True)
class Token:
    """A lexed token: its kind, its offset in the source and, for literals
    and identifiers, its value."""

    kind: TokenKind
    offset: int
    value: int | str | None = None

    def is_kind(self, kind: TokenKind) -> bool:
        """Return whether this token is of the given kind."""
        return self.kind is kind