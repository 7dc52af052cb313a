import dataclasses

import pytest

from zelkel.tokens import KEYWORDS, SYMBOLS, Token, TokenKind


def test_token_keeps_kind_offset_and_value():
    token = Token(TokenKind.INT, 7, 42)
    assert token.kind is TokenKind.INT
    assert token.offset == 7
    assert token.value == 42


def test_token_value_defaults_to_none():
    assert Token(TokenKind.SEMI, 0).value is None


def test_equality_includes_offset():
    assert Token(TokenKind.FN, 1) == Token(TokenKind.FN, 1)
    assert Token(TokenKind.FN, 1) != Token(TokenKind.FN, 2)
    assert Token(TokenKind.IDENT, 0, "a") != Token(TokenKind.IDENT, 0, "b")


def test_token_is_immutable():
    token = Token(TokenKind.DOT, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.offset = 4
    assert token.offset == 3
    assert token == Token(TokenKind.DOT, 3)


def test_is_kind():
    token = Token(TokenKind.ARROW, 0)
    assert token.is_kind(TokenKind.ARROW)
    assert not token.is_kind(TokenKind.MINUS)


def test_path_and_require_are_both_require_keywords():
    path_token = Token(KEYWORDS["path"], 0)
    require_token = Token(KEYWORDS["require"], 0)
    assert path_token == Token(TokenKind.REQUIRE, 0)
    assert require_token.is_kind(TokenKind.REQUIRE)


def test_longer_symbols_come_before_their_prefixes():
    tokens = [Token(kind, position) for position, (_, kind) in enumerate(SYMBOLS)]
    position = {token.kind: token.offset for token in tokens}
    assert position[TokenKind.ARROW] < position[TokenKind.MINUS]
    assert position[TokenKind.DOUBLE_COLON] < position[TokenKind.COLON]


def test_symbol_kinds_match_their_text():
    for text, kind in SYMBOLS:
        assert TokenKind(text) is kind
        assert Token(TokenKind(text), 0).is_kind(kind)