"""Recursive-descent parser from tokens to a syntax tree.

A parser that does not match its input raises a recoverable mismatch, which
lets alternatives and repetitions backtrack. Once a declaration has been
recognised by its keyword the rest of it is committed: a mismatch there
becomes a hard ParseError that no alternative recovers from.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import TypeVar

from zelkel.syntax import (
    BinaryExpr,
    Block,
    ClassDecl,
    EndingModule,
    Expression,
    ExpressionStatement,
    Function,
    IdentType,
    IntegerLiteral,
    LiteralExpr,
    Operator,
    PointerType,
    Program,
    Require,
    RequireIdentifier,
    RequireModule,
    SizedType,
    Statement,
    Type,
    Variable,
    VariableLiteral,
    to_usize,
)
from zelkel.tokens import Token, TokenKind

T = TypeVar("T")

_BINARY_OPERATORS: dict[TokenKind, tuple[int, Operator]] = {
    TokenKind.PLUS: (1, Operator.ADDITION),
    TokenKind.MINUS: (1, Operator.SUBTRACTION),
    TokenKind.STAR: (2, Operator.MULTIPLICATION),
    TokenKind.SLASH: (2, Operator.DIVISION),
}


def _describe(token: Token) -> str:
    if token.value is None:
        return f"'{token.kind.value}'"
    return f"{token.kind.value} {token.value!r}"


class ParseError(Exception):
    """Raised when the tokens do not form a valid program.

    ``token`` is the token at which parsing failed, or None at the end of
    the input.
    """

    def __init__(
        self,
        token: Token | None,
        expected: str | None = None,
        message: str | None = None,
    ):
        self.token = token
        self.expected = expected
        if message is None:
            found = "end of input" if token is None else _describe(token)
            message = f"unexpected {found}"
            if expected:
                message += f", expected {expected}"
        super().__init__(message)

    @property
    def offset(self) -> int | None:
        """Source offset of the failing token, or None at end of input."""
        return None if self.token is None else self.token.offset


class _Mismatch(ParseError):
    """A recoverable failure: the parser did not match here."""


def _rewinding(method: Callable[..., T]) -> Callable[..., T]:
    """Restore the parser position when the method does not match."""

    @functools.wraps(method)
    def wrapper(self: Parser, *args):
        start = self._pos
        try:
            return method(self, *args)
        except _Mismatch:
            self._pos = start
            raise

    return wrapper


class Parser:
    """Parses a token sequence; each parse method consumes what it matches."""

    def __init__(self, tokens: Sequence[Token]):
        self._tokens = list(tokens)
        self._pos = 0

    # Token-level helpers

    def _peek(self) -> Token | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _peek_is(self, kind: TokenKind) -> bool:
        token = self._peek()
        return token is not None and token.kind is kind

    def _accept(self, kind: TokenKind) -> bool:
        if self._peek_is(kind):
            self._pos += 1
            return True
        return False

    def _expect(self, kind: TokenKind) -> Token:
        token = self._peek()
        if token is None or token.kind is not kind:
            raise _Mismatch(token, f"'{kind.value}'")
        self._pos += 1
        return token

    @contextmanager
    def _committed(self) -> Iterator[None]:
        try:
            yield
        except _Mismatch as err:
            raise ParseError(err.token, err.expected) from err

    def _first_of(self, *alternatives: Callable[[], T]) -> T:
        last: _Mismatch | None = None
        for alternative in alternatives:
            try:
                return alternative()
            except _Mismatch as err:
                last = err
        assert last is not None
        raise last

    def _many(self, parser: Callable[[], T]) -> list[T]:
        items: list[T] = []
        while True:
            try:
                items.append(parser())
            except _Mismatch:
                return items

    # Literals

    @_rewinding
    def _identifier(self) -> str:
        return str(self._expect(TokenKind.IDENT).value)

    @_rewinding
    def _integer(self) -> IntegerLiteral:
        token = self._expect(TokenKind.INT)
        assert isinstance(token.value, int)
        return IntegerLiteral(token.value)

    # Program

    def parse_program(self) -> Program:
        """Parse the whole token sequence as a program."""
        items = self._many(self._head_item)
        if self._pos < len(self._tokens):
            raise ParseError(self._peek())
        return Program(items)

    @_rewinding
    def _head_item(self) -> Statement:
        return self._first_of(self.parse_require, self.parse_class, self.parse_function)

    # Expressions

    @_rewinding
    def parse_expression(self) -> Expression:
        """Parse an arithmetic expression with the usual precedence."""
        return self._expression(0)

    def _expression(self, min_precedence: int) -> Expression:
        left = self._atom()
        while (token := self._peek()) is not None:
            precedence, op = _BINARY_OPERATORS.get(token.kind, (-1, None))
            if op is None or precedence < min_precedence:
                break
            self._pos += 1
            right = self._expression(precedence + 1)
            left = BinaryExpr(left, right, op)
        return left

    @_rewinding
    def _atom(self) -> Expression:
        return self._first_of(self._integer_atom, self._variable_atom, self._parenthesized)

    @_rewinding
    def _integer_atom(self) -> Expression:
        return LiteralExpr(self._integer())

    @_rewinding
    def _variable_atom(self) -> Expression:
        return LiteralExpr(VariableLiteral(self._identifier()))

    @_rewinding
    def _parenthesized(self) -> Expression:
        self._expect(TokenKind.LPAREN)
        inner = self.parse_expression()
        self._expect(TokenKind.RPAREN)
        return inner

    @_rewinding
    def _expression_statement(self) -> Statement:
        expression = self.parse_expression()
        self._expect(TokenKind.SEMI)
        return ExpressionStatement(expression)

    # Types and paths

    @_rewinding
    def parse_type(self) -> Type:
        """Parse ``*T``, ``name`` or ``name{size}``.

        ``name{}`` is read as a plain ``name``; the braces are left in place.
        """
        if self._accept(TokenKind.STAR):
            return PointerType(self.parse_type())
        name = self._identifier()
        after_name = self._pos
        if self._accept(TokenKind.LBRACE):
            if self._peek_is(TokenKind.RBRACE):
                self._pos = after_name
            else:
                size = to_usize(self._integer())
                self._expect(TokenKind.RBRACE)
                return SizedType(name, size)
        return IdentType(name)

    @_rewinding
    def parse_path(self) -> Require:
        """Parse ``a::b::c`` or ``a::b.item``."""
        name = self._identifier()
        if self._accept(TokenKind.DOUBLE_COLON):
            return RequireModule(name, self.parse_path())
        if self._accept(TokenKind.DOT):
            return RequireModule(name, RequireIdentifier(self._identifier()))
        return EndingModule(name)

    # Declarations

    @_rewinding
    def parse_require(self) -> Require:
        """Parse ``require path;``."""
        self._expect(TokenKind.REQUIRE)
        with self._committed():
            path = self.parse_path()
            self._expect(TokenKind.SEMI)
        return path

    @_rewinding
    def parse_class(self) -> ClassDecl:
        """Parse a class: its fields first, then its methods."""
        dynamic = not self._accept(TokenKind.STATIC)
        self._expect(TokenKind.CLASS)
        with self._committed():
            public = self._accept(TokenKind.BANG)
            name = self._identifier()
            self._expect(TokenKind.LBRACE)
        fields = self._many(self.parse_variable)
        methods = self._many(self.parse_function)
        self._expect(TokenKind.RBRACE)
        return ClassDecl(name, fields, methods, public=public, dynamic=dynamic)

    @_rewinding
    def parse_function(self) -> Function:
        """Parse ``[static] fn [!] name() -> type { ... }``."""
        dynamic = not self._accept(TokenKind.STATIC)
        self._expect(TokenKind.FN)
        with self._committed():
            public = self._accept(TokenKind.BANG)
            name = self._identifier()
            self._expect(TokenKind.LPAREN)
            self._expect(TokenKind.RPAREN)
            self._expect(TokenKind.ARROW)
            return_type = self.parse_type()
            block = self.parse_block()
        return Function(name, public, dynamic, return_type, block)

    @_rewinding
    def parse_variable(self) -> Variable:
        """Parse ``[static] val [mut] [!] name: type = expr;``."""
        dynamic = not self._accept(TokenKind.STATIC)
        self._expect(TokenKind.VAL)
        with self._committed():
            mutable = self._accept(TokenKind.MUT)
            public = self._accept(TokenKind.BANG)
            name = self._identifier()
            self._expect(TokenKind.COLON)
            var_type = self.parse_type()
            self._expect(TokenKind.EQ)
            self.parse_expression()
            self._expect(TokenKind.SEMI)
        return Variable(name, var_type, public=public, mutable=mutable, dynamic=dynamic)

    @_rewinding
    def parse_block(self) -> Block:
        """Parse ``{ statement* }``."""
        self._expect(TokenKind.LBRACE)
        statements = self._many(self._statement)
        self._expect(TokenKind.RBRACE)
        return Block(statements)

    @_rewinding
    def _statement(self) -> Statement:
        return self._first_of(
            self.parse_class,
            self.parse_function,
            self.parse_variable,
            self._expression_statement,
        )


def parse_program(tokens: Sequence[Token]) -> Program:
    """Parse a complete token sequence into a Program."""
    return Parser(tokens).parse_program()