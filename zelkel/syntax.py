"""Syntax tree of a parsed program."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Operator(Enum):
    """Arithmetic operators."""

    ADDITION = "+"
    SUBTRACTION = "-"
    MULTIPLICATION = "*"
    DIVISION = "/"


# Types


@dataclass
class IdentType:
    """A named type such as ``u64``."""

    name: str


@dataclass
class SizedType:
    """A named type with a size, written ``name{size}``."""

    name: str
    size: int


@dataclass
class PointerType:
    """A pointer to another type, written ``*inner``."""

    inner: Type


Type = Union[IdentType, SizedType, PointerType]


# Literals


@dataclass
class BooleanLiteral:
    value: bool


@dataclass
class IntegerLiteral:
    value: int


@dataclass
class FloatLiteral:
    value: float


@dataclass
class StringLiteral:
    value: str


@dataclass
class VariableLiteral:
    """A reference to a variable by name."""

    name: str


Literal = Union[BooleanLiteral, IntegerLiteral, FloatLiteral, StringLiteral, VariableLiteral]


def to_integer(literal: Literal) -> int:
    """Return the value of an integer literal; raise TypeError for any other."""
    if not isinstance(literal, IntegerLiteral):
        raise TypeError(f"expected an integer literal, got {type(literal).__name__}")
    return literal.value


def to_usize(literal: Literal) -> int:
    """Return an integer literal's value as an unsigned 64-bit number."""
    return to_integer(literal) % (1 << 64)


# Expressions


@dataclass
class BinaryExpr:
    left: Expression
    right: Expression
    op: Operator
    ty: Type | None = None


@dataclass
class UnaryExpr:
    right: Expression
    op: Operator
    ty: Type | None = None


@dataclass
class LiteralExpr:
    value: Literal
    ty: Type | None = None


Expression = Union[BinaryExpr, UnaryExpr, LiteralExpr]


# Requires


@dataclass
class RequireModule:
    """A module step in a require path, followed by the rest of the path."""

    name: str
    inner: Require


@dataclass
class EndingModule:
    """The last module of a require path."""

    name: str


@dataclass
class RequireIdentifier:
    """An item named after a ``.`` at the end of a require path."""

    name: str


Require = Union[RequireModule, EndingModule, RequireIdentifier]


# Declarations and statements


@dataclass
class Block:
    statements: list[Statement] = field(default_factory=list)


@dataclass
class Variable:
    name: str
    var_type: Type
    public: bool = False
    mutable: bool = False
    dynamic: bool = True


@dataclass
class Function:
    """A function; ``dynamic`` is False for static functions."""

    name: str
    public: bool
    dynamic: bool
    return_type: Type
    block: Block


@dataclass
class ClassDecl:
    name: str
    fields: list[Variable] = field(default_factory=list)
    methods: list[Function] = field(default_factory=list)
    public: bool = False
    dynamic: bool = True


@dataclass
class ExpressionStatement:
    expression: Expression


Statement = Union[
    RequireModule,
    EndingModule,
    RequireIdentifier,
    ClassDecl,
    Function,
    Variable,
    ExpressionStatement,
    Block,
]


@dataclass
class Program:
    items: list[Statement] = field(default_factory=list)