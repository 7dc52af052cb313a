# zelkel

A front end for the Zelkel language. It has a lexer that turns source text
into tokens and a parser that builds a syntax tree from those tokens.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The language, briefly

```
require std::io.print;

class! String {
  val mut length: u64 = 0;
  val mut capacity: u64 = 0;
  val mut data: *u8 = 0;

  static fn! new() -> *Self {
    val test: i32 = 13;
  }
}
```

- `require a::b.c;` names a module path. `::` steps into a submodule and `.`
  names a single item at the end of the path. `path` is accepted as another
  spelling of `require`. Requires may appear only at the top level.
- `class` declares a class. A `!` after the keyword makes it public, and a
  leading `static` makes it static. All fields come first, then all methods.
- `val` declares a variable. It may be marked `mut`, may be made public with
  `!` and may be made static with a leading `static`. It always has a type
  and an initial expression.
- `fn` declares a function. A function takes no parameters and has a `->`
  return type and a block body. It may be made public with `!` and static
  with a leading `static`.
- A block holds classes, functions, variables and expression statements
  (`expr;`).
- A type is a plain name (`u64`), a pointer (`*u8`) or a sized name
  (`u8{16}`). `u8{}` is read as the plain name `u8`, and the braces are left
  unparsed.
- An expression is built from integers, identifiers and parentheses, joined
  by `+ - * /`. `*` and `/` bind tighter than `+` and `-`.
- Whitespace separates tokens. The language has no comments.

## Command line

```
zelkel program.zk
```

This parses the file and prints its syntax tree. With no argument, or with
`-`, it reads from standard input instead. Lexing and parsing errors go to
standard error with the line and column where they occurred, and the exit
status is 1.

## Library use

```python
from zelkel.lexer import lex, LexError
from zelkel.parser import parse_program, ParseError

source = "require test;"
tokens = lex(source)
program = parse_program(tokens)
for item in program.items:
    print(item)
```

### Lexing

- `zelkel.lexer.lex(source)` returns a list of `zelkel.tokens.Token`.
- Each token has a `kind` (a `TokenKind`), an `offset` in the source and,
  for integers, strings and identifiers, a `value`.
- `lex` raises `LexError` for text that starts no token, and for integer
  literals larger than a signed 64-bit value. A `LexError` carries `offset`
  and `character`.

### Parsing

- `zelkel.parser.parse_program(tokens)` returns a `zelkel.syntax.Program`,
  whose `items` are the top-level requires, classes and functions.
- It raises `ParseError` when the tokens do not form a program. A
  `ParseError` carries the failing `token`, which is `None` at end of input.
  It also has an `offset` and an `expected` description when one is known.

### Finer control

`zelkel.parser.Parser(tokens)` exposes the individual grammar rules as
methods: `parse_program`, `parse_expression`, `parse_type`, `parse_path`,
`parse_require`, `parse_class`, `parse_function`, `parse_variable` and
`parse_block`. Each method consumes the tokens it matches.

### Both stages at once

`zelkel.cli.compile_source(source)` runs both stages in one call. When a
stage fails, it raises the same error type again with a message that
includes the line and column. `zelkel.cli.line_col(source, offset)` returns
the 1-based line and column of a character offset.

### The syntax tree

The tree node classes are dataclasses in `zelkel.syntax`:

- `Program`, `ClassDecl`, `Function`, `Variable` and `Block`
- `ExpressionStatement`
- the require nodes `RequireModule`, `EndingModule` and `RequireIdentifier`
- the expression nodes `BinaryExpr`, `UnaryExpr` and `LiteralExpr`
- the literals `IntegerLiteral`, `VariableLiteral`, `StringLiteral`,
  `BooleanLiteral` and `FloatLiteral`
- the types `IdentType`, `SizedType` and `PointerType`
- the `Operator` enum

`to_integer(literal)` and `to_usize(literal)` return an integer literal's
value. They raise `TypeError` for any other kind of literal.

## What it does not do

The package stops at the syntax tree. It does not check names or types, and
it does not generate code.

Within the parser there are further gaps:

- A variable's initial expression is parsed but not kept in the tree.
- String literals, `return`, `&` and `,` are lexed, but the parser does not
  use them.
- Functions cannot declare parameters.