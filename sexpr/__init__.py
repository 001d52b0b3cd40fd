"""
sexpr - S-expression reader

Converts text containing zero or more nested parenthesized expressions into
an abstract syntax tree of integers, floats, symbols, strings and lists.
There is no evaluation; the only contract is syntactic structure.

Architecture:
    sexpr/
    ├── scanner/         # Character cursor and source locations
    ├── parser/          # Atom parsers, recursive descent, AST, printer
    └── errors.py        # Diagnostics and the ParseError hierarchy

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .scanner import Cursor, SourceLocation
from .parser import (
    Parser, ListStrategy, parse, parse_one,
    SExpr, SExprType, SExprVisitor,
    IntegerLiteral, FloatLiteral, Symbol, StringLiteral, ListExpr,
    SExprPrinter, dumps, to_source,
)
from .errors import (
    Diagnostic, ErrorKind, ParseError,
    UnexpectedEOFError, UnterminatedStringError, UnterminatedListError,
    MalformedNumberError, UnexpectedCloseParenError, TrailingContentError,
)

__all__ = [
    # Entry points
    "parse",
    "parse_one",
    "dumps",
    "to_source",
    "Parser",
    "ListStrategy",

    # AST
    "SExpr",
    "SExprType",
    "SExprVisitor",
    "SExprPrinter",
    "IntegerLiteral",
    "FloatLiteral",
    "Symbol",
    "StringLiteral",
    "ListExpr",

    # Positions and errors
    "Cursor",
    "SourceLocation",
    "Diagnostic",
    "ErrorKind",
    "ParseError",
    "UnexpectedEOFError",
    "UnterminatedStringError",
    "UnterminatedListError",
    "MalformedNumberError",
    "UnexpectedCloseParenError",
    "TrailingContentError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
