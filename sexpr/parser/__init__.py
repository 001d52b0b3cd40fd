"""
S-expression Parser Package

Recursive descent parser producing an immutable AST of five node variants,
plus a printer that writes the AST back out as text.

Author: xwest
"""

from .ast_nodes import (
    SExpr, SExprType, SExprVisitor,
    IntegerLiteral, FloatLiteral, Symbol, StringLiteral, ListExpr,
    INT32_MIN, INT32_MAX,
)
from .parser import Parser, ListStrategy, parse, parse_one
from .printer import SExprPrinter, dumps, to_source

__all__ = [
    # Core parser
    "Parser", "ListStrategy", "parse", "parse_one",

    # AST nodes
    "SExpr", "SExprType", "SExprVisitor",
    "IntegerLiteral", "FloatLiteral", "Symbol", "StringLiteral", "ListExpr",
    "INT32_MIN", "INT32_MAX",

    # Printing
    "SExprPrinter", "dumps", "to_source",
]
