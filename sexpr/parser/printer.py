"""
Re-serialization of AST nodes back into S-expression text.

Output uses only the literal forms the reader accepts, so for any valid
input `parse(dumps(parse(text))) == parse(text)`.
"""

from typing import Iterable, Union

import numpy as np

from ..scanner.cursor import is_delimiter, is_digit
from .ast_nodes import (
    SExpr, SExprVisitor, IntegerLiteral, FloatLiteral, Symbol, StringLiteral, ListExpr
)


class SExprPrinter(SExprVisitor):
    """Visitor that renders a node as source text."""

    def visit_integer(self, node: IntegerLiteral) -> str:
        return str(int(node.value))

    def visit_float(self, node: FloatLiteral) -> str:
        # Positional (the reader has no exponent syntax), shortest digits that
        # round-trip the float32, always with a fractional digit
        return np.format_float_positional(node.value, unique=True, trim="0")

    def visit_symbol(self, node: Symbol) -> str:
        name = node.name
        if not name:
            raise ValueError("cannot print an empty symbol")
        if any(is_delimiter(char) for char in name):
            raise ValueError(f"symbol {name!r} contains whitespace or a parenthesis")
        if name[0] == '"':
            raise ValueError(f"symbol {name!r} would be read back as a string")
        if is_digit(name[0]) or (name[0] in "+-" and len(name) > 1 and is_digit(name[1])):
            raise ValueError(f"symbol {name!r} would be read back as a number")
        return name

    def visit_string(self, node: StringLiteral) -> str:
        if '"' in node.value:
            raise ValueError(f"string {node.value!r} contains '\"' and has no literal form")
        return f'"{node.value}"'

    def visit_list(self, node: ListExpr) -> str:
        return "(" + " ".join(item.accept(self) for item in node.items) + ")"


def to_source(node: SExpr) -> str:
    """Render a single node as source text."""
    return node.accept(SExprPrinter())


def dumps(nodes: Union[SExpr, Iterable[SExpr]]) -> str:
    """
    Render a node, or a sequence of top-level nodes one per line.

    Raises:
        ValueError: If a node has no literal form the reader would accept
    """
    if isinstance(nodes, SExpr):
        return to_source(nodes)
    printer = SExprPrinter()
    return "\n".join(node.accept(printer) for node in nodes)
