"""
Abstract Syntax Tree node definitions for S-expressions.

A closed set of five immutable node variants. Each node records the source
location it was read from and supports the visitor pattern.

Numeric payloads are 32-bit: IntegerLiteral holds a numpy.int32 and
FloatLiteral a numpy.float32. Symbol and StringLiteral hold str copies of
the input text (Python strings cannot view into another string), so a
node tree never keeps the source buffer alive.

Author: xwest
"""

import operator
from fractions import Fraction
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional, Tuple

import numpy as np

from ..scanner.location import SourceLocation


INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)
FLOAT32_MAX = np.finfo(np.float32).max
# Halfway between FLOAT32_MAX and the next power of two; anything at or past it rounds to infinity
FLOAT32_OVERFLOW = Fraction(int(FLOAT32_MAX)) + 2 ** 103


def to_float32(value) -> np.float32:
    """
    Round a decimal string or a number to the nearest float32, ties to even.

    Going through a Python float first can round twice and land one ulp off,
    so the candidates around the first guess are compared against the exact
    value.

    Raises:
        OverflowError: If the value rounds to infinity in 32 bits
        ValueError: If the value is NaN or not a number
    """
    exact = Fraction(value) if isinstance(value, str) else Fraction(float(value))
    if abs(exact) >= FLOAT32_OVERFLOW:
        raise OverflowError(f"{value!r} is out of range for a 32-bit float")
    if exact == 0:
        return np.float32(float(value))  # keeps the sign of -0.0

    with np.errstate(over="ignore", under="ignore"):
        guess = np.float32(float(exact))
    if not np.isfinite(guess):
        guess = np.copysign(FLOAT32_MAX, guess)

    inf = np.float32(np.inf)
    candidates = [guess, np.nextafter(guess, inf), np.nextafter(guess, -inf)]
    return min(
        (c for c in candidates if np.isfinite(c)),
        key=lambda c: (abs(Fraction(float(c)) - exact), _has_odd_mantissa(c)),
    )


def _has_odd_mantissa(value: np.float32) -> bool:
    return bool(np.array(value, dtype=np.float32).view(np.uint32) & 1)


class SExprType(Enum):
    """Enumeration of all AST node types."""
    INTEGER = "Integer"
    FLOAT = "Float"
    SYMBOL = "Symbol"
    STRING = "String"
    LIST = "List"


class SExprVisitor(ABC):
    """
    Visitor interface for traversing AST nodes.

    Every variant has its own abstract method, so a visitor that does not
    handle all five cannot be instantiated.
    """

    @abstractmethod
    def visit_integer(self, node: 'IntegerLiteral') -> Any:
        pass

    @abstractmethod
    def visit_float(self, node: 'FloatLiteral') -> Any:
        pass

    @abstractmethod
    def visit_symbol(self, node: 'Symbol') -> Any:
        pass

    @abstractmethod
    def visit_string(self, node: 'StringLiteral') -> Any:
        pass

    @abstractmethod
    def visit_list(self, node: 'ListExpr') -> Any:
        pass


class SExpr(ABC):
    """Base class for all AST nodes."""

    node_type: SExprType

    @abstractmethod
    def accept(self, visitor: SExprVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    def children(self) -> List['SExpr']:
        """Get all child nodes."""
        return []

    @property
    def is_atom(self) -> bool:
        return self.node_type is not SExprType.LIST


# ============================================================================
# Atoms
# ============================================================================

@dataclass(frozen=True)
class IntegerLiteral(SExpr):
    """Decimal integer literal, e.g. 42 or -1728."""
    value: np.int32
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    node_type = SExprType.INTEGER

    def __post_init__(self):
        value = operator.index(self.value)
        if not INT32_MIN <= value <= INT32_MAX:
            raise ValueError(f"integer {value} does not fit in 32 bits")
        object.__setattr__(self, "value", np.int32(value))

    def accept(self, visitor: SExprVisitor) -> Any:
        return visitor.visit_integer(self)

    def __repr__(self) -> str:
        return f"IntegerLiteral({int(self.value)})"


@dataclass(frozen=True)
class FloatLiteral(SExpr):
    """Decimal literal with a fractional part, e.g. -3.14."""
    value: np.float32
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    node_type = SExprType.FLOAT

    def __post_init__(self):
        try:
            value = to_float32(self.value)
        except (OverflowError, ValueError) as exc:
            raise ValueError(f"float {self.value!r} is not a finite 32-bit value") from exc
        object.__setattr__(self, "value", value)

    def accept(self, visitor: SExprVisitor) -> Any:
        return visitor.visit_float(self)

    def __repr__(self) -> str:
        return f"FloatLiteral({self.value})"


@dataclass(frozen=True)
class Symbol(SExpr):
    """Identifier token, e.g. lambda, *, -> or e^2*x/y."""
    name: str
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    node_type = SExprType.SYMBOL

    def accept(self, visitor: SExprVisitor) -> Any:
        return visitor.visit_symbol(self)

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"


@dataclass(frozen=True)
class StringLiteral(SExpr):
    """Quoted literal; `value` excludes the quotes."""
    value: str
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    node_type = SExprType.STRING

    def accept(self, visitor: SExprVisitor) -> Any:
        return visitor.visit_string(self)

    def __repr__(self) -> str:
        return f"StringLiteral({self.value!r})"


# ============================================================================
# Lists
# ============================================================================

@dataclass(frozen=True)
class ListExpr(SExpr):
    """Parenthesized sequence of sub-expressions, possibly empty."""
    items: Tuple[SExpr, ...] = ()
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    node_type = SExprType.LIST

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def accept(self, visitor: SExprVisitor) -> Any:
        return visitor.visit_list(self)

    def children(self) -> List[SExpr]:
        return list(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[SExpr]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __repr__(self) -> str:
        return f"ListExpr({list(self.items)!r})"

