"""
S-expression Scanner Package

Character-level cursor over the reader's input: position and line/column
tracking, lookahead, advancement and whitespace skipping.

Author: xwest
"""

from .location import SourceLocation
from .cursor import (
    Cursor, EOF, WHITESPACE, DELIMITERS,
    is_whitespace, is_delimiter, is_digit
)

__all__ = [
    "Cursor",
    "SourceLocation",
    "EOF",
    "WHITESPACE",
    "DELIMITERS",
    "is_whitespace",
    "is_delimiter",
    "is_digit",
]
