"""
Character cursor for the S-expression reader.

Tracks the read position within the source text and exposes the
character-level operations the atom and list parsers are built from:
lookahead, advancement and whitespace skipping. The cursor knows nothing
about the grammar.

Author: xwest
"""

from .location import SourceLocation
from ..errors import create_unexpected_eof_error


# Returned by peek() past the end of the input
EOF = ""

WHITESPACE = frozenset(" \t\n\r")
DELIMITERS = frozenset("()")


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


def is_delimiter(char: str) -> bool:
    """Check whether a character ends an atom (whitespace or a parenthesis)."""
    return char in WHITESPACE or char in DELIMITERS


def is_digit(char: str) -> bool:
    # ASCII only; str.isdigit() also accepts superscripts and other scripts
    return len(char) == 1 and "0" <= char <= "9"


class Cursor:
    """
    A read position within a source string.

    The only state is the position itself (offset, line and column); the
    source is never modified.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the cursor at the start of the source.

        Args:
            source: Text to read
            filename: Name used in source locations for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1

    def peek(self, offset: int = 0) -> str:
        """Return the character `offset` places ahead without consuming it, or EOF."""
        peek_pos = self.pos + offset
        if 0 <= peek_pos < len(self.source):
            return self.source[peek_pos]
        return EOF

    def advance(self) -> str:
        """
        Consume and return the current character, updating line/column.

        Raises:
            UnexpectedEOFError: If the cursor is already at the end of input
        """
        if self.pos >= len(self.source):
            raise create_unexpected_eof_error("a character", self.location())

        char = self.source[self.pos]
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        return char

    def skip_whitespace(self):
        """Skip a run of whitespace characters, if any."""
        while self.pos < len(self.source) and self.source[self.pos] in WHITESPACE:
            self.advance()

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def location(self) -> SourceLocation:
        """Get the source location of the current position."""
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def slice(self, start: int, end: int) -> str:
        """Get the source text between two offsets."""
        return self.source[start:end]

    def __repr__(self) -> str:
        return f"Cursor({self.filename!r}, pos={self.pos}, line={self.line}, column={self.column})"
