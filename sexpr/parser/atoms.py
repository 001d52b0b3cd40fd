"""
Atom parsers: numbers, strings and symbols.

Each parser starts at the cursor's current position, consumes the maximal
run of characters of its lexical class and returns a leaf node located at
the first character of the atom.
"""

from ..scanner.cursor import Cursor, is_delimiter, is_digit
from ..scanner.location import SourceLocation
from ..errors import create_malformed_number_error, create_unterminated_string_error
from .ast_nodes import (
    IntegerLiteral, FloatLiteral, Symbol, StringLiteral, INT32_MIN, INT32_MAX, to_float32
)

SIGNS = ("+", "-")


def starts_number(cursor: Cursor) -> bool:
    """
    Check whether the cursor is at the start of a numeric literal.

    A digit always starts a number. A sign starts one only when the next
    character is a digit, so that `-`, `+` and `->` are read as symbols.
    """
    char = cursor.peek()
    if is_digit(char):
        return True
    return char in SIGNS and is_digit(cursor.peek(1))


def parse_number(cursor: Cursor):
    """
    Parse `[+-]digits[.digits]` into an IntegerLiteral or FloatLiteral.

    Raises:
        MalformedNumberError: If digits are missing, the literal runs into a
            non-delimiter character, or the value does not fit in 32 bits
    """
    start = cursor.pos
    location = cursor.location()

    if cursor.peek() in SIGNS:
        cursor.advance()
    if not is_digit(cursor.peek()):
        _fail(cursor, start, location, "A sign must be followed by at least one digit.")
    _skip_digits(cursor)

    is_float = False
    if cursor.peek() == ".":
        cursor.advance()
        if not is_digit(cursor.peek()):
            _fail(cursor, start, location, "A decimal point must be followed by at least one digit.")
        _skip_digits(cursor)
        is_float = True

    if not cursor.at_end() and not is_delimiter(cursor.peek()):
        _fail(cursor, start, location,
              "A number must end at whitespace, a parenthesis or the end of input.")

    lexeme = cursor.slice(start, cursor.pos)

    if is_float:
        try:
            value = to_float32(lexeme)
        except OverflowError:
            raise create_malformed_number_error(
                lexeme, location, "The value is too large for a 32-bit float.") from None
        return FloatLiteral(value, location)

    value = int(lexeme)
    if not INT32_MIN <= value <= INT32_MAX:
        raise create_malformed_number_error(
            lexeme, location,
            f"The value does not fit in a 32-bit signed integer ({INT32_MIN} to {INT32_MAX}).")
    return IntegerLiteral(value, location)


def parse_string(cursor: Cursor) -> StringLiteral:
    """
    Parse a double-quoted string. There are no escape sequences: the next
    '"' always closes the string.

    Raises:
        UnterminatedStringError: If the input ends before the closing quote
    """
    location = cursor.location()
    cursor.advance()  # Skip opening quote
    start = cursor.pos

    while cursor.peek() != '"':
        if cursor.at_end():
            raise create_unterminated_string_error(location)
        cursor.advance()

    value = cursor.slice(start, cursor.pos)
    cursor.advance()  # Skip closing quote
    return StringLiteral(value, location)


def parse_symbol(cursor: Cursor) -> Symbol:
    """Parse a run of characters up to whitespace, a parenthesis or end of input."""
    location = cursor.location()
    start = cursor.pos
    while not cursor.at_end() and not is_delimiter(cursor.peek()):
        cursor.advance()
    return Symbol(cursor.slice(start, cursor.pos), location)


def _skip_digits(cursor: Cursor):
    while is_digit(cursor.peek()):
        cursor.advance()


def _fail(cursor: Cursor, start: int, location: SourceLocation, reason: str):
    # Report the whole offending atom, not just the part scanned so far
    while not cursor.at_end() and not is_delimiter(cursor.peek()):
        cursor.advance()
    raise create_malformed_number_error(cursor.slice(start, cursor.pos), location, reason)
