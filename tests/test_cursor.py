"""
Tests for the character cursor.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from sexpr.scanner.cursor import Cursor, EOF, is_delimiter, is_digit, is_whitespace
from sexpr.scanner.location import SourceLocation
from sexpr.errors import UnexpectedEOFError, ErrorKind


class TestCursor(unittest.TestCase):
    """Test cases for Cursor position handling."""

    def test_peek_does_not_consume(self):
        cursor = Cursor("ab")
        self.assertEqual(cursor.peek(), "a")
        self.assertEqual(cursor.peek(), "a")
        self.assertEqual(cursor.pos, 0)

    def test_peek_ahead(self):
        """peek(1) gives the extra character of lookahead."""
        cursor = Cursor("-1")
        self.assertEqual(cursor.peek(1), "1")
        self.assertEqual(cursor.peek(2), EOF)

    def test_peek_before_start_is_eof(self):
        """A negative offset that reaches before the input does not wrap around."""
        cursor = Cursor("ab")
        self.assertEqual(cursor.peek(-1), EOF)
        cursor.advance()
        self.assertEqual(cursor.peek(-1), "a")
        self.assertEqual(cursor.peek(-2), EOF)

    def test_advance_returns_and_consumes(self):
        cursor = Cursor("xy")
        self.assertEqual(cursor.advance(), "x")
        self.assertEqual(cursor.advance(), "y")
        self.assertTrue(cursor.at_end())
        self.assertEqual(cursor.peek(), EOF)

    def test_advance_at_end_fails(self):
        cursor = Cursor("")
        with self.assertRaises(UnexpectedEOFError) as ctx:
            cursor.advance()
        self.assertEqual(ctx.exception.kind, ErrorKind.UNEXPECTED_EOF)
        self.assertEqual(ctx.exception.offset, 0)

    def test_skip_whitespace(self):
        cursor = Cursor(" \t\r\n  x ")
        cursor.skip_whitespace()
        self.assertEqual(cursor.peek(), "x")
        cursor.skip_whitespace()
        self.assertEqual(cursor.peek(), "x")

    def test_skip_whitespace_to_end(self):
        cursor = Cursor("   ")
        cursor.skip_whitespace()
        self.assertTrue(cursor.at_end())

    def test_empty_source_is_at_end(self):
        self.assertTrue(Cursor("").at_end())

    def test_line_and_column_tracking(self):
        """Newlines move to the next line and reset the column."""
        cursor = Cursor("ab\ncd", filename="demo.sexp")
        for _ in range(4):
            cursor.advance()
        self.assertEqual(cursor.location(), SourceLocation("demo.sexp", 2, 2, 4))
        self.assertEqual(str(cursor.location()), "demo.sexp:2:2")

    def test_slice(self):
        cursor = Cursor("hello world")
        self.assertEqual(cursor.slice(6, 11), "world")


class TestCharacterClasses(unittest.TestCase):
    """Test cases for the character class helpers."""

    def test_delimiters(self):
        for char in " \t\n\r()":
            self.assertTrue(is_delimiter(char), repr(char))
        for char in 'a1"+-.':
            self.assertFalse(is_delimiter(char), repr(char))
        self.assertFalse(is_delimiter(EOF))

    def test_whitespace(self):
        self.assertTrue(is_whitespace("\t"))
        self.assertFalse(is_whitespace("("))

    def test_digits_are_ascii_only(self):
        self.assertTrue(is_digit("0"))
        self.assertTrue(is_digit("9"))
        self.assertFalse(is_digit("²"))
        self.assertFalse(is_digit(EOF))
        self.assertFalse(is_digit("a"))


if __name__ == '__main__':
    unittest.main()
