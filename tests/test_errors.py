"""
Tests for error reporting: kinds, codes, locations and diagnostics.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from sexpr import parse, parse_one, ParseError, ErrorKind
from sexpr.errors import ERROR_CODES


class TestErrorReporting(unittest.TestCase):
    """Test cases for ParseError contents."""

    def _error(self, code: str, single: bool = False) -> ParseError:
        with self.assertRaises(ParseError) as ctx:
            if single:
                parse_one(code, filename="input.sexp")
            else:
                parse(code, filename="input.sexp")
        return ctx.exception

    def test_kinds(self):
        cases = [
            ("(a", ErrorKind.UNTERMINATED_LIST),
            ('"abc', ErrorKind.UNTERMINATED_STRING),
            ("1.", ErrorKind.MALFORMED_NUMBER),
            (")", ErrorKind.UNEXPECTED_CLOSE_PAREN),
        ]
        for code, kind in cases:
            with self.subTest(code=code):
                self.assertIs(self._error(code).kind, kind)

        self.assertIs(self._error("", single=True).kind, ErrorKind.UNEXPECTED_EOF)
        self.assertIs(self._error("a b", single=True).kind, ErrorKind.TRAILING_CONTENT)

    def test_every_kind_has_a_code(self):
        for kind in ErrorKind:
            self.assertIn(kind.code, ERROR_CODES)

    def test_location_across_lines(self):
        error = self._error('(ok)\n  (still ok)\n  (x 1.)')
        self.assertEqual(error.location.filename, "input.sexp")
        self.assertEqual(error.location.line, 3)
        self.assertEqual(error.location.column, 6)
        self.assertEqual(error.offset, 23)

    def test_diagnostic_text(self):
        error = self._error("(a")
        text = str(error)
        self.assertTrue(text.startswith("error[S003]: Unterminated list\n"))
        self.assertIn("--> input.sexp:1:3 (offset 2)", text)
        self.assertIn("help: The opening '(' at input.sexp:1:1 was never closed.", text)
        self.assertEqual(error.diagnostic.code, "S003")

    def test_malformed_number_message_names_lexeme(self):
        error = self._error("(+ 1.5.2 3)")
        self.assertEqual(error.lexeme, "1.5.2")
        self.assertIn("Malformed numeric literal: '1.5.2'", str(error))

    def test_message_attribute(self):
        self.assertEqual(self._error('"abc').message, "Unterminated string literal")


if __name__ == '__main__':
    unittest.main()
