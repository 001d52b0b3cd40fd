"""
S-expression Recursive Descent Parser

Reads zero or more S-expressions from a string. One character of lookahead
decides what comes next (two after a sign, to tell `-1` from `->`); lists
are read either on the native call stack or with an explicit stack of
partially filled frames for input of unbounded nesting depth.

Author: xwest
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Tuple, Union

from ..scanner.cursor import Cursor
from ..scanner.location import SourceLocation
from ..errors import (
    ParseError, create_unexpected_eof_error, create_unterminated_list_error,
    create_unexpected_close_paren_error, create_trailing_content_error
)
from .ast_nodes import SExpr, ListExpr
from .atoms import starts_number, parse_number, parse_string, parse_symbol

logger = logging.getLogger(__name__)


class ListStrategy(Enum):
    """How nested lists are read."""
    RECURSIVE = "recursive"    # Native call stack
    ITERATIVE = "iterative"    # Explicit stack; nesting depth limited only by memory


class Parser:
    """
    S-expression parser.

    Holds a cursor over one source string. Parsing is fail-fast: the first
    ParseError propagates to the caller and no partial result is kept.
    """

    def __init__(self, source: str, filename: str = "<string>",
                 strategy: Union[ListStrategy, str] = ListStrategy.RECURSIVE):
        """
        Initialize parser with source text.

        Args:
            source: Text to parse
            filename: Name used in source locations for error reporting
            strategy: ListStrategy (or its value) used for reading lists
        """
        if not isinstance(source, str):
            raise TypeError(f"source must be str, not {type(source).__name__}")

        self.source = source
        self.filename = filename
        self.strategy = ListStrategy(strategy)
        self.cursor = Cursor(source, filename)

        if self.strategy is ListStrategy.RECURSIVE:
            self._parse_list = self._parse_list_recursive
        else:
            self._parse_list = self._parse_list_iterative

        # Characters with a fixed meaning at the start of an expression
        self.prefix_parsers: Dict[str, Callable[[], SExpr]] = {
            "(": self._parse_list,
            ")": self._unexpected_close_paren,
        }

    def parse(self) -> List[SExpr]:
        """
        Parse every expression in the source.

        Returns:
            Expressions in source order; empty for empty or all-whitespace input

        Raises:
            ParseError: On the first syntax error
        """
        self._reset()
        logger.debug("Parsing %s (%d characters, %s lists)",
                     self.filename, len(self.source), self.strategy.value)

        expressions = []
        try:
            while True:
                self.cursor.skip_whitespace()
                if self.cursor.at_end():
                    break
                expressions.append(self.parse_expression())
        except ParseError as e:
            logger.debug("Parse of %s failed: %s", self.filename, e.diagnostic)
            raise

        logger.debug("Parsed %d expression(s) from %s", len(expressions), self.filename)
        return expressions

    def parse_single(self) -> SExpr:
        """
        Parse a source that must contain exactly one expression.

        Raises:
            UnexpectedEOFError: If the source holds no expression
            TrailingContentError: If anything but whitespace follows it
        """
        self._reset()
        try:
            expression = self.parse_expression()
            self.cursor.skip_whitespace()
            if not self.cursor.at_end():
                raise create_trailing_content_error(self.cursor.location())
        except ParseError as e:
            logger.debug("Parse of %s failed: %s", self.filename, e.diagnostic)
            raise
        return expression

    def parse_expression(self) -> SExpr:
        """Parse one expression starting at the next non-whitespace character."""
        self.cursor.skip_whitespace()
        if self.cursor.at_end():
            raise create_unexpected_eof_error("an expression", self.cursor.location())

        prefix_parser = self.prefix_parsers.get(self.cursor.peek())
        if prefix_parser is not None:
            return prefix_parser()
        return self._parse_atom()

    # ------------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------------

    def _parse_list_recursive(self) -> ListExpr:
        open_location = self.cursor.location()
        self.cursor.advance()  # Skip '('
        items: List[SExpr] = []

        while True:
            self.cursor.skip_whitespace()
            if self.cursor.at_end():
                raise create_unterminated_list_error(open_location, self.cursor.location())
            if self.cursor.peek() == ")":
                self.cursor.advance()
                return ListExpr(tuple(items), open_location)
            items.append(self.parse_expression())

    def _parse_list_iterative(self) -> ListExpr:
        # One frame per list still open: where it started and what it holds so far
        stack: List[Tuple[SourceLocation, List[SExpr]]] = [(self.cursor.location(), [])]
        self.cursor.advance()  # Skip '('

        while True:
            self.cursor.skip_whitespace()
            open_location, items = stack[-1]

            if self.cursor.at_end():
                raise create_unterminated_list_error(open_location, self.cursor.location())

            char = self.cursor.peek()
            if char == ")":
                self.cursor.advance()
                stack.pop()
                node = ListExpr(tuple(items), open_location)
                if not stack:
                    return node
                stack[-1][1].append(node)
            elif char == "(":
                stack.append((self.cursor.location(), []))
                self.cursor.advance()
            else:
                items.append(self._parse_atom())

    # ------------------------------------------------------------------------
    # Atoms
    # ------------------------------------------------------------------------

    def _parse_atom(self) -> SExpr:
        if self.cursor.peek() == '"':
            return parse_string(self.cursor)
        if starts_number(self.cursor):
            return parse_number(self.cursor)
        return parse_symbol(self.cursor)

    def _unexpected_close_paren(self) -> SExpr:
        raise create_unexpected_close_paren_error(self.cursor.location())

    def _reset(self):
        self.cursor = Cursor(self.source, self.filename)


def parse(source: str, filename: str = "<string>",
          strategy: Union[ListStrategy, str] = ListStrategy.RECURSIVE) -> List[SExpr]:
    """
    Convenience function to parse every expression in a string.

    Args:
        source: Text to parse
        filename: Name used in source locations for error reporting
        strategy: How nested lists are read

    Returns:
        List of expressions in source order

    Raises:
        ParseError: If parsing fails
    """
    return Parser(source, filename, strategy).parse()


def parse_one(source: str, filename: str = "<string>",
              strategy: Union[ListStrategy, str] = ListStrategy.RECURSIVE) -> SExpr:
    """
    Convenience function to parse a string holding exactly one expression.

    Raises:
        ParseError: If parsing fails, the string is empty, or more than one
            expression is present
    """
    return Parser(source, filename, strategy).parse_single()
