"""
Error handling for the S-expression reader.

Every failure is reported as a ParseError subclass carrying a Diagnostic
with the source location of the problem, an error code, and help text
suitable for showing to whoever wrote the input.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from enum import Enum

from .scanner.location import SourceLocation


@dataclass
class Diagnostic:
    """
    What went wrong and where. The reader only reports errors, so there is
    no severity; `code` is the ErrorKind code (S001..S006).
    """
    message: str
    location: SourceLocation
    code: str
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        lines = [
            f"error[{self.code}]: {self.message}",
            f"  --> {self.location} (offset {self.location.offset})",
        ]
        if self.help_text:
            lines.append(f"  help: {self.help_text}")
        for suggestion in self.suggestions or []:
            lines.append(f"    - {suggestion}")
        return "\n".join(lines) + "\n"


class ErrorKind(Enum):
    """The kinds of failure the reader can report."""
    UNEXPECTED_EOF = "S001"
    UNTERMINATED_STRING = "S002"
    UNTERMINATED_LIST = "S003"
    MALFORMED_NUMBER = "S004"
    UNEXPECTED_CLOSE_PAREN = "S005"
    TRAILING_CONTENT = "S006"

    @property
    def code(self) -> str:
        return self.value


ERROR_CODES = {
    "S001": "Unexpected end of input",
    "S002": "Unterminated string literal",
    "S003": "Unterminated list",
    "S004": "Malformed numeric literal",
    "S005": "Unexpected closing parenthesis",
    "S006": "Unexpected content after expression",
}


class ParseError(Exception):
    """
    Exception raised when the reader encounters a syntax error.

    Reading is fail-fast: the first ParseError aborts the whole parse and no
    partial result is returned.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            code=self.kind.code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def offset(self) -> int:
        """Character offset of the error from the start of the input."""
        return self.location.offset

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedEOFError(ParseError):
    kind = ErrorKind.UNEXPECTED_EOF


class UnterminatedStringError(ParseError):
    kind = ErrorKind.UNTERMINATED_STRING


class UnterminatedListError(ParseError):
    kind = ErrorKind.UNTERMINATED_LIST

    def __init__(self, message: str, location: SourceLocation,
                 open_location: SourceLocation, **kwargs):
        super().__init__(message, location, **kwargs)
        self.open_location = open_location


class MalformedNumberError(ParseError):
    kind = ErrorKind.MALFORMED_NUMBER

    def __init__(self, message: str, location: SourceLocation, lexeme: str, **kwargs):
        super().__init__(message, location, **kwargs)
        self.lexeme = lexeme


class UnexpectedCloseParenError(ParseError):
    kind = ErrorKind.UNEXPECTED_CLOSE_PAREN


class TrailingContentError(ParseError):
    kind = ErrorKind.TRAILING_CONTENT


# Helper functions for creating common errors

def create_unexpected_eof_error(expected: str, location: SourceLocation) -> UnexpectedEOFError:
    """Create an error for input that ends where more was required."""
    return UnexpectedEOFError(
        message=f"Unexpected end of input, expected {expected}",
        location=location,
        help_text=f"The reader reached the end of the input while expecting {expected}.",
        suggestions=[f"Add the missing {expected}"]
    )


def create_unterminated_string_error(open_location: SourceLocation) -> UnterminatedStringError:
    """Create an error for a string literal with no closing quote."""
    return UnterminatedStringError(
        message="Unterminated string literal",
        location=open_location,
        help_text="String literals must be closed with a matching '\"'.",
        suggestions=["Add a closing '\"'", "String literals have no escape sequences; a '\"' always ends the string"]
    )


def create_unterminated_list_error(open_location: SourceLocation,
                                   current_location: SourceLocation) -> UnterminatedListError:
    """Create an error for a list whose '(' was never closed."""
    return UnterminatedListError(
        message="Unterminated list",
        location=current_location,
        open_location=open_location,
        help_text=f"The opening '(' at {open_location} was never closed.",
        suggestions=["Add a closing ')'", "Check for missing delimiters"]
    )


def create_malformed_number_error(lexeme: str, location: SourceLocation,
                                  reason: str) -> MalformedNumberError:
    """Create an error for an invalid numeric literal."""
    return MalformedNumberError(
        message=f"Malformed numeric literal: '{lexeme}'",
        location=location,
        lexeme=lexeme,
        help_text=reason,
        suggestions=["Numbers are written as [+-]digits[.digits]"]
    )


def create_unexpected_close_paren_error(location: SourceLocation) -> UnexpectedCloseParenError:
    """Create an error for a ')' with no matching '('."""
    return UnexpectedCloseParenError(
        message="Unexpected ')'",
        location=location,
        help_text="This ')' does not close any open list.",
        suggestions=["Remove the extra ')'", "Check for a missing '('"]
    )


def create_trailing_content_error(location: SourceLocation) -> TrailingContentError:
    """Create an error for input that continues after a single expression."""
    return TrailingContentError(
        message="Unexpected content after expression",
        location=location,
        help_text="Exactly one expression was expected, but more input follows it.",
        suggestions=["Remove the extra input", "Use parse() to read several expressions"]
    )
