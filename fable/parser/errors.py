"""
Error handling for the fable parser.

Tokens carry no source position, so parser diagnostics point at an index
into the token sequence instead of a line and column.
"""

from typing import Optional, List
from enum import Enum

from ..scanner.tokens import Token
from ..scanner.errors import Diagnostic


class ParseErrorKind(Enum):
    """Categories of parser failure."""
    UNBALANCED_PARENTHESES = "UnbalancedParentheses"


class ParseError(Exception):
    """
    Exception raised when the token sequence does not form a tree.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        position: int,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.position = position
        self.token = token
        self.diagnostic = Diagnostic(
            message=message,
            location=None,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


# Parser error codes
PARSER_ERROR_CODES = {
    "P001": "Unmatched closing parenthesis",
    "P002": "Unclosed opening parenthesis",
}


def create_unmatched_close_error(position: int, token: Token) -> ParseError:
    """Create an error for a ')' with no '(' left to close."""
    return ParseError(
        ParseErrorKind.UNBALANCED_PARENTHESES,
        message=f"Unmatched ')' at token {position}",
        position=position,
        token=token,
        code="P001",
        help_text="Every ')' must close a '(' that appears earlier at the same nesting level.",
        suggestions=["Remove the extra ')'", "Add the missing '(' before it"]
    )


def create_unclosed_open_error(position: int, depth: int) -> ParseError:
    """
    Create an error for input that ends inside a list.

    `position` is the index of the outermost '(' left open and `depth` is
    how many lists were still open at the end.
    """
    return ParseError(
        ParseErrorKind.UNBALANCED_PARENTHESES,
        message=f"Unclosed '(' at token {position}",
        position=position,
        code="P002",
        help_text=f"Input ended with {depth} list{'' if depth == 1 else 's'} still open.",
        suggestions=[f"Add {depth} closing ')'"]
    )
