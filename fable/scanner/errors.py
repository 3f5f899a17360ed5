"""
Error handling for the fable scanner.

Scanning stops at the first malformed character; the raised ScanError
carries a Diagnostic with the location, an error code and help text.
"""

from typing import Optional, List
from dataclasses import dataclass
from enum import Enum

from .tokens import SPACE, OPERATOR_CHARS


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the scanned text.

    Only used for diagnostics; tokens themselves do not carry one.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass
class Diagnostic:
    """Base class for scanner and parser diagnostics."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class ScanErrorKind(Enum):
    """Categories of scanner failure."""
    UNRECOGNIZED_CHARACTER = "UnrecognizedCharacter"
    MISSING_OPERATOR_TERMINATOR = "MissingOperatorTerminator"


class ScanError(Exception):
    """
    Exception raised when the scanner meets input it cannot tokenize.

    `kind` tells the two failure modes apart without parsing the message.
    """

    def __init__(
        self,
        kind: ScanErrorKind,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


# Scanner error codes
SCANNER_ERROR_CODES = {
    "S001": "Unrecognized character",
    "S002": "Operator not followed by a space",
}


def _describe(char: str) -> str:
    if char.isprintable():
        return repr(char)
    return f"U+{ord(char):04X}"


def create_unrecognized_character_error(char: str, location: SourceLocation) -> ScanError:
    """Create an error for a character outside the scanner's alphabet."""
    if char in "\t\n\r":
        help_text = "Only the plain space character separates tokens; tabs and newlines are not skipped."
        suggestions = ["Replace the character with a single space"]
    elif char.isprintable():
        help_text = f"The character {char!r} is not a parenthesis, space, operator, digit or ASCII letter."
        suggestions = [f"Operators are: {' '.join(sorted(OPERATOR_CHARS))}"]
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."
        suggestions = []

    return ScanError(
        ScanErrorKind.UNRECOGNIZED_CHARACTER,
        message=f"Unrecognized character: {_describe(char)}",
        location=location,
        code="S001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_missing_operator_terminator_error(
    op: str, found: Optional[str], location: SourceLocation
) -> ScanError:
    """
    Create an error for an operator that is not followed by a space.

    `found` is the character after the operator, or None at end of input.
    """
    found_str = "end of input" if found is None else _describe(found)
    return ScanError(
        ScanErrorKind.MISSING_OPERATOR_TERMINATOR,
        message=f"Operator {op!r} must be followed by a space, found {found_str}",
        location=location,
        code="S002",
        help_text="Every operator is a single character terminated by exactly one space.",
        suggestions=[f"Write {(op + SPACE)!r} instead"]
    )
