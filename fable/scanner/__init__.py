"""
fable Scanner Package

Turns LISP-like source text into a flat list of tokens: parentheses,
symbols, non-negative integers and single-character operators.

Key Features:
- Single left-to-right pass, no backtracking
- Immutable tokens without position information
- Compiler-style diagnostics on the first malformed character
"""

from .tokens import (
    Token, TokenType, OPEN, CLOSE, SPACE, OPERATOR_CHARS,
    symbol, integer, operator
)
from .scanner import Scanner, scan, scan_file, unscan
from .errors import ScanError, ScanErrorKind, SourceLocation, Diagnostic

__all__ = [
    "Scanner",
    "scan",
    "scan_file",
    "unscan",
    "Token",
    "TokenType",
    "OPEN",
    "CLOSE",
    "SPACE",
    "OPERATOR_CHARS",
    "symbol",
    "integer",
    "operator",
    "ScanError",
    "ScanErrorKind",
    "SourceLocation",
    "Diagnostic",
]
