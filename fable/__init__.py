"""
fable Package

A small front-end for a LISP-like language: a scanner that turns text
into tokens and a parser that turns tokens into a tree of nested lists.

Architecture:
    fable/
    ├── scanner/         # Characters -> tokens
    └── parser/          # Tokens -> tree

Typical use is ``parse(scan(text))``.

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .scanner import Token, TokenType, Scanner, ScanError, ScanErrorKind, scan, unscan
from .parser import Leaf, ListNode, Parser, ParseError, ParseErrorKind, parse, parse_string

__all__ = [
    # Core classes
    "Scanner",
    "Parser",

    # Entry points
    "scan",
    "unscan",
    "parse",
    "parse_string",

    # Values
    "Token",
    "TokenType",
    "Leaf",
    "ListNode",

    # Errors
    "ScanError",
    "ScanErrorKind",
    "ParseError",
    "ParseErrorKind",

    # Version info
    "__version__",
    "__license__",
]
