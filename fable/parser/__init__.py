"""
fable Parser Package

Builds a tree of nested lists from the scanner's flat token list.

Key Features:
- Recursive descent run on an explicit stack (no recursion limit)
- Immutable Leaf / ListNode tree with depth, leaf count and
  plain-list views
- Strict balance checking: no tokens are ever silently dropped
"""

from .tree import Leaf, ListNode, Node
from .parser import Parser, parse, parse_string
from .errors import ParseError, ParseErrorKind

__all__ = [
    # Core parser
    "Parser",
    "parse",
    "parse_string",

    # Tree nodes
    "Leaf", "ListNode", "Node",

    # Error handling
    "ParseError", "ParseErrorKind",
]
