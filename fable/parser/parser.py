"""
fable parser - builds a nested list tree from a flat token list.

For example the tokens of "(foo (bar))",

    [OPEN, foo, OPEN, bar, CLOSE, CLOSE]

become the tree ["foo", ["bar"]] wrapped in the implicit top-level list.
The tree is built top-down and left to right: a child list is finished
(up to its matching CLOSE) before its parent carries on with siblings.
"""

from typing import List, Sequence, Tuple

from ..scanner.tokens import Token, TokenType
from ..scanner.scanner import scan
from .tree import Leaf, ListNode, Node
from .errors import create_unmatched_close_error, create_unclosed_open_error


class Parser:
    """
    Recursive-descent parser for fable token lists.

    The descent is run with an explicit stack rather than Python recursion,
    so nesting depth is limited only by memory.
    """

    def __init__(self, tokens: Sequence[Token]):
        """
        Initialize parser with a sequence of tokens.

        Args:
            tokens: Tokens from the scanner
        """
        self.tokens = tokens
        self.current = 0

    def parse(self) -> ListNode:
        """
        Parse the whole token sequence.

        Returns:
            The top-level ListNode

        Raises:
            ParseError: If the parentheses are unbalanced
        """
        self.current = 0
        # Accumulator for the level being built, and the suspended parents.
        # Each parent frame remembers where its '(' was for error reporting.
        level: List[Node] = []
        parents: List[Tuple[List[Node], int]] = []

        while self.current < len(self.tokens):
            token = self.tokens[self.current]

            if token.type is TokenType.OPEN:
                parents.append((level, self.current))
                level = []
            elif token.type is TokenType.CLOSE:
                if not parents:
                    raise create_unmatched_close_error(self.current, token)
                child = ListNode(tuple(level))
                level, _ = parents.pop()
                level.append(child)
            else:
                level.append(Leaf.from_token(token))

            self.current += 1

        if parents:
            raise create_unclosed_open_error(parents[0][1], len(parents))

        return ListNode(tuple(level))


def parse(tokens: Sequence[Token]) -> ListNode:
    """
    Convenience function to parse a token sequence.

    Raises:
        ParseError: If the parentheses are unbalanced
    """
    return Parser(tokens).parse()


def parse_string(text: str, filename: str = "<string>") -> ListNode:
    """
    Scan and parse source text in one step.

    Raises:
        ScanError: If scanning fails
        ParseError: If the parentheses are unbalanced
    """
    return parse(scan(text, filename))
