"""
Tree node definitions for fable.

A parse produces a ListNode whose children are Leaf nodes (one per
symbol, integer or operator token) and nested ListNodes (one per matched
pair of parentheses). Nodes are immutable; every ListNode owns its
children tuple outright, so no node is shared between two parents.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple, Union

from ..scanner.tokens import Token, TokenType, ATOM_TYPES, SPACE, int_to_digits


@dataclass(frozen=True)
class Leaf:
    """A single atom: the payload of a SYMBOL, INTEGER or OPERATOR token."""
    type: TokenType
    value: Any

    def __post_init__(self):
        if self.type not in ATOM_TYPES:
            raise ValueError(f"{self.type.name} tokens cannot be leaves")

    @classmethod
    def from_token(cls, token: Token) -> "Leaf":
        return cls(token.type, token.value)

    def text(self) -> str:
        """The atom as it would be written in source."""
        if self.type is TokenType.INTEGER:
            return int_to_digits(self.value)
        return self.value

    def __str__(self) -> str:
        return self.text()

    def __repr__(self) -> str:
        return f"Leaf({self.type.name}, {self.text()!r})"


@dataclass(frozen=True)
class ListNode:
    """
    An ordered sequence of nodes, corresponding to one '(' ... ')' span.

    The top-level parse result is also a ListNode, standing for the whole
    input without an extra pair of parentheses around it.
    """
    children: Tuple["Node", ...] = ()

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator["Node"]:
        return iter(self.children)

    def __getitem__(self, index):
        return self.children[index]

    def __str__(self) -> str:
        return "(" + self.to_source() + ")"

    def walk(self) -> Iterator["Node"]:
        """
        Yield this node and every node below it in pre-order.

        Uses an explicit stack so arbitrarily deep trees are safe.
        """
        stack: List[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, ListNode):
                stack.extend(reversed(node.children))

    @property
    def depth(self) -> int:
        """
        Deepest nesting of lists below this one.

        A list holding only leaves has depth 0; each nested list adds 1.
        """
        deepest = 0
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            for child in node.children:
                if isinstance(child, ListNode):
                    stack.append((child, level + 1))
        return deepest

    @property
    def leaf_count(self) -> int:
        return sum(1 for node in self.walk() if isinstance(node, Leaf))

    def to_python(self) -> List[Any]:
        """Convert to plain nested lists of payloads, e.g. ["foo", ["bar"]]."""
        root: List[Any] = []
        stack = [(self, root)]
        while stack:
            node, out = stack.pop()
            for child in node.children:
                if isinstance(child, ListNode):
                    nested: List[Any] = []
                    out.append(nested)
                    stack.append((child, nested))
                else:
                    out.append(child.value)
        return root

    def to_source(self) -> str:
        """
        Render the children as text that parses back to an equal tree.

        The node's own parentheses are not included, matching the implicit
        top-level list of a parse.
        """
        parts: List[str] = []
        # One iterator per list currently open in the output
        stack = [iter(self.children)]
        need_space = False
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
                if stack:
                    parts.append(")")
                    need_space = True
                continue
            if need_space:
                parts.append(SPACE)
            if isinstance(child, ListNode):
                parts.append("(")
                stack.append(iter(child.children))
                need_space = False
            elif child.type is TokenType.OPERATOR:
                # operator's own terminator doubles as the separator
                parts.append(child.value + SPACE)
                need_space = False
            else:
                parts.append(child.text())
                need_space = True
        return "".join(parts)


Node = Union[Leaf, ListNode]
