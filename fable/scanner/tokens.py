"""
Token definitions for the fable scanner.

The vocabulary is deliberately tiny:
- Structural markers for opening and closing a list
- Symbols (runs of ASCII letters)
- Non-negative integers (runs of ASCII digits)
- Single-character operators

Tokens carry no source position.
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Dict


class TokenType(Enum):
    """Enumeration of all token types produced by the scanner."""

    # Structure
    OPEN = auto()                   # (
    CLOSE = auto()                  # )

    # Atoms
    SYMBOL = auto()                 # foo, Bar
    INTEGER = auto()                # 0, 42, 1000000
    OPERATOR = auto()               # + - * ...


# The only character treated as whitespace. Tabs and newlines are not.
SPACE = " "

# Operators are always a single character followed by a single SPACE
OPERATOR_CHARS = frozenset("!%*+-<=>^~")

ATOM_TYPES = frozenset({TokenType.SYMBOL, TokenType.INTEGER, TokenType.OPERATOR})

# Python refuses int <-> str conversions past a few thousand digits
# (sys.get_int_max_str_digits), so long digit runs go through in chunks.
DIGIT_CHUNK = 4000


def digits_to_int(digits: str) -> int:
    """Convert a run of ASCII digits to an int of any length."""
    value = 0
    for start in range(0, len(digits), DIGIT_CHUNK):
        chunk = digits[start:start + DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_digits(value: int) -> str:
    """Render a non-negative int of any length as base-10 digits."""
    if value < 10 ** DIGIT_CHUNK:
        return str(value)
    chunks = []
    base = 10 ** DIGIT_CHUNK
    while value >= base:
        value, low = divmod(value, base)
        chunks.append(str(low).zfill(DIGIT_CHUNK))
    chunks.append(str(value))
    return "".join(reversed(chunks))


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    `lexeme` is the raw text the token was scanned from and `value` is its
    payload: None for OPEN/CLOSE, the text for SYMBOL and OPERATOR, and an
    int for INTEGER. Equality ignores the lexeme, so "007" and "7" scan to
    equal INTEGER tokens.
    """
    type: TokenType
    lexeme: str = field(compare=False)
    value: Any

    def _value_text(self) -> str:
        if self.type is TokenType.INTEGER:
            return int_to_digits(self.value)
        return repr(self.value)

    def __str__(self) -> str:
        if self.type is TokenType.INTEGER and self.lexeme != int_to_digits(self.value):
            return f"{self.type.name}({self.lexeme!r} -> {self._value_text()})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self._value_text()})"

    @property
    def is_structural(self) -> bool:
        """Check if this token opens or closes a list."""
        return self.type in (TokenType.OPEN, TokenType.CLOSE)

    @property
    def is_atom(self) -> bool:
        """Check if this token becomes a leaf in the tree."""
        return self.type in ATOM_TYPES


OPEN = Token(TokenType.OPEN, "(", None)
CLOSE = Token(TokenType.CLOSE, ")", None)

PUNCTUATION: Dict[str, Token] = {
    "(": OPEN,
    ")": CLOSE,
}


def symbol(text: str) -> Token:
    """Build a SYMBOL token. `text` must be a non-empty run of ASCII letters."""
    if not text or not all(c.isascii() and c.isalpha() for c in text):
        raise ValueError(f"Not a symbol: {text!r}")
    return Token(TokenType.SYMBOL, text, text)


def integer(value: int) -> Token:
    """Build an INTEGER token from a non-negative int."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"Not a non-negative integer: {value!r}")
    return Token(TokenType.INTEGER, int_to_digits(value), value)


def operator(char: str) -> Token:
    """Build an OPERATOR token from one of OPERATOR_CHARS."""
    if char not in OPERATOR_CHARS:
        raise ValueError(f"Not an operator: {char!r}")
    return Token(TokenType.OPERATOR, char, char)
