"""
fable scanner - turns LISP-like text into a flat list of tokens.

One left-to-right pass. At each position the first matching rule wins:
end of input, '(', ')', a single space, an operator (which must be
followed by one space), a run of digits, a run of letters. Anything else
is an error and scanning stops there.
"""

import re
from typing import List, Sequence

from .tokens import (
    Token, TokenType, SPACE, OPERATOR_CHARS, PUNCTUATION, digits_to_int
)
from .errors import (
    SourceLocation, create_unrecognized_character_error,
    create_missing_operator_terminator_error
)


class Scanner:
    """
    Lexical scanner for fable source text.

    Holds the state for one input; each call to `scan()` starts over from
    the beginning.
    """

    # ASCII only
    integer_pattern = re.compile(r'[0-9]+')
    symbol_pattern = re.compile(r'[A-Za-z]+')

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the scanner with source text.

        Args:
            source: Text to scan
            filename: Name used in error locations
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.tokens: List[Token] = []

    def scan(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens in input order (no EOF marker)

        Raises:
            ScanError: On the first character that cannot be scanned
        """
        self.pos = 0
        self.tokens = []

        while self.pos < len(self.source):
            current_char = self.source[self.pos]

            if current_char in PUNCTUATION:
                self.tokens.append(PUNCTUATION[current_char])
                self.pos += 1
            elif current_char == SPACE:
                self.pos += 1
            elif current_char in OPERATOR_CHARS:
                self.tokens.append(self._scan_operator())
            elif '0' <= current_char <= '9':
                self.tokens.append(self._scan_integer())
            elif 'a' <= current_char <= 'z' or 'A' <= current_char <= 'Z':
                self.tokens.append(self._scan_symbol())
            else:
                raise create_unrecognized_character_error(current_char, self._location(self.pos))

        return self.tokens

    def _scan_operator(self) -> Token:
        """Consume an operator and its terminating space."""
        op = self.source[self.pos]
        after = self.pos + 1
        if after >= len(self.source) or self.source[after] != SPACE:
            found = self.source[after] if after < len(self.source) else None
            raise create_missing_operator_terminator_error(op, found, self._location(after))
        self.pos = after + 1
        return Token(TokenType.OPERATOR, op, op)

    def _scan_integer(self) -> Token:
        match = self.integer_pattern.match(self.source, self.pos)
        lexeme = match.group(0)
        self.pos = match.end()
        return Token(TokenType.INTEGER, lexeme, digits_to_int(lexeme))

    def _scan_symbol(self) -> Token:
        match = self.symbol_pattern.match(self.source, self.pos)
        lexeme = match.group(0)
        self.pos = match.end()
        return Token(TokenType.SYMBOL, lexeme, lexeme)

    def _location(self, offset: int) -> SourceLocation:
        """Work out line and column for a character offset."""
        line = self.source.count("\n", 0, offset) + 1
        line_start = self.source.rfind("\n", 0, offset) + 1
        return SourceLocation(self.filename, line, offset - line_start + 1, offset)


def scan(text: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        text: Source text
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        ScanError: If scanning fails
    """
    return Scanner(text, filename).scan()


def scan_file(filepath: str) -> List[Token]:
    """
    Convenience function to scan a source file.

    A single trailing newline is dropped before scanning; any other
    newline is still an unrecognized character.

    Raises:
        ScanError: If scanning fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    if source.endswith("\n"):
        source = source[:-1]

    return scan(source, filepath)


def unscan(tokens: Sequence[Token]) -> str:
    """
    Render tokens back to text that scans to the same tokens.

    Neighbouring tokens are separated by one space except right after '('
    and right before ')'. Operators carry their own terminating space.
    """
    parts: List[str] = []
    previous = None
    for token in tokens:
        if (
            previous is not None
            and previous.type not in (TokenType.OPEN, TokenType.OPERATOR)
            and token.type is not TokenType.CLOSE
        ):
            parts.append(SPACE)
        parts.append(token.lexeme)
        if token.type is TokenType.OPERATOR:
            parts.append(SPACE)
        previous = token
    return "".join(parts)
