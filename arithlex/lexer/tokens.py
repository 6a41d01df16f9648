"""
Token definitions for the arithlex scanner.

Arithmetic expressions only need a handful of token kinds:
- Numeric literals (integers and floats)
- Single-character operators and parentheses
- EOF and ERROR markers

Tokens carry no text of their own, just an offset and a length into the
source string. Use `Token.lexeme(source)` to get the covered text back.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict


class TokenType(Enum):
    """Enumeration of all token kinds the scanner can produce."""

    # Numeric literals
    INTEGER = auto()                # 42
    FLOAT = auto()                  # 3.14, 5.

    # Arithmetic operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    POWER = auto()                  # ^

    # Grouping
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )

    # Special tokens
    EOF = auto()                    # End of input
    ERROR = auto()                  # Illegal character or malformed number


@dataclass(frozen=True)
class SourceLocation:
    """
    Human-readable location of an offset in the source.

    Lines and columns are 1-based, offset is the 0-based character index.
    """
    filename: str
    line: int
    column: int
    offset: int

    @classmethod
    def from_offset(cls, source: str, offset: int, filename: str = "<input>") -> "SourceLocation":
        """Work out the line and column of a character offset."""
        offset = max(0, min(offset, len(source)))
        line = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(filename, line, offset - line_start + 1, offset)

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    A classified, positioned unit of the input.

    `position` is the offset of the first character and `length` the number
    of characters covered (always at least 1, EOF included).
    """
    type: TokenType
    position: int
    length: int = 1

    def __str__(self) -> str:
        return f"{self.type.name}@{self.position}:{self.length}"

    @property
    def end(self) -> int:
        """Offset one past the last covered character."""
        return self.position + self.length

    @property
    def is_error(self) -> bool:
        return self.type == TokenType.ERROR

    @property
    def is_number(self) -> bool:
        return self.type in (TokenType.INTEGER, TokenType.FLOAT)

    @property
    def is_operator(self) -> bool:
        return self.type in OPERATOR_TYPES

    def lexeme(self, source: str) -> str:
        """Return the text this token covers (empty for EOF)."""
        if self.type == TokenType.EOF:
            return ""
        return source[self.position:self.end]


# Lookup table for the one-character tokens
SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "^": TokenType.POWER,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

OPERATOR_TYPES = frozenset({
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.MULTIPLY,
    TokenType.DIVIDE,
    TokenType.POWER,
})
