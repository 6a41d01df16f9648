"""
arithlex scanner - turns an arithmetic expression into tokens

The scanner is a small cursor-driven state machine. Every call to
`next_token` skips whitespace, looks at one character and either emits a
one-character token, scans a whole number, or flags the character as
illegal. The cursor is the only state that survives between calls.

End of input is `cursor >= len(source)`, never a sentinel character, so a
literal NUL in the input is just another illegal character.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

from .tokens import Token, TokenType, SourceLocation, SINGLE_CHAR_TOKENS
from .errors import (
    ScanError, EmptyInputError, create_illegal_character_error,
    create_multiple_decimal_points_error
)


@dataclass
class ScannerConfig:
    """Configuration for a scanner and the driver functions."""

    # Name shown in diagnostics
    filename: str = "<input>"

    # Make tokenize_string raise the first scan error instead of collecting
    raise_on_error: bool = False


def _is_digit(char: Optional[str]) -> bool:
    # ASCII only, str.isdigit() would accept things like '²' or '٣'
    return char is not None and "0" <= char <= "9"


class Scanner:
    """
    Arithmetic expression scanner.

    Produces one token per `next_token` call. Scan errors are not stored on
    the scanner; pass a list to `next_token` or `tokenize` to collect them.
    A scanner must not be shared between callers.
    """

    def __init__(self, source: str, config: Optional[ScannerConfig] = None):
        """
        Initialize the scanner.

        Args:
            source: Expression text, must not be empty
            config: Optional scanner configuration

        Raises:
            EmptyInputError: If source is an empty string
        """
        if len(source) == 0:
            raise EmptyInputError()

        self.source = source
        self.config = config or ScannerConfig()
        self.cursor = 0
        self._logger = logging.getLogger("Scanner")

    @property
    def current(self) -> Optional[str]:
        """Character under the cursor, None at end of input."""
        if self.cursor < len(self.source):
            return self.source[self.cursor]
        return None

    @property
    def at_end(self) -> bool:
        return self.cursor >= len(self.source)

    def peek(self) -> Optional[str]:
        """Look at the character after the cursor without advancing."""
        peek_pos = self.cursor + 1
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return None

    def advance(self) -> None:
        """Move the cursor forward one character (no-op at end of input)."""
        if self.cursor < len(self.source):
            self.cursor += 1

    def skip_whitespace(self) -> None:
        while not self.at_end and self.source[self.cursor].isspace():
            self.advance()

    def next_token(self, errors: Optional[List[ScanError]] = None) -> Token:
        """
        Scan and return the next token.

        Args:
            errors: Optional list that scan errors get appended to

        Returns:
            The next token. Once the input is exhausted every call returns
            an EOF token at position len(source).
        """
        self.skip_whitespace()

        if self.at_end:
            return Token(TokenType.EOF, len(self.source), 1)

        char = self.source[self.cursor]
        token_type = SINGLE_CHAR_TOKENS.get(char)

        if token_type is not None:
            token = Token(token_type, self.cursor, 1)
        elif _is_digit(char):
            token = self._read_number(errors)
        else:
            token = Token(TokenType.ERROR, self.cursor, 1)
            self._report(create_illegal_character_error(char, self.cursor), errors)

        # Step past the last character of the token
        self.advance()
        return token

    def _read_number(self, errors: Optional[List[ScanError]]) -> Token:
        """
        Scan a numeric literal starting at the digit under the cursor.

        Leaves the cursor on the last character of the literal. The first
        '.' turns the literal into a FLOAT; any further '.' turns it into an
        ERROR but the scan carries on, so the whole malformed run becomes a
        single token. A trailing '.' ("5.") is still a FLOAT.
        """
        start = self.cursor
        token_type = TokenType.INTEGER

        while True:
            lookahead = self.peek()
            if _is_digit(lookahead):
                self.advance()
            elif lookahead == ".":
                self.advance()
                if token_type == TokenType.INTEGER:
                    token_type = TokenType.FLOAT
                else:
                    token_type = TokenType.ERROR
            else:
                break

        length = self.cursor - start + 1
        if token_type == TokenType.ERROR:
            lexeme = self.source[start:start + length]
            self._report(create_multiple_decimal_points_error(lexeme, start), errors)

        return Token(token_type, start, length)

    def _report(self, error: ScanError, errors: Optional[List[ScanError]]) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("%s: %s", self.location_of(error.position), error.message)
        if errors is not None:
            errors.append(error)

    def tokenize(self, errors: Optional[List[ScanError]] = None) -> Iterator[Token]:
        """
        Lazily yield tokens up to and including the EOF token.

        The scanner is consumed by this; create a new one to scan again.
        """
        while True:
            token = self.next_token(errors)
            yield token
            if token.type == TokenType.EOF:
                return

    def lexeme(self, token: Token) -> str:
        """Source text covered by a token."""
        return token.lexeme(self.source)

    def value_of(self, token: Token) -> Union[int, float]:
        """
        Numeric value of an INTEGER or FLOAT token.

        Raises:
            ValueError: If the token is not a number
        """
        if token.type == TokenType.INTEGER:
            return int(self.lexeme(token))
        if token.type == TokenType.FLOAT:
            # float() accepts a trailing '.', e.g. "5."
            return float(self.lexeme(token))
        raise ValueError(f"{token.type.name} token has no numeric value")

    def location_of(self, position: int) -> SourceLocation:
        return SourceLocation.from_offset(self.source, position, self.config.filename)
