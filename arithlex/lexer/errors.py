"""
Error handling for the arithlex scanner.

Two kinds of problem exist:
- Scan errors (illegal characters, numbers with several decimal points).
  These are plain `ScanError` values collected next to the ERROR tokens,
  so a single bad character never stops the scan.
- Construction errors. An empty input cannot be scanned at all and raises
  `EmptyInputError` straight away.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional

from .tokens import SourceLocation


class ScanErrorKind(Enum):
    """Kinds of non-fatal scan error."""
    MULTIPLE_DECIMAL_POINTS = auto()
    ILLEGAL_CHARACTER = auto()


# Error codes for categorization
ERROR_CODES = {
    "L001": "Illegal character",
    "L002": "Number with multiple decimal points",
}


@dataclass(frozen=True)
class ScanError:
    """A diagnostic describing a malformed region of the input."""
    kind: ScanErrorKind
    position: int
    length: int
    message: str
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"ERROR: {self.message}"
        if self.code:
            result += f" [{self.code}]"
        result += f"\n  --> offset {self.position}, length {self.length}\n"
        if self.help_text:
            result += f"  help: {self.help_text}\n"
        return result

    @property
    def end(self) -> int:
        return self.position + self.length

    def location(self, source: str, filename: str = "<input>") -> SourceLocation:
        return SourceLocation.from_offset(source, self.position, filename)

    def excerpt(self, source: str) -> str:
        """
        Render the source line holding the error with a caret underline.

        Example for "4.5%":

            4.5%
               ^
        """
        line_start = source.rfind("\n", 0, self.position) + 1
        line_end = source.find("\n", self.position)
        if line_end == -1:
            line_end = len(source)

        line = source[line_start:line_end].rstrip("\r")
        column = self.position - line_start
        underline = max(1, min(self.length, len(line) - column))
        return f"{line}\n{' ' * column}{'^' * underline}"


class LexerError(Exception):
    """
    Exception raised when scanning cannot go on, or when a caller asked for
    scan errors to be fatal.
    """

    def __init__(self, message: str, error: Optional[ScanError] = None):
        super().__init__(message)
        self.error = error

    def __str__(self) -> str:
        if self.error is not None:
            return str(self.error)
        return super().__str__()


class EmptyInputError(LexerError):
    """Raised when a scanner is created for an empty string."""

    def __init__(self):
        super().__init__("tokenizer cannot be created for an empty string")


def create_illegal_character_error(char: str, position: int) -> ScanError:
    """Create an error for a character no token starts with."""
    if char == ".":
        help_text = "A decimal point must follow at least one digit, e.g. 0.5"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in an arithmetic expression."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return ScanError(
        kind=ScanErrorKind.ILLEGAL_CHARACTER,
        position=position,
        length=1,
        message=f"illegal character: {char!r}",
        code="L001",
        help_text=help_text,
    )


def create_multiple_decimal_points_error(lexeme: str, position: int) -> ScanError:
    """Create an error for a numeric literal with more than one '.'."""
    return ScanError(
        kind=ScanErrorKind.MULTIPLE_DECIMAL_POINTS,
        position=position,
        length=len(lexeme),
        message=f"number with multiple decimal points: '{lexeme}'",
        code="L002",
        help_text="A number may contain at most one decimal point.",
    )
