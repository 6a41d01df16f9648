"""
Construction and batch collection on top of the scanner.
"""

import logging
from typing import List, NamedTuple, Optional

from .tokens import Token
from .errors import ScanError, LexerError
from .scanner import Scanner, ScannerConfig


_logger = logging.getLogger("ScanDriver")


class ScanResult(NamedTuple):
    """Tokens of a complete scan plus the scan errors met on the way."""
    tokens: List[Token]
    errors: List[ScanError]

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def error_tokens(self) -> List[Token]:
        return [token for token in self.tokens if token.is_error]


def create(source: str, config: Optional[ScannerConfig] = None) -> Scanner:
    """
    Create a scanner positioned at the start of `source`.

    Raises:
        EmptyInputError: If source is empty
    """
    return Scanner(source, config)


def tokenize_all(scanner: Scanner) -> ScanResult:
    """
    Run a scanner to the end of its input.

    Returns:
        ScanResult whose tokens end with the EOF token
    """
    errors: List[ScanError] = []
    tokens = list(scanner.tokenize(errors))

    _logger.debug(
        "%s: %d tokens, %d errors",
        scanner.config.filename, len(tokens), len(errors)
    )
    return ScanResult(tokens, errors)


def tokenize_string(source: str, config: Optional[ScannerConfig] = None) -> ScanResult:
    """
    Convenience function to tokenize an expression string.

    Args:
        source: Expression text
        config: Scanner configuration; with `raise_on_error` set the first
            scan error is raised instead of returned

    Returns:
        ScanResult of the whole input

    Raises:
        EmptyInputError: If source is empty
        LexerError: If raise_on_error is set and the input has scan errors
    """
    scanner = create(source, config)
    result = tokenize_all(scanner)

    if scanner.config.raise_on_error and result.has_errors():
        # Raise the first error encountered
        first = result.errors[0]
        raise LexerError(first.message, first)

    return result
