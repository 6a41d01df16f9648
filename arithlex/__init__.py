"""
arithlex

Lexical front end for an arithmetic expression parser.

Architecture:
    arithlex/
    └── lexer/           # Tokens, scan errors, scanner and driver

License: MIT
"""

from .version import __version__

__license__ = "MIT"

from .lexer import (
    Scanner, ScannerConfig, Token, TokenType, ScanError, ScanErrorKind,
    LexerError, EmptyInputError, ScanResult, create, tokenize_all, tokenize_string
)

__all__ = [
    "Scanner",
    "ScannerConfig",
    "Token",
    "TokenType",
    "ScanError",
    "ScanErrorKind",
    "LexerError",
    "EmptyInputError",
    "ScanResult",
    "create",
    "tokenize_all",
    "tokenize_string",

    # Version info
    "__version__",
    "__license__",
]
