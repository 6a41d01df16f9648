"""
arithlex Lexer Package

Scanner for arithmetic expressions: integers, floats, + - * / ^ and
parentheses. Every token carries its offset and length so a downstream
parser can point at the exact source of an error.

Key Features:
- Single pass, one character of lookahead
- Malformed numbers ("4..5") become one ERROR token over the whole run
- Scan errors are collected, not raised, so scanning never stops early
- Pull-based (`Scanner.next_token`) or batch (`tokenize_all`) use
"""

from .tokens import Token, TokenType, SourceLocation
from .errors import ScanError, ScanErrorKind, LexerError, EmptyInputError
from .scanner import Scanner, ScannerConfig
from .driver import ScanResult, create, tokenize_all, tokenize_string

__all__ = [
    "Scanner",
    "ScannerConfig",
    "Token",
    "TokenType",
    "SourceLocation",
    "ScanError",
    "ScanErrorKind",
    "LexerError",
    "EmptyInputError",
    "ScanResult",
    "create",
    "tokenize_all",
    "tokenize_string",
]
