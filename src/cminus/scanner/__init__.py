"""
C- Scanner
==========

Lexical analysis for C-, a small subset of C with six keywords
(if, else, int, return, void, while), integer literals, identifiers,
block comments and the usual arithmetic, relational and logical
operators.

Pipeline
--------
    Text stream → CharacterSource → Scanner → Token stream

The CharacterSource hands out one character at a time with one
character of pushback; the Scanner turns those characters into tokens
on demand. Nothing is read ahead of the token being scanned.

Usage
-----
>>> from cminus.scanner import scan_source
>>> [t.lexeme for t in scan_source("int x;")]
['int', 'x', ';', '']
"""

from cminus.scanner.source import CharacterSource, EOF_CHAR
from cminus.scanner.tokens import (
    KEYWORDS,
    MAX_LEXEME_LENGTH,
    SYMBOLS,
    Token,
    TokenCategory,
    TokenKind,
)
from cminus.scanner.lexer import (
    UNTERMINATED_COMMENT,
    Scanner,
    ScannerOptions,
    scan_source,
)

__all__ = [
    # Character source
    "CharacterSource",
    "EOF_CHAR",
    # Tokens
    "KEYWORDS",
    "MAX_LEXEME_LENGTH",
    "SYMBOLS",
    "Token",
    "TokenCategory",
    "TokenKind",
    # Scanner
    "UNTERMINATED_COMMENT",
    "Scanner",
    "ScannerOptions",
    "scan_source",
]
