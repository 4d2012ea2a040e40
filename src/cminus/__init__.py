"""
C- Scanner - Lexical Analyzer for the C- Language
=================================================

C- is a teaching subset of C: int and void types, if/else, while and
return, integer literals, identifiers and block comments. This package
provides its lexical analyzer.

Main Components
---------------
- **scanner**: character source, token model and the tokenizer
- **errors**: exception hierarchy and error collection
- **cli**: the ``cmscan`` command-line driver

Quick Start
-----------
Tokenize a string:
    >>> from cminus import scan_source
    >>> for token in scan_source("int x;"):
    ...     print(token.category.value, token.lexeme)
    Palavra-Chave int
    ID x
    Simbolo ;
    FIMARQUIVO

Tokenize a file:
    >>> from cminus import CharacterSource, Scanner
    >>> with CharacterSource.open("prog.c-") as source:
    ...     tokens = list(Scanner(source).tokenize())

Or use the command-line tool:
    $ cmscan prog.c-
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from cminus.errors import (
    CMinusError,
    ErrorCollector,
    LexicalError,
    SourceLocation,
    TooManyErrors,
)
from cminus.scanner import (
    EOF_CHAR,
    KEYWORDS,
    MAX_LEXEME_LENGTH,
    UNTERMINATED_COMMENT,
    CharacterSource,
    Scanner,
    ScannerOptions,
    Token,
    TokenCategory,
    TokenKind,
    scan_source,
)

__all__ = [
    # Version info
    "__version__",
    # Exception hierarchy
    "CMinusError",
    "LexicalError",
    "TooManyErrors",
    "SourceLocation",
    "ErrorCollector",
    # Scanner
    "CharacterSource",
    "EOF_CHAR",
    "Scanner",
    "ScannerOptions",
    "scan_source",
    # Tokens
    "Token",
    "TokenKind",
    "TokenCategory",
    "KEYWORDS",
    "MAX_LEXEME_LENGTH",
    "UNTERMINATED_COMMENT",
]
