"""
C- Token Definitions
====================

Token kinds, display categories and the immutable Token record
produced by the scanner.

Token Categories
----------------
| Category      | Display         | Kinds                                  |
|---------------|-----------------|----------------------------------------|
| Keyword       | Palavra-Chave   | if else int return void while          |
| Symbol        | Simbolo         | ( ) [ ] { } , ;                        |
| Operator      | Operador        | + - * / < <= > >= == != = && ||        |
| Identifier    | ID              | letter (letter or digit)*              |
| Number        | NUM             | digit+                                 |
| Error         | ERRO            | invalid characters and constructs      |
| End of input  | FIMARQUIVO      | end of the source stream               |
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from cminus.errors import SourceLocation

# Longest lexeme a token may carry
MAX_LEXEME_LENGTH = 255


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenKind(Enum):
    """Token kinds for the C- language."""

    # === Structural Tokens ===
    EOF = auto()            # End of input
    ERROR = auto()          # Lexical error

    # === Keywords ===
    IF = auto()             # if
    ELSE = auto()           # else
    INT = auto()            # int
    RETURN = auto()         # return
    VOID = auto()           # void
    WHILE = auto()          # while

    # === Symbols ===
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACKET = auto()       # [
    RBRACKET = auto()       # ]
    LBRACE = auto()         # {
    RBRACE = auto()         # }
    COMMA = auto()          # ,
    SEMICOLON = auto()      # ;

    # === Arithmetic Operators ===
    PLUS = auto()           # +
    MINUS = auto()          # -
    STAR = auto()           # *
    SLASH = auto()          # /

    # === Comparison Operators ===
    LT = auto()             # <
    LE = auto()             # <=
    GT = auto()             # >
    GE = auto()             # >=
    EQ = auto()             # ==
    NE = auto()             # !=

    # === Assignment and Logical Operators ===
    ASSIGN = auto()         # =
    AND = auto()            # &&
    OR = auto()             # ||

    # === Identifiers and Literals ===
    IDENTIFIER = auto()     # Variable/function names
    NUMBER = auto()         # Integer literals


class TokenCategory(Enum):
    """Display categories; the value is the label printed by the driver."""

    KEYWORD = "Palavra-Chave"
    SYMBOL = "Simbolo"
    OPERATOR = "Operador"
    IDENTIFIER = "ID"
    NUMBER = "NUM"
    ERROR = "ERRO"
    EOF = "FIMARQUIVO"


# =============================================================================
# Keyword and Category Mapping
# =============================================================================

KEYWORDS: dict[str, TokenKind] = {
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "int": TokenKind.INT,
    "return": TokenKind.RETURN,
    "void": TokenKind.VOID,
    "while": TokenKind.WHILE,
}

SYMBOLS: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}

_OPERATORS = frozenset({
    TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH,
    TokenKind.LT, TokenKind.LE, TokenKind.GT, TokenKind.GE,
    TokenKind.EQ, TokenKind.NE, TokenKind.ASSIGN,
    TokenKind.AND, TokenKind.OR,
})

_CATEGORIES: dict[TokenKind, TokenCategory] = {
    TokenKind.EOF: TokenCategory.EOF,
    TokenKind.ERROR: TokenCategory.ERROR,
    TokenKind.IDENTIFIER: TokenCategory.IDENTIFIER,
    TokenKind.NUMBER: TokenCategory.NUMBER,
}
_CATEGORIES.update({kind: TokenCategory.KEYWORD for kind in KEYWORDS.values()})
_CATEGORIES.update({kind: TokenCategory.SYMBOL for kind in SYMBOLS.values()})
_CATEGORIES.update({kind: TokenCategory.OPERATOR for kind in _OPERATORS})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from C- source code.

    Attributes:
        kind: The TokenKind classification
        lexeme: The matched source text ("" for EOF)
        line: Line number of the first character (1-indexed)
        column: Column number of the first character (1-indexed). The EOF
                token sits one past the last character read, on the last
                line loaded: "x\\n" ends with EOF at 1:3, not 2:1.
        filename: Name of the source file
        message: Diagnostic text for ERROR tokens, None otherwise
    """
    kind: TokenKind
    lexeme: str
    line: int = 0
    column: int = 0
    filename: str = "<input>"
    message: Optional[str] = None

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.kind is TokenKind.EOF:
            return f"Token(EOF, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.lexeme!r}, {self.line}:{self.column})"

    @property
    def category(self) -> TokenCategory:
        """Display category of this token."""
        return _CATEGORIES[self.kind]

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_error(self) -> bool:
        return self.kind is TokenKind.ERROR

    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF
