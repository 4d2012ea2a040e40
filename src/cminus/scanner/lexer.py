"""
C- Lexer (Tokenizer)
====================

This module implements the scanner for C-, a small C subset. It pulls
characters from a CharacterSource and assembles one token per call to
``next_token()``.

The scanner is a dispatch on the first character of each token. Two
character operators are resolved with a single character of lookahead
that is pushed back when it does not pair up.

Token Categories
----------------
- Keywords: if, else, int, return, void, while
- Identifiers: a letter followed by letters and digits
- Numbers: decimal digits only
- Operators: + - * / < <= > >= == != = && ||
- Symbols: ( ) [ ] { } , ;

Comments
--------
- Block: /* comment */ (no nesting, the first */ closes)

Lexical errors never raise. A lone '!', '&' or '|', any character
outside the language, an unterminated comment and a lexeme longer than
the configured limit each become an ERROR token, and the scan goes on.

Example Usage
-------------
>>> from cminus.scanner.lexer import scan_source
>>> for token in scan_source('while (x <= 10) { return; }'):
...     print(token)
Token(WHILE, 'while', 1:1)
Token(LPAREN, '(', 1:7)
Token(IDENTIFIER, 'x', 1:8)
Token(LE, '<=', 1:10)
Token(NUMBER, '10', 1:13)
Token(RPAREN, ')', 1:15)
Token(LBRACE, '{', 1:17)
Token(RETURN, 'return', 1:19)
Token(SEMICOLON, ';', 1:25)
Token(RBRACE, '}', 1:27)
Token(EOF, 1:28)
"""

from dataclasses import dataclass
from typing import Iterator, Optional
import logging
import string

from cminus.scanner.source import CharacterSource, EOF_CHAR
from cminus.scanner.tokens import (
    KEYWORDS,
    MAX_LEXEME_LENGTH,
    SYMBOLS,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)

# Lexeme of the ERROR token for a comment still open at end of input
UNTERMINATED_COMMENT = "Comentario nao fechado"


@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        max_lexeme_length: Longest number or identifier accepted. Longer
                           runs become an ERROR token holding the first
                           max_lexeme_length characters.
        stop_on_error: If True, tokenize() ends right after the first
                       ERROR token instead of scanning on to EOF.
    """
    max_lexeme_length: int = MAX_LEXEME_LENGTH
    stop_on_error: bool = False

    def __post_init__(self) -> None:
        if self.max_lexeme_length < 1:
            raise ValueError(
                f"max_lexeme_length must be at least 1, got {self.max_lexeme_length}"
            )


class Scanner:
    """
    Tokenizes C- source code.

    Usage:
        with CharacterSource.open("prog.c-") as source:
            for token in Scanner(source).tokenize():
                print(token)

    Attributes:
        source: The CharacterSource characters are pulled from
        options: Scanner configuration
        error_count: Number of ERROR tokens produced so far
    """

    WHITESPACE = " \t\n"

    DIGITS = string.digits

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits

    # Tokens decided by their first character alone
    SINGLE_TOKENS: dict[str, TokenKind] = {
        **SYMBOLS,
        "+": TokenKind.PLUS,
        "-": TokenKind.MINUS,
        "*": TokenKind.STAR,
    }

    # first char -> (second char, kind when paired, kind when alone)
    # A None fallback means the first char is invalid on its own.
    PAIRED_OPERATORS: dict[str, tuple[str, TokenKind, Optional[TokenKind]]] = {
        "=": ("=", TokenKind.EQ, TokenKind.ASSIGN),
        "!": ("=", TokenKind.NE, None),
        "&": ("&", TokenKind.AND, None),
        "|": ("|", TokenKind.OR, None),
        "<": ("=", TokenKind.LE, TokenKind.LT),
        ">": ("=", TokenKind.GE, TokenKind.GT),
    }

    def __init__(
        self,
        source: CharacterSource,
        options: Optional[ScannerOptions] = None,
    ):
        self.source = source
        self.options = options or ScannerOptions()
        self.error_count = 0

    @property
    def filename(self) -> str:
        return self.source.filename

    # =========================================================================
    # Public Interface
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Block comments are skipped without producing a token. Once the
        input is exhausted every call returns an EOF token.
        """
        while True:
            char = self._skip_whitespace()

            if char == EOF_CHAR:
                return self._make_token(
                    TokenKind.EOF,
                    "",
                    max(self.source.line_number, 1),
                    self.source.column + 1,
                )

            line = self.source.line_number
            column = self.source.column

            if char != "/":
                return self._scan_token(char, line, column)

            if self.source.next() != "*":
                self.source.pushback()
                return self._make_token(TokenKind.SLASH, "/", line, column)

            if not self._skip_block_comment():
                return self._error(
                    UNTERMINATED_COMMENT,
                    line,
                    column,
                    "unterminated block comment",
                )

            logger.debug(f"{self.filename}:{line}:{column}: skipped block comment")

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including the EOF token.

        With ``options.stop_on_error`` the generator ends after the
        first ERROR token and no EOF token follows.
        """
        while True:
            token = self.next_token()
            yield token

            if token.is_eof():
                return

            if token.is_error() and self.options.stop_on_error:
                logger.debug(f"{token.location}: stopping at first error")
                return

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _skip_whitespace(self) -> str:
        """Consume whitespace and return the first other character."""
        char = self.source.next()
        while char and char in self.WHITESPACE:
            char = self.source.next()
        return char

    def _skip_block_comment(self) -> bool:
        """
        Consume a block comment whose opening '/*' was already read.

        Returns:
            True when the closing '*/' was found, False at end of input
        """
        previous = ""
        while True:
            char = self.source.next()
            if char == EOF_CHAR:
                return False
            if previous == "*" and char == "/":
                return True
            previous = char

    def _scan_token(self, char: str, line: int, column: int) -> Token:
        """Dispatch on the first character of a token."""
        if char in self.SINGLE_TOKENS:
            return self._make_token(self.SINGLE_TOKENS[char], char, line, column)

        if char in self.PAIRED_OPERATORS:
            return self._scan_paired_operator(char, line, column)

        if char in self.DIGITS:
            return self._scan_run(char, self.DIGITS, TokenKind.NUMBER, line, column)

        if char in self.IDENT_START:
            return self._scan_run(char, self.IDENT_CHARS, TokenKind.IDENTIFIER, line, column)

        return self._error(char, line, column, f"invalid character {char!r}")

    def _scan_paired_operator(self, char: str, line: int, column: int) -> Token:
        """Resolve '=', '!', '&', '|', '<' and '>' with one character of lookahead."""
        second, paired_kind, single_kind = self.PAIRED_OPERATORS[char]

        if self.source.next() == second:
            return self._make_token(paired_kind, char + second, line, column)

        self.source.pushback()

        if single_kind is None:
            return self._error(
                char, line, column, f"'{char}' must be followed by '{second}'"
            )
        return self._make_token(single_kind, char, line, column)

    def _scan_run(
        self,
        first: str,
        allowed: str,
        kind: TokenKind,
        line: int,
        column: int,
    ) -> Token:
        """
        Scan a number or an identifier.

        Consumes every following character in ``allowed``, pushing back
        the first one that is not. Only the first ``max_lexeme_length``
        characters are kept; a longer run becomes an ERROR token.
        """
        limit = self.options.max_lexeme_length
        chars = [first]
        length = 1

        while True:
            char = self.source.next()
            if not char or char not in allowed:
                break
            if length < limit:
                chars.append(char)
            length += 1

        self.source.pushback()
        lexeme = "".join(chars)

        if length > limit:
            logger.warning(
                f"{self.filename}:{line}:{column}: lexeme of {length} characters "
                f"truncated to {limit}"
            )
            return self._error(
                lexeme,
                line,
                column,
                f"lexeme exceeds {limit} characters ({length} found)",
            )

        if kind is TokenKind.IDENTIFIER:
            kind = KEYWORDS.get(lexeme, TokenKind.IDENTIFIER)

        return self._make_token(kind, lexeme, line, column)

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _make_token(
        self,
        kind: TokenKind,
        lexeme: str,
        line: int,
        column: int,
        message: Optional[str] = None,
    ) -> Token:
        return Token(
            kind=kind,
            lexeme=lexeme,
            line=line,
            column=column,
            filename=self.filename,
            message=message,
        )

    def _error(self, lexeme: str, line: int, column: int, message: str) -> Token:
        """Create an ERROR token and count it."""
        self.error_count += 1
        logger.debug(f"{self.filename}:{line}:{column}: {message}")
        return self._make_token(
            TokenKind.ERROR,
            lexeme[:self.options.max_lexeme_length],
            line,
            column,
            message,
        )


def scan_source(
    text: str,
    filename: str = "<input>",
    options: Optional[ScannerOptions] = None,
) -> list[Token]:
    """
    Tokenize a string of C- source code.

    Args:
        text: The source code
        filename: Name used in token locations
        options: Scanner configuration (defaults apply when None)

    Returns:
        The token list, ending with EOF unless stop_on_error cut it short
    """
    with CharacterSource.from_string(text, filename) as source:
        return list(Scanner(source, options).tokenize())
