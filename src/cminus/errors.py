"""
C- Scanner Error Hierarchy
==========================

This module defines the exception hierarchy for the C- scanner.
All exceptions inherit from CMinusError, allowing callers to catch all
scanner-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
CMinusError (base)
└── LexicalError - a lexical error located in the source
    └── TooManyErrors - error limit reached while collecting

Lexical errors do not interrupt scanning: the scanner reports them as
ERROR tokens inside the normal token stream. The classes here are used
when a caller wants to turn those tokens into diagnostics, for example
the ``--strict`` mode of the command-line driver.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from cminus.scanner.tokens import Token


# =============================================================================
# Base Exception Class
# =============================================================================

class CMinusError(Exception):
    """
    Base exception for all C- scanner errors.

        try:
            tokens = scan_source(text)
        except CMinusError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Errors
# =============================================================================

# Hints for the error tokens the scanner can produce, keyed by message.
# Lexemes may be clipped by the lexeme limit; messages never are.
_HINTS = {
    "'!' must be followed by '='": "'!' is only valid as part of '!='",
    "'&' must be followed by '&'": "'&' is only valid as part of '&&'",
    "'|' must be followed by '|'": "'|' is only valid as part of '||'",
    "unterminated block comment": "add closing */ to terminate the comment",
}


class LexicalError(CMinusError):
    """
    Lexical error in C- source code.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            loop.c-:3:7: error: invalid character '@'
                x = y @ 2;
                      ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)

    @classmethod
    def from_token(
        cls,
        token: "Token",
        source_line: Optional[str] = None,
    ) -> "LexicalError":
        """
        Build a LexicalError describing an ERROR token.

        Args:
            token: The ERROR token produced by the scanner
            source_line: Text of the line the token starts on (optional)
        """
        message = token.message or f"invalid token '{token.lexeme}'"
        return cls(
            message,
            location=token.location,
            hint=_HINTS.get(message),
            source_line=source_line,
        )


# =============================================================================
# Error Collection for Multiple Error Reporting
# =============================================================================

class ErrorCollector:
    """
    Collects multiple lexical errors for batch reporting.

    The scan never stops on a lexical error, so a driver can collect
    every error of a file and report them together at the end.

    Example:
        collector = ErrorCollector(max_errors=100)
        for token in scanner.tokenize():
            if token.is_error():
                collector.add(LexicalError.from_token(token))

        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to collect before raising TooManyErrors
        """
        self.errors: list[LexicalError] = []
        self.max_errors = max_errors

    def add(self, error: LexicalError) -> None:
        """
        Add an error to the collection.

        Raises:
            TooManyErrors: If max_errors has been reached
        """
        self.errors.append(error)
        if len(self.errors) >= self.max_errors:
            raise TooManyErrors(f"too many errors ({self.max_errors}), stopping")

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def report(self) -> str:
        """Format all errors for display, followed by a summary line."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} lexical {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()


class TooManyErrors(LexicalError):
    """
    Raised when too many errors have been encountered.

    Keeps a driver from flooding the terminal when the input is not
    C- source at all (a binary file, for instance).
    """

    def __init__(self, message: str = "too many errors"):
        super().__init__(message)
