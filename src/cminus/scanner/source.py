"""
C- Character Source
===================

Line-buffered character reader with one character of pushback.

The scanner pulls characters one at a time through ``next()``. Lines
are fetched lazily from the underlying text stream; once the stream
runs dry ``next()`` returns the ``EOF_CHAR`` sentinel forever after.
``pushback()`` un-reads one character within the current line, which
is all the lookahead the C- grammar needs.

Example Usage
-------------
>>> source = CharacterSource.from_string("x=1\\n")
>>> source.next(), source.next()
('x', '=')
>>> source.pushback()
>>> source.next()
'='
"""

import io
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

logger = logging.getLogger(__name__)

# Returned by next() once the stream is exhausted
EOF_CHAR = ""


class CharacterSource:
    """
    Reads characters from a line-oriented text stream.

    Invariant: the cursor always lies within ``[0, len(current_line)]``.
    Pushback never moves back across a line boundary; un-reading from
    the start of a line is a no-op.

    Usage:
        with CharacterSource.open("prog.c-") as source:
            scanner = Scanner(source)
            ...

    Attributes:
        filename: Name of the source file (for token locations)
    """

    def __init__(
        self,
        stream: Union[Iterable[str], io.TextIOBase],
        filename: str = "<input>",
    ):
        """
        Wrap a text stream.

        Args:
            stream: A text file object or any iterable of lines
            filename: Name of the source file (for error messages)
        """
        self.filename = filename
        self._stream = stream
        self._lines: Iterator[str] = iter(stream)

        self._line = ""
        self._pos = 0
        self._line_number = 0
        self._exhausted = False

        # True when the last next() call returned EOF_CHAR
        self._last_was_eof = False
        self._closed = False

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_string(cls, text: str, filename: str = "<input>") -> "CharacterSource":
        """Create a source reading from an in-memory string."""
        return cls(io.StringIO(text), filename)

    @classmethod
    def open(cls, path: Union[str, Path]) -> "CharacterSource":
        """
        Open a source file for reading.

        Raises:
            OSError: If the file cannot be opened
        """
        stream = open(path, "r", encoding="utf-8", errors="replace")
        logger.debug(f"Opened source file {path}")
        return cls(stream, str(path))

    # =========================================================================
    # Character Access
    # =========================================================================

    def next(self) -> str:
        """
        Consume and return the next character.

        Returns:
            A single character, or EOF_CHAR once the stream is exhausted
        """
        if self._pos >= len(self._line):
            if not self._load_line():
                self._last_was_eof = True
                return EOF_CHAR

        char = self._line[self._pos]
        self._pos += 1
        self._last_was_eof = False
        return char

    def pushback(self) -> None:
        """
        Un-read the character returned by the last next() call.

        Clamped at the start of the current line. Pushing back EOF_CHAR
        does nothing, so the exhausted stream keeps reporting its end.
        """
        if self._last_was_eof:
            return
        if self._pos > 0:
            self._pos -= 1

    def _load_line(self) -> bool:
        """Fetch the next line into the buffer. Return False at end of input."""
        if self._exhausted:
            return False

        # Skip empty strings an arbitrary iterable might produce
        for line in self._lines:
            if line:
                self._line = line
                self._pos = 0
                self._line_number += 1
                logger.debug(f"{self.filename}: loaded line {self._line_number}")
                return True

        # Keep the last line so error reports can still quote it
        self._exhausted = True
        self._pos = len(self._line)
        logger.debug(f"{self.filename}: end of input after {self._line_number} lines")
        return False

    # =========================================================================
    # Position Information
    # =========================================================================

    @property
    def line_number(self) -> int:
        """Number of lines loaded so far (the current line, 1-indexed)."""
        return self._line_number

    @property
    def column(self) -> int:
        """1-indexed column of the most recently returned character."""
        return self._pos

    @property
    def current_line(self) -> str:
        """Text of the current line without its line terminator."""
        return self._line.rstrip("\r\n")

    @property
    def at_end(self) -> bool:
        """True once the underlying stream has no more lines."""
        return self._exhausted

    # =========================================================================
    # Resource Management
    # =========================================================================

    def close(self) -> None:
        """Release the underlying stream. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        close = getattr(self._stream, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "CharacterSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None

    def __repr__(self) -> str:
        return (
            f"CharacterSource({self.filename!r}, line={self._line_number}, "
            f"pos={self._pos})"
        )
