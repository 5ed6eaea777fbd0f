"""
text_buffer.py: Capability interfaces for editor buffers and selections.

The matcher never depends on a concrete editor SDK. It only needs something
that can report a line count and return a line by index, and a selection with
start and end positions. This module defines those two capability sets as
protocols, plus small in-memory implementations used by the CLI and tests.

Classes:
- TextPosition: zero-based (line, column) position
- SelectionRange: protocol for anything exposing start/end positions
- TextSelection: concrete selection built from two positions
- LineSource: protocol for line-indexed text buffers
- InMemoryBuffer: list-backed LineSource
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Union

from .config import config
from .exceptions import InvalidSelectionError


@dataclass(frozen=True)
class TextPosition:
    """A zero-based (line, column) position inside a text buffer."""

    line: int
    column: int

    @classmethod
    def parse(cls, value: str) -> "TextPosition":
        """
        Parse a position written as "LINE:COLUMN".

        Args:
            value: Position string, for example "3:14"

        Returns:
            TextPosition for the given line and column

        Raises:
            InvalidSelectionError: If the string is not two integers separated by ':'
        """
        line_text, sep, column_text = value.strip().partition(":")
        if not sep:
            raise InvalidSelectionError(f"Position must look like LINE:COLUMN, got '{value}'")
        try:
            return cls(int(line_text), int(column_text))
        except ValueError as e:
            raise InvalidSelectionError(
                f"Position must look like LINE:COLUMN, got '{value}'"
            ) from e

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class PositionLike(Protocol):
    line: int
    column: int


class SelectionRange(Protocol):
    """Anything that exposes a start and an end position."""

    @property
    def start(self) -> PositionLike:
        ...

    @property
    def end(self) -> PositionLike:
        ...


@dataclass(frozen=True)
class TextSelection:
    """A selection between two positions, both zero-based."""

    start: TextPosition
    end: TextPosition

    @classmethod
    def caret(cls, line: int = 0, column: int = 0) -> "TextSelection":
        """Create a zero-width selection (a bare cursor)."""
        position = TextPosition(line, column)
        return cls(position, position)

    @classmethod
    def from_bounds(
        cls, start_line: int, start_column: int, end_line: int, end_column: int
    ) -> "TextSelection":
        """Create a selection from its four boundary integers."""
        return cls(TextPosition(start_line, start_column), TextPosition(end_line, end_column))

    @classmethod
    def parse(cls, start: Optional[str], end: Optional[str]) -> "TextSelection":
        """
        Build a selection from "LINE:COLUMN" strings.

        A missing start or end falls back to the other one, so passing only one
        position (or none at all) yields a zero-width selection.
        """
        if start is None and end is None:
            return cls.caret()
        start_pos = TextPosition.parse(start if start is not None else end)
        end_pos = TextPosition.parse(end if end is not None else start)
        return cls(start_pos, end_pos)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def is_single_line(self) -> bool:
        return self.start.line == self.end.line

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


class LineSource(Protocol):
    """A line-indexed text buffer."""

    def line_count(self) -> int:
        ...

    def line_at(self, index: int) -> Union[str, bytes]:
        ...


class InMemoryBuffer:
    """
    LineSource backed by a list of lines.

    Lines keep their terminators when built from text, which mirrors how
    editor hosts hand lines to extensions and lets the concatenated lines
    reproduce the original text.
    """

    def __init__(self, lines: Optional[Sequence[Union[str, bytes]]] = None):
        self._lines: List[Union[str, bytes]] = list(lines or [])

    @classmethod
    def from_text(cls, text: str) -> "InMemoryBuffer":
        """Split text into lines, keeping line endings."""
        return cls(text.splitlines(keepends=True))

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: Optional[str] = None) -> "InMemoryBuffer":
        """
        Load a buffer from a file on disk.

        Args:
            path: File to read
            encoding: Text encoding, defaults to the configured buffer encoding

        Returns:
            InMemoryBuffer holding the file's lines
        """
        encoding = encoding or config.matcher.BUFFER_ENCODING
        # newline="" keeps "\r\n" intact so columns match what the editor shows
        with open(path, "r", encoding=encoding, newline="") as f:
            return cls.from_text(f.read())

    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> Union[str, bytes]:
        return self._lines[index]

    @property
    def text(self) -> str:
        return "".join(
            line if isinstance(line, str) else line.decode(config.matcher.BUFFER_ENCODING)
            for line in self._lines
        )

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"InMemoryBuffer(lines={len(self._lines)})"
