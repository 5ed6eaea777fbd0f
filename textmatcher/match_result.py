"""
match_result.py: The result of matching a selection.

A MatchResult pairs the full text of the touched lines with the range of the
selected part inside it. The range comes from a substring search, so when the
selected text also appears earlier in the full text the range points at that
earlier occurrence.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .clipboard import ClipboardProvider, read_clipboard_text


@dataclass(frozen=True)
class TextRange:
    """An (offset, length) slice of a string."""

    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length

    def to_tuple(self) -> Tuple[int, int]:
        return (self.offset, self.length)

    @classmethod
    def locate(cls, text: str, fragment: str) -> "TextRange":
        """
        Find the first occurrence of fragment in text.

        Args:
            text: Text to search
            fragment: Text to look for

        Returns:
            TextRange of the first occurrence

        Raises:
            ValueError: If fragment does not occur in text
        """
        offset = text.find(fragment)
        if offset < 0:
            raise ValueError("Clipped text does not occur in the matched text")
        return cls(offset, len(fragment))


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of matching a selection against a buffer or the clipboard.

    Attributes:
        text: Concatenated full lines, or the clipboard content
        clipped_text: Concatenated selected parts of those lines
        range: First occurrence of clipped_text inside text
        is_clipboard: True when the text came from the clipboard
    """

    text: str
    clipped_text: str
    range: TextRange
    is_clipboard: bool = False

    @classmethod
    def from_text(cls, text: str, clipped: str) -> "MatchResult":
        """Build a selection result from full and clipped text."""
        return cls(text=text, clipped_text=clipped, range=TextRange.locate(text, clipped))

    @classmethod
    def from_clipboard(cls, provider: ClipboardProvider) -> "MatchResult":
        """Build a result covering the whole clipboard text."""
        content = read_clipboard_text(provider)
        return cls(
            text=content,
            clipped_text=content,
            range=TextRange(0, len(content)),
            is_clipboard=True,
        )

    @property
    def selected_text(self) -> str:
        return self.text[self.range.offset:self.range.end]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation of the MatchResult
        """
        return {
            "text": self.text,
            "clipped_text": self.clipped_text,
            "range": {"offset": self.range.offset, "length": self.range.length},
            "is_clipboard": self.is_clipboard,
        }
