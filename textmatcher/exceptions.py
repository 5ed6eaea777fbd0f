"""
Custom exceptions for the textmatcher selection matching library.

This module defines specific exception classes for the ways a selection can
fail to resolve against a text buffer, so callers can tell a bad selection
apart from a bad buffer or bad configuration.
"""

from typing import Optional


class TextMatcherError(Exception):
    """Base exception class for all textmatcher errors."""

    pass


class SelectionError(TextMatcherError):
    """Raised when a selection cannot be resolved against a buffer."""

    pass


class InvalidSelectionError(SelectionError):
    """Raised when a selection is reversed or cannot be parsed."""

    pass


class OutOfBoundsLineError(SelectionError):
    """Raised when a selection touches a line the buffer does not have."""

    def __init__(self, line: int, line_count: int):
        self.line = line
        self.line_count = line_count
        super().__init__(f"Line {line} is outside the buffer ({line_count} lines)")


class OutOfBoundsColumnError(SelectionError):
    """Raised when a selection column falls outside the addressed line."""

    def __init__(self, line: int, column: int, line_length: int):
        self.line = line
        self.column = column
        self.line_length = line_length
        super().__init__(
            f"Column {column} is outside line {line} (length {line_length})"
        )


class InvalidLineEncodingError(TextMatcherError):
    """Raised when a buffer line is not text or cannot be decoded."""

    def __init__(self, line: int, reason: Optional[str] = None):
        self.line = line
        message = f"Line {line} is not valid text"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ClipboardError(TextMatcherError):
    """Raised when the system clipboard cannot be read."""

    pass


class ConfigurationError(TextMatcherError):
    """Raised when configuration is invalid or missing."""

    pass
