"""
textmatcher: extract the text covered by an editor selection.

Lines touched by a selection are clipped to the selection boundary and
combined into a MatchResult; an empty selection reads the clipboard instead.
"""

from .clipboard import ClipboardProvider, StaticClipboard, SystemClipboard
from .exceptions import (
    ClipboardError,
    ConfigurationError,
    InvalidLineEncodingError,
    InvalidSelectionError,
    OutOfBoundsColumnError,
    OutOfBoundsLineError,
    SelectionError,
    TextMatcherError,
)
from .line_enumerator import (
    ColumnPolicy,
    LineEnumerator,
    LineEvent,
    LineFragment,
    SentinelEvent,
    enumerate_lines,
)
from .match_result import MatchResult, TextRange
from .text_buffer import InMemoryBuffer, LineSource, SelectionRange, TextPosition, TextSelection
from .text_matcher import TextMatcher, match

__version__ = "0.1.0"

__all__ = [
    "ClipboardError",
    "ClipboardProvider",
    "ColumnPolicy",
    "ConfigurationError",
    "InMemoryBuffer",
    "InvalidLineEncodingError",
    "InvalidSelectionError",
    "LineEnumerator",
    "LineEvent",
    "LineFragment",
    "LineSource",
    "MatchResult",
    "OutOfBoundsColumnError",
    "OutOfBoundsLineError",
    "SelectionError",
    "SelectionRange",
    "SentinelEvent",
    "StaticClipboard",
    "SystemClipboard",
    "TextMatcher",
    "TextMatcherError",
    "TextPosition",
    "TextRange",
    "TextSelection",
    "enumerate_lines",
    "match",
]
