"""
text_matcher.py: Turn an editor selection into a MatchResult.

TextMatcher drives the LineEnumerator, collects the full and clipped text of
every touched line, and builds the final MatchResult. An empty selection
switches to the clipboard.

Example usage:
    from textmatcher import InMemoryBuffer, TextMatcher, TextSelection

    buffer = InMemoryBuffer(["abc", "def", "ghi"])
    result = TextMatcher().match(TextSelection.from_bounds(0, 1, 2, 1), buffer)
    assert result.selected_text == "bcdefgh"
"""

from typing import List, Optional, Union

from .clipboard import ClipboardProvider, SystemClipboard
from .line_enumerator import ColumnPolicy, LineEnumerator, LineEvent
from .logging_config import get_logger
from .match_result import MatchResult
from .text_buffer import LineSource, SelectionRange

logger = get_logger(__name__)


class TextMatcher:
    """Matches selections against line buffers."""

    def __init__(
        self,
        clipboard: Optional[ClipboardProvider] = None,
        column_policy: Optional[Union[ColumnPolicy, str]] = None,
        encoding: Optional[str] = None,
    ):
        """
        Args:
            clipboard: Clipboard used for empty selections, the system clipboard by default
            column_policy: Handling of out-of-range lines and columns, from config by default
            encoding: Encoding for byte-string lines, from config by default
        """
        self.clipboard = clipboard if clipboard is not None else SystemClipboard()
        self.enumerator = LineEnumerator(column_policy, encoding)

    @property
    def column_policy(self) -> ColumnPolicy:
        return self.enumerator.column_policy

    def match(self, selection: SelectionRange, buffer: LineSource) -> MatchResult:
        """
        Match a selection against a buffer.

        Args:
            selection: Selection to match
            buffer: Buffer the selection refers to

        Returns:
            MatchResult built from the selected lines, or from the clipboard
            when the selection is empty

        Raises:
            SelectionError: If the selection does not fit the buffer under the strict policy
            InvalidLineEncodingError: If a touched line is not text
        """
        full_lines: List[str] = []
        clipped_parts: List[str] = []
        used_clipboard = False

        def on_line(event: LineEvent) -> None:
            nonlocal used_clipboard
            full_lines.append(event.full_line)
            clipped_parts.append(event.clipped_text)
            used_clipboard = event.is_sentinel

        count = self.enumerator.enumerate(selection, buffer, on_line)

        if used_clipboard:
            logger.debug("Empty selection, matching clipboard text")
            return MatchResult.from_clipboard(self.clipboard)

        logger.debug(
            "Matched %d line(s) for selection %s:%s-%s:%s",
            count,
            selection.start.line,
            selection.start.column,
            selection.end.line,
            selection.end.column,
        )
        return MatchResult.from_text("".join(full_lines), "".join(clipped_parts))


def match(
    selection: SelectionRange,
    buffer: LineSource,
    clipboard: Optional[ClipboardProvider] = None,
    column_policy: Optional[Union[ColumnPolicy, str]] = None,
) -> MatchResult:
    """Match a selection with a one-off TextMatcher."""
    return TextMatcher(clipboard, column_policy).match(selection, buffer)
