"""
line_enumerator.py: Walk the lines touched by a selection.

For every line between the selection's start and end, the enumerator works out
which part of the line falls inside the selection and reports it as a
LineFragment. A zero-width selection is reported as a single SentinelEvent,
which tells the caller to fall back to the clipboard.

Columns are inclusive at the end: a selection from (0, 0) to (0, 4) covers five
characters.

Classes:
- ColumnPolicy: what to do with lines and columns outside the buffer
- SentinelEvent: "nothing selected" marker
- LineFragment: one touched line with its clipped text
- LineEnumerator: produces the events above
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional, Tuple, Union

from .config import config
from .exceptions import (
    InvalidLineEncodingError,
    InvalidSelectionError,
    OutOfBoundsColumnError,
    OutOfBoundsLineError,
)
from .logging_config import get_logger
from .text_buffer import LineSource, SelectionRange

logger = get_logger(__name__)


class ColumnPolicy(Enum):
    """How selections reaching outside the buffer are handled."""

    STRICT = "strict"
    CLAMP = "clamp"


@dataclass(frozen=True)
class SentinelEvent:
    """Emitted once, alone, when the selection is empty."""

    line_index: None = None
    full_line: str = ""
    clipped_text: str = ""

    @property
    def is_sentinel(self) -> bool:
        return True


@dataclass(frozen=True)
class LineFragment:
    """A line touched by the selection and the part of it that was selected."""

    line_index: int
    full_line: str
    clipped_text: str

    @property
    def is_sentinel(self) -> bool:
        return False


LineEvent = Union[SentinelEvent, LineFragment]
LineHandler = Callable[[LineEvent], None]

_Bounds = Tuple[int, int, int, int]


class LineEnumerator:
    """
    Enumerates the lines covered by a selection.

    Events are produced synchronously in ascending line order. Lines whose
    clipped text is empty are skipped.
    """

    def __init__(
        self,
        column_policy: Optional[Union[ColumnPolicy, str]] = None,
        encoding: Optional[str] = None,
    ):
        self.column_policy = ColumnPolicy(column_policy or config.matcher.COLUMN_POLICY)
        self.encoding = encoding or config.matcher.BUFFER_ENCODING

    def enumerate(self, selection: SelectionRange, buffer: LineSource, on_line: LineHandler) -> int:
        """
        Invoke on_line for every event produced by the selection.

        Args:
            selection: Selection to enumerate
            buffer: Buffer the selection refers to
            on_line: Callback receiving each SentinelEvent or LineFragment

        Returns:
            Number of times on_line was invoked
        """
        count = 0
        for event in self.iter_events(selection, buffer):
            on_line(event)
            count += 1
        return count

    def iter_events(self, selection: SelectionRange, buffer: LineSource) -> Iterator[LineEvent]:
        """
        Yield the events for a selection.

        A zero-width selection yields one SentinelEvent without reading the
        buffer. Any other selection yields one LineFragment per line with a
        non-empty clip.

        Raises:
            InvalidSelectionError: Reversed selection under the strict policy
            OutOfBoundsLineError: Line outside the buffer under the strict policy
            OutOfBoundsColumnError: Column outside its line under the strict policy
            InvalidLineEncodingError: Buffer line is not text
        """
        bounds = (
            selection.start.line,
            selection.start.column,
            selection.end.line,
            selection.end.column,
        )
        start_line, start_column, end_line, end_column = bounds

        if start_line == end_line and start_column == end_column:
            yield SentinelEvent()
            return

        line_count = buffer.line_count()
        if self.column_policy is ColumnPolicy.STRICT:
            self._check_bounds(bounds, line_count)
        else:
            if line_count == 0:
                return
            bounds = self._clamp_bounds(bounds, buffer)
            start_line, start_column, end_line, end_column = bounds

        for index in range(start_line, end_line + 1):
            line = self._read_line(buffer, index)
            clipped = self._clip(line, index, bounds)
            if clipped:
                yield LineFragment(index, line, clipped)

    def _check_bounds(self, bounds: _Bounds, line_count: int) -> None:
        start_line, start_column, end_line, end_column = bounds
        if start_line > end_line or (start_line == end_line and end_column < start_column):
            raise InvalidSelectionError(
                f"Selection ends before it starts: "
                f"{start_line}:{start_column}-{end_line}:{end_column}"
            )
        if start_line < 0:
            raise OutOfBoundsLineError(start_line, line_count)
        if end_line >= line_count:
            raise OutOfBoundsLineError(end_line, line_count)

    def _clamp_bounds(self, bounds: _Bounds, buffer: LineSource) -> _Bounds:
        start_line, start_column, end_line, end_column = bounds
        if (start_line, start_column) > (end_line, end_column):
            logger.debug("Swapping reversed selection %s", bounds)
            start_line, start_column, end_line, end_column = (
                end_line, end_column, start_line, start_column
            )

        last_line = buffer.line_count() - 1
        if start_line < 0:
            start_line, start_column = 0, 0
        elif start_line > last_line:
            start_line, start_column = last_line, len(self._read_line(buffer, last_line))
        if end_line > last_line:
            end_line, end_column = last_line, len(self._read_line(buffer, last_line))
        elif end_line < 0:
            end_line, end_column = 0, -1

        clamped = (start_line, max(start_column, 0), end_line, end_column)
        if clamped != bounds:
            logger.debug("Clamped selection %s to %s", bounds, clamped)
        return clamped

    def _clip(self, line: str, index: int, bounds: _Bounds) -> str:
        start_line, start_column, end_line, end_column = bounds
        strict = self.column_policy is ColumnPolicy.STRICT
        length = len(line)

        if start_line == end_line:
            if strict:
                self._check_column(index, start_column, length, inclusive=False)
                self._check_column(index, end_column, length, inclusive=True)
            return line[start_column:max(end_column + 1, 0)]
        if index == start_line:
            if strict:
                self._check_column(index, start_column, length, inclusive=False)
            return line[start_column:]
        if index == end_line:
            if strict:
                self._check_column(index, end_column, length, inclusive=True)
            return line[:max(end_column + 1, 0)]
        return line

    @staticmethod
    def _check_column(index: int, column: int, length: int, inclusive: bool) -> None:
        # An inclusive end column must name a real character; a start column may sit at the end
        limit = length - 1 if inclusive else length
        if column < 0 or column > limit:
            raise OutOfBoundsColumnError(index, column, length)

    def _read_line(self, buffer: LineSource, index: int) -> str:
        raw = buffer.line_at(index)
        if isinstance(raw, str):
            return raw
        if isinstance(raw, (bytes, bytearray)):
            try:
                return bytes(raw).decode(self.encoding)
            except UnicodeDecodeError as e:
                raise InvalidLineEncodingError(index, str(e)) from e
        raise InvalidLineEncodingError(index, f"expected text, got {type(raw).__name__}")


def enumerate_lines(
    selection: SelectionRange,
    buffer: LineSource,
    on_line: LineHandler,
    column_policy: Optional[Union[ColumnPolicy, str]] = None,
) -> int:
    """Enumerate a selection with a one-off LineEnumerator."""
    return LineEnumerator(column_policy).enumerate(selection, buffer, on_line)
