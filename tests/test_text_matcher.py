"""
Tests for TextMatcher, the selection-to-result builder.
"""

from types import SimpleNamespace

import pytest

from textmatcher.clipboard import StaticClipboard
from textmatcher.exceptions import OutOfBoundsColumnError
from textmatcher.line_enumerator import ColumnPolicy
from textmatcher.match_result import MatchResult, TextRange
from textmatcher.text_buffer import InMemoryBuffer, TextSelection
from textmatcher.text_matcher import TextMatcher, match


class TestClipboardPath:
    """Empty selections read the clipboard."""

    def test_zero_width_selection_uses_clipboard(self, make_matcher, clipboard, abc_buffer):
        result = make_matcher().match(TextSelection.caret(1, 1), abc_buffer)

        assert result.is_clipboard
        assert result.text == "copied text"
        assert result.clipped_text == "copied text"
        assert result.range == TextRange(0, len("copied text"))
        assert clipboard.reads == 1

    def test_empty_clipboard(self, make_matcher, empty_clipboard, abc_buffer):
        result = make_matcher(provider=empty_clipboard).match(TextSelection.caret(), abc_buffer)

        assert result.is_clipboard
        assert result.text == ""
        assert result.range == TextRange(0, 0)

    def test_failing_clipboard_is_empty_result(self, make_matcher, broken_clipboard, abc_buffer):
        result = make_matcher(provider=broken_clipboard).match(TextSelection.caret(), abc_buffer)

        assert result == MatchResult("", "", TextRange(0, 0), is_clipboard=True)
        broken_clipboard.read_text.assert_called_once()

    def test_selection_does_not_read_clipboard(self, make_matcher, clipboard, hello_buffer):
        make_matcher().match(TextSelection.from_bounds(0, 0, 0, 4), hello_buffer)
        assert clipboard.reads == 0


class TestSelectionPath:
    """Non-empty selections build the result from buffer lines."""

    def test_single_line(self, make_matcher, hello_buffer):
        result = make_matcher().match(TextSelection.from_bounds(0, 0, 0, 4), hello_buffer)

        assert not result.is_clipboard
        assert result.text == "hello world"
        assert result.clipped_text == "hello"
        assert result.range.to_tuple() == (0, 5)
        assert result.selected_text == "hello"

    def test_multi_line(self, make_matcher, abc_buffer):
        result = make_matcher().match(TextSelection.from_bounds(0, 1, 2, 1), abc_buffer)

        assert result.text == "abcdefghi"
        assert result.clipped_text == "bcdefgh"
        assert result.range.to_tuple() == (1, 7)

    def test_lines_with_terminators(self, make_matcher, source_buffer):
        result = make_matcher().match(TextSelection.from_bounds(1, 4, 2, 9), source_buffer)

        assert result.text == '    message = "hello " + name\n    return message\n'
        assert result.selected_text == 'message = "hello " + name\n    return'
        assert result.range.offset == 4

    def test_skipped_line_not_accumulated(self, make_matcher):
        buffer = InMemoryBuffer(["ab", "cd"])
        result = make_matcher().match(TextSelection.from_bounds(0, 2, 1, 0), buffer)

        assert result.text == "cd"
        assert result.clipped_text == "c"
        assert result.range.to_tuple() == (0, 1)

    def test_first_occurrence_wins(self, make_matcher):
        buffer = InMemoryBuffer(["aaaa"])
        result = make_matcher().match(TextSelection.from_bounds(0, 2, 0, 3), buffer)

        # The selection starts at column 2 but "aa" is first found at 0
        assert result.range.to_tuple() == (0, 2)

    def test_first_occurrence_across_lines(self, make_matcher, duplicate_buffer):
        result = make_matcher().match(TextSelection.from_bounds(1, 0, 2, 2), duplicate_buffer)

        assert result.text == "abc\nxyz\n"
        assert result.clipped_text == "abc\nxyz"
        assert result.range.to_tuple() == (0, 7)

    def test_all_clips_empty(self, make_matcher):
        buffer = InMemoryBuffer(["ab", "", "cd"])
        result = make_matcher("clamp").match(TextSelection.from_bounds(0, 2, 1, 0), buffer)

        assert result == MatchResult("", "", TextRange(0, 0), is_clipboard=False)


class TestMatcherBehaviour:
    """Purity, policies and collaborators."""

    def test_repeated_calls_are_equal(self, make_matcher, abc_buffer):
        matcher = make_matcher()
        selection = TextSelection.from_bounds(0, 1, 2, 1)

        assert matcher.match(selection, abc_buffer) == matcher.match(selection, abc_buffer)

    def test_repeated_clipboard_calls_are_equal(self, make_matcher, abc_buffer):
        matcher = make_matcher()
        assert matcher.match(TextSelection.caret(), abc_buffer) == matcher.match(
            TextSelection.caret(), abc_buffer
        )

    def test_buffer_not_modified(self, make_matcher, abc_buffer):
        make_matcher().match(TextSelection.from_bounds(0, 1, 2, 1), abc_buffer)
        assert [abc_buffer.line_at(i) for i in range(3)] == ["abc", "def", "ghi"]

    def test_strict_error_propagates(self, make_matcher, hello_buffer):
        with pytest.raises(OutOfBoundsColumnError):
            make_matcher().match(TextSelection.from_bounds(0, 0, 0, 20), hello_buffer)

    def test_clamp_policy(self, make_matcher, hello_buffer):
        matcher = make_matcher("clamp")
        result = matcher.match(TextSelection.from_bounds(0, 6, 0, 20), hello_buffer)

        assert matcher.column_policy is ColumnPolicy.CLAMP
        assert result.selected_text == "world"

    def test_duck_typed_selection(self, make_matcher, abc_buffer):
        selection = SimpleNamespace(
            start=SimpleNamespace(line=0, column=1),
            end=SimpleNamespace(line=1, column=0),
        )
        result = make_matcher().match(selection, abc_buffer)
        assert result.clipped_text == "bcd"

    def test_default_clipboard_is_system(self):
        from textmatcher.clipboard import SystemClipboard

        assert isinstance(TextMatcher().clipboard, SystemClipboard)

    def test_match_function(self, abc_buffer):
        provider = StaticClipboard("pasted")

        assert match(TextSelection.caret(), abc_buffer, clipboard=provider).text == "pasted"
        assert match(
            TextSelection.from_bounds(0, 0, 0, 1), abc_buffer, clipboard=provider
        ).clipped_text == "ab"
