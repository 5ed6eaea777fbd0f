"""
Tests for MatchResult and TextRange.
"""

import json

import pytest

from textmatcher.clipboard import StaticClipboard
from textmatcher.match_result import MatchResult, TextRange


class TestTextRange:
    """Test range location and helpers."""

    def test_locate(self):
        assert TextRange.locate("abcdefghi", "bcdefgh") == TextRange(1, 7)

    def test_locate_first_occurrence(self):
        assert TextRange.locate("one two one two", "two").offset == 4

    def test_locate_empty_fragment(self):
        assert TextRange.locate("", "") == TextRange(0, 0)

    def test_locate_missing(self):
        with pytest.raises(ValueError, match="does not occur"):
            TextRange.locate("abc", "xyz")

    def test_end_and_tuple(self):
        text_range = TextRange(3, 4)

        assert text_range.end == 7
        assert text_range.to_tuple() == (3, 4)


class TestMatchResult:
    """Test MatchResult construction and serialization."""

    def test_from_text(self):
        result = MatchResult.from_text("hello world", "world")

        assert result.range == TextRange(6, 5)
        assert result.selected_text == "world"
        assert result.is_clipboard is False

    def test_from_clipboard(self):
        result = MatchResult.from_clipboard(StaticClipboard("line one\nline two"))

        assert result.is_clipboard is True
        assert result.text == result.clipped_text == "line one\nline two"
        assert result.range == TextRange(0, 17)
        assert result.selected_text == result.text

    def test_from_empty_clipboard(self):
        result = MatchResult.from_clipboard(StaticClipboard(None))

        assert result.text == ""
        assert result.range == TextRange(0, 0)

    def test_range_in_bounds(self):
        result = MatchResult.from_text("abcabc", "bca")

        assert 0 <= result.range.offset <= result.range.end <= len(result.text)

    def test_to_dict(self):
        result = MatchResult.from_text("abcdefghi", "bcdefgh")

        assert result.to_dict() == {
            "text": "abcdefghi",
            "clipped_text": "bcdefgh",
            "range": {"offset": 1, "length": 7},
            "is_clipboard": False,
        }
        # Must be JSON serializable
        json.dumps(result.to_dict())

    def test_frozen(self):
        result = MatchResult.from_text("abc", "b")
        with pytest.raises(AttributeError):
            result.text = "other"
