#!/usr/bin/env python3
"""
conftest.py: Shared pytest fixtures for the textmatcher test suite.

This module provides:
- In-memory buffers with plain, multi-line and duplicated content
- Clipboard fakes so no test touches the real system clipboard
- A matcher factory bound to a fake clipboard
"""

from unittest.mock import Mock

import pytest

from textmatcher.clipboard import StaticClipboard
from textmatcher.exceptions import ClipboardError
from textmatcher.text_buffer import InMemoryBuffer
from textmatcher.text_matcher import TextMatcher

SAMPLE_SOURCE = """def greet(name):
    message = "hello " + name
    return message
"""


@pytest.fixture
def hello_buffer():
    """Single-line buffer."""
    return InMemoryBuffer(["hello world"])


@pytest.fixture
def abc_buffer():
    """Three short lines without terminators."""
    return InMemoryBuffer(["abc", "def", "ghi"])


@pytest.fixture
def source_buffer():
    """Buffer built from text, lines keep their newlines."""
    return InMemoryBuffer.from_text(SAMPLE_SOURCE)


@pytest.fixture
def duplicate_buffer():
    """Buffer whose later lines repeat earlier content."""
    return InMemoryBuffer(["xyz\n", "abc\n", "xyz\n"])


@pytest.fixture
def clipboard():
    """Clipboard fake holding some text."""
    return StaticClipboard("copied text")


@pytest.fixture
def empty_clipboard():
    """Clipboard fake with nothing on it."""
    return StaticClipboard()


@pytest.fixture
def broken_clipboard():
    """Clipboard whose read always fails."""
    provider = Mock()
    provider.read_text.side_effect = ClipboardError("no clipboard mechanism")
    return provider


@pytest.fixture
def make_matcher(clipboard):
    """Factory for matchers that read the fake clipboard."""

    def _make(column_policy="strict", provider=None):
        return TextMatcher(clipboard=provider or clipboard, column_policy=column_policy)

    return _make
