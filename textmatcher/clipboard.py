"""
clipboard.py: Read access to the clipboard for empty selections.

When nothing is selected the matcher works on the clipboard instead. Reading
the clipboard is best effort: a missing clipboard mechanism or non-text
content shows up as an empty string, never as a failed match.
"""

from typing import Optional, Protocol

import pyperclip

from .exceptions import ClipboardError
from .logging_config import get_logger

logger = get_logger(__name__)


class ClipboardProvider(Protocol):
    """Anything that can report the clipboard's current text."""

    def read_text(self) -> str:
        ...


class SystemClipboard:
    """ClipboardProvider backed by the system clipboard through pyperclip."""

    def read_text(self) -> str:
        """
        Return the clipboard's text content.

        Raises:
            ClipboardError: If no clipboard mechanism is available
        """
        try:
            content = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Clipboard is not available: {e}") from e

        if not isinstance(content, str):
            logger.warning("Clipboard holds non-text content (%s)", type(content).__name__)
            return ""
        return content


class StaticClipboard:
    """ClipboardProvider holding a fixed string, for tests and headless use."""

    def __init__(self, text: Optional[str] = None):
        self.text = text
        self.reads = 0

    def read_text(self) -> str:
        self.reads += 1
        return self.text or ""


def read_clipboard_text(provider: ClipboardProvider) -> str:
    """
    Read text from a clipboard provider, treating failures as an empty clipboard.

    Args:
        provider: Clipboard to read

    Returns:
        Clipboard text, or "" when there is none or it cannot be read
    """
    try:
        content = provider.read_text()
    except ClipboardError as e:
        logger.warning(f"Falling back to empty clipboard: {e}")
        return ""
    return content or ""
