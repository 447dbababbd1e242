"""System clipboard access through pyperclip."""

from __future__ import annotations

import logging
from typing import Protocol

import pyperclip

from conquest_support.core.exceptions import ClipboardError

logger = logging.getLogger(__name__)


class Clipboard(Protocol):
    def write(self, text: str) -> None: ...


class SystemClipboard:
    """Writes to the OS clipboard; raises ClipboardError when no backend is usable."""

    def write(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"No usable clipboard: {exc}") from exc
        logger.debug("Copied %d chars to clipboard", len(text))

    def available(self) -> bool:
        try:
            pyperclip.paste()
        except pyperclip.PyperclipException:
            return False
        return True
