"""
Platform URL opener — the OS side of a handoff.

http(s) links go through the ``webbrowser`` module; other schemes (tel:,
mailto:) go to the platform's default handler:

    macOS    open <uri>
    Windows  os.startfile(<uri>)
    other    xdg-open <uri>

``open()`` returns False when no handler exists or the handler exits non-zero.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import sys
import webbrowser
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

_WEB_SCHEMES = frozenset({"http", "https"})


class SystemURLOpener:
    def __init__(self, platform: str | None = None) -> None:
        self.platform = platform or sys.platform

    def command_for(self, uri: str) -> list[str] | None:
        """Opener command for *uri*, or None where the platform uses os.startfile."""
        if self.platform == "darwin":
            return ["open", uri]
        if self.platform == "win32":
            return None
        return ["xdg-open", uri]

    def available(self) -> bool:
        """True if the platform handler for non-web schemes can be found."""
        command = self.command_for("")
        if command is None:
            return hasattr(os, "startfile")
        return shutil.which(command[0]) is not None

    async def open(self, uri: str) -> bool:
        scheme = urlsplit(uri).scheme.lower()
        if scheme in _WEB_SCHEMES:
            return await asyncio.to_thread(webbrowser.open, uri)

        command = self.command_for(uri)
        if command is None:
            return await asyncio.to_thread(self._startfile, uri)

        if shutil.which(command[0]) is None:
            logger.info("No handler for %s links (%s not found)", scheme, command[0])
            return False
        proc = await asyncio.create_subprocess_exec(
            *command,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        returncode = await proc.wait()
        if returncode != 0:
            logger.info("%s exited %d for %s link", command[0], returncode, scheme)
        return returncode == 0

    @staticmethod
    def _startfile(uri: str) -> bool:
        try:
            os.startfile(uri)  # type: ignore[attr-defined]
        except OSError as exc:
            logger.info("os.startfile rejected %s: %s", uri, exc)
            return False
        return True
