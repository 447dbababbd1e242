"""Unit tests for the platform URL opener and the system clipboard wrapper."""

from __future__ import annotations

import pyperclip
import pytest

from conquest_support.core.exceptions import ClipboardError
from conquest_support.os import opener as opener_mod
from conquest_support.os.clipboard import SystemClipboard
from conquest_support.os.opener import SystemURLOpener


class TestCommandFor:
    def test_macos(self) -> None:
        assert SystemURLOpener("darwin").command_for("tel://1") == ["open", "tel://1"]

    def test_linux(self) -> None:
        assert SystemURLOpener("linux").command_for("tel://1") == ["xdg-open", "tel://1"]

    def test_windows_uses_startfile(self) -> None:
        assert SystemURLOpener("win32").command_for("tel://1") is None


class TestOpen:
    @pytest.mark.asyncio
    async def test_no_handler_is_rejection(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(opener_mod.shutil, "which", lambda name: None)
        opener = SystemURLOpener("linux")
        assert opener.available() is False
        assert await opener.open("tel://7709532500") is False

    @pytest.mark.asyncio
    async def test_web_links_use_webbrowser(self, monkeypatch: pytest.MonkeyPatch) -> None:
        opened: list[str] = []

        def _fake_open(url: str) -> bool:
            opened.append(url)
            return True

        monkeypatch.setattr(opener_mod.webbrowser, "open", _fake_open)
        assert await SystemURLOpener("linux").open("https://example.com") is True
        assert opened == ["https://example.com"]

    @pytest.mark.asyncio
    async def test_handler_exit_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        class _Proc:
            def __init__(self, code: int) -> None:
                self.code = code

            async def wait(self) -> int:
                return self.code

        calls: list[tuple[str, ...]] = []

        async def _fake_exec(*args, **kwargs):
            calls.append(args)
            return _Proc(0 if "mailto" in args[-1] else 4)

        monkeypatch.setattr(opener_mod.shutil, "which", lambda name: f"/usr/bin/{name}")
        monkeypatch.setattr(opener_mod.asyncio, "create_subprocess_exec", _fake_exec)
        opener = SystemURLOpener("linux")
        assert await opener.open("mailto:a@b.c") is True
        assert await opener.open("tel://1") is False
        assert calls[0] == ("xdg-open", "mailto:a@b.c")


class TestSystemClipboard:
    def test_write(self, monkeypatch: pytest.MonkeyPatch) -> None:
        written: list[str] = []
        monkeypatch.setattr(pyperclip, "copy", written.append)
        SystemClipboard().write("7709532500")
        assert written == ["7709532500"]

    def test_missing_backend_raises_clipboard_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _no_backend(text: str) -> None:
            raise pyperclip.PyperclipException("could not find a copy/paste mechanism")

        monkeypatch.setattr(pyperclip, "copy", _no_backend)
        monkeypatch.setattr(pyperclip, "paste", lambda: _no_backend(""))
        clipboard = SystemClipboard()
        with pytest.raises(ClipboardError):
            clipboard.write("x")
        assert clipboard.available() is False
