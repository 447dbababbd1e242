"""Integration tests for the conquest-support CLI, driven through CliRunner."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from conquest_support.cli import _runtime
from conquest_support.cli.main import cli
from conquest_support.core.constants import ExitCode
from conquest_support.core.logging import PACKAGE_LOGGER
from tests.fakes import FakeOpener, MemoryClipboard


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for var in (
        "CONQUEST_SUPPORT_CONFIG",
        "CONQUEST_SUPPORT_PHONE",
        "CONQUEST_SUPPORT_EMAIL",
        "CONQUEST_SUPPORT_BLOG_URL",
        "CONQUEST_SUPPORT_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def host(monkeypatch: pytest.MonkeyPatch):
    """Swap the OS capabilities for in-memory fakes; returns (opener, clipboard)."""
    opener = FakeOpener(accept=True)
    clipboard = MemoryClipboard()
    monkeypatch.setattr(_runtime, "make_opener", lambda: opener)
    monkeypatch.setattr(_runtime, "make_clipboard", lambda: clipboard)
    return opener, clipboard


@pytest.fixture
def fast_config(tmp_path: Path) -> Path:
    cfg = tmp_path / "config.toml"
    cfg.write_text("[overlay]\ncopied_display_seconds = 0.01\n")
    return cfg


# ---------------------------------------------------------------------------
# call
# ---------------------------------------------------------------------------


class TestCall:
    def test_accepted(self, runner: CliRunner, host) -> None:
        opener, _ = host
        result = runner.invoke(cli, ["call"])
        assert result.exit_code == 0, result.output
        assert "dialer" in result.output
        assert opener.opened == ["tel://7709532500"]

    def test_rejected_copy_fallback(self, runner: CliRunner, host) -> None:
        opener, clipboard = host
        opener.accept = False
        result = runner.invoke(cli, ["call", "--fallback", "copy"])
        assert result.exit_code == ExitCode.HANDOFF_UNAVAILABLE
        assert "Call Not Available" in result.output
        assert clipboard.contents == "7709532500"

    def test_rejected_prompted_dismiss(self, runner: CliRunner, host) -> None:
        opener, clipboard = host
        opener.accept = False
        result = runner.invoke(cli, ["call"], input="OK\n")
        assert result.exit_code == ExitCode.HANDOFF_UNAVAILABLE
        assert clipboard.writes == []

    def test_phone_from_env(self, runner: CliRunner, host) -> None:
        opener, _ = host
        result = runner.invoke(cli, ["call"], env={"CONQUEST_SUPPORT_PHONE": "(404) 555-0100"})
        assert result.exit_code == 0, result.output
        assert opener.opened == ["tel://4045550100"]


# ---------------------------------------------------------------------------
# email
# ---------------------------------------------------------------------------


class TestEmail:
    def test_compose(self, runner: CliRunner, host) -> None:
        opener, _ = host
        result = runner.invoke(cli, ["email", "--action", "compose"])
        assert result.exit_code == 0, result.output
        assert opener.opened[0].startswith("mailto:support@csatlanta.com?")

    def test_compose_rejected_copy(self, runner: CliRunner, host) -> None:
        opener, clipboard = host
        opener.accept = False
        result = runner.invoke(cli, ["email", "--action", "compose", "--fallback", "copy"])
        assert result.exit_code == ExitCode.HANDOFF_UNAVAILABLE
        assert "Email Not Available" in result.output
        assert clipboard.contents == "support@csatlanta.com"

    def test_copy_shows_confirmation(self, runner: CliRunner, host, fast_config: Path) -> None:
        _, clipboard = host
        result = runner.invoke(cli, ["--config", str(fast_config), "email", "--action", "copy"])
        assert result.exit_code == 0, result.output
        assert "Support email copied to clipboard." in result.output
        assert clipboard.contents == "support@csatlanta.com"

    def test_prompted_cancel(self, runner: CliRunner, host) -> None:
        opener, clipboard = host
        result = runner.invoke(cli, ["email"], input="Cancel\n")
        assert result.exit_code == 0, result.output
        assert "Email Support" in result.output
        assert "Cancelled" in result.output
        assert opener.opened == []
        assert clipboard.writes == []

    def test_copy_without_clipboard(self, runner: CliRunner, host) -> None:
        _, clipboard = host
        clipboard.fail = True
        result = runner.invoke(cli, ["email", "--action", "copy"])
        assert result.exit_code == ExitCode.ERROR
        assert "support@csatlanta.com" in result.output


# ---------------------------------------------------------------------------
# blog
# ---------------------------------------------------------------------------


class TestBlog:
    def test_opens_default_blog(self, runner: CliRunner, host) -> None:
        opener, _ = host
        result = runner.invoke(cli, ["blog"])
        assert result.exit_code == 0, result.output
        assert opener.opened == ["https://csatlanta.com/resources/blog/"]

    def test_no_open(self, runner: CliRunner, host) -> None:
        opener, _ = host
        result = runner.invoke(cli, ["blog", "--no-open"])
        assert result.exit_code == 0
        assert opener.opened == []

    def test_misconfigured_link(self, runner: CliRunner, host) -> None:
        opener, _ = host
        result = runner.invoke(cli, ["blog", "--url", "not a url"])
        assert result.exit_code == ExitCode.CONFIG_ERROR
        assert "Blog Unavailable" in result.output
        assert opener.opened == []


# ---------------------------------------------------------------------------
# screen / layout
# ---------------------------------------------------------------------------


class TestScreen:
    def test_collapsed(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["screen"])
        assert result.exit_code == 0, result.output
        assert "770-953-2500" in result.output
        assert "Access Control" in result.output
        assert "Cybersecurity" not in result.output
        assert "Since 2004" in result.output

    def test_expanded(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["screen", "--expanded"])
        assert result.exit_code == 0, result.output
        assert "Backup & Disaster Recovery" in result.output


class TestLayout:
    def test_json(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["layout", "--json", "-5", "300", "9999"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["reserved_height"] == 300
        assert [m["accepted"] for m in data["measurements"]] == [False, True, False]

    def test_table(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["layout"])
        assert result.exit_code == 0, result.output
        assert "184" in result.output
        assert "Pinned header bar" in result.output

    def test_json_reports_pinned_header_height(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["layout", "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["pinned_header_height"] == 185

    def test_negative_padding_is_config_error(self, runner: CliRunner, tmp_path: Path) -> None:
        cfg = tmp_path / "config.toml"
        cfg.write_text("[layout]\ntop_padding = -500\n")

        result = runner.invoke(cli, ["--config", str(cfg), "config", "validate"])
        assert result.exit_code == ExitCode.CONFIG_ERROR

        result = runner.invoke(cli, ["--config", str(cfg), "layout", "300"])
        assert result.exit_code == ExitCode.CONFIG_ERROR
        assert isinstance(result.exception, SystemExit)


# ---------------------------------------------------------------------------
# config / doctor
# ---------------------------------------------------------------------------


class TestConfigCommands:
    def test_init_then_show(self, runner: CliRunner, tmp_path: Path) -> None:
        cfg = tmp_path / "cs" / "config.toml"
        result = runner.invoke(cli, ["--config", str(cfg), "config", "init"])
        assert result.exit_code == 0, result.output
        assert cfg.exists()

        result = runner.invoke(cli, ["--config", str(cfg), "config", "show", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["contact"]["email"] == "support@csatlanta.com"
        assert data["_config_path"] == str(cfg)

    def test_init_refuses_overwrite(self, runner: CliRunner, fast_config: Path) -> None:
        result = runner.invoke(cli, ["--config", str(fast_config), "config", "init"])
        assert result.exit_code == ExitCode.ERROR
        assert "already exists" in result.output

    def test_validate_invalid(self, runner: CliRunner, tmp_path: Path) -> None:
        cfg = tmp_path / "config.toml"
        cfg.write_text('[contact]\nemail = "nobody"\n')
        result = runner.invoke(cli, ["--config", str(cfg), "config", "validate"])
        assert result.exit_code == ExitCode.CONFIG_ERROR

    def test_runtime_command_with_bad_config(self, runner: CliRunner, tmp_path: Path) -> None:
        cfg = tmp_path / "config.toml"
        cfg.write_text('[contact]\nphone_display = "none"\n')
        result = runner.invoke(cli, ["--config", str(cfg), "screen"])
        assert result.exit_code == ExitCode.CONFIG_ERROR
        assert "Config error" in result.output


class TestDoctor:
    def test_json(self, runner: CliRunner, host) -> None:
        result = runner.invoke(cli, ["doctor", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        names = [c["name"] for c in data["checks"]]
        assert "Clipboard" in names
        assert data["all_pass"] is True


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "conquest-support" in result.output
