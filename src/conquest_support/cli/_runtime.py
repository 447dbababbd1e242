"""Shared CLI wiring: config loading and coordinator construction."""

from __future__ import annotations

import sys
from pathlib import Path

from rich.console import Console

from conquest_support.core.config import SupportConfig, load_config
from conquest_support.core.constants import ExitCode
from conquest_support.core.contact import ContactTarget
from conquest_support.core.exceptions import ConfigError, ConfigNotFoundError
from conquest_support.core.handoff import IntentDispatcher, URLOpener
from conquest_support.core.logging import configure_logging
from conquest_support.core.overlay import OverlayCoordinator
from conquest_support.os.clipboard import Clipboard, SystemClipboard
from conquest_support.os.opener import SystemURLOpener


def load_or_exit(config_path: Path | None, console: Console) -> SupportConfig:
    """Load config (defaults when no file exists) and set up logging, or exit."""
    try:
        config = load_config(config_path)
    except ConfigNotFoundError as exc:
        console.print(f"[red]Not configured:[/red] {exc}")
        sys.exit(ExitCode.CONFIG_ERROR)
    except ConfigError as exc:
        console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(ExitCode.CONFIG_ERROR)

    configure_logging(config.logging)
    return config


def make_opener() -> URLOpener:
    return SystemURLOpener()


def make_clipboard() -> Clipboard:
    return SystemClipboard()


def build_coordinator(config: SupportConfig) -> tuple[OverlayCoordinator, IntentDispatcher]:
    dispatcher = IntentDispatcher(opener=make_opener())
    coordinator = OverlayCoordinator(
        target=ContactTarget.from_config(config.contact),
        dispatcher=dispatcher,
        clipboard=make_clipboard(),
        copied_display_seconds=config.overlay.copied_display_seconds,
    )
    return coordinator, dispatcher
