"""conquest-support call | email | blog — drive the overlay coordinator from a terminal."""

from __future__ import annotations

import asyncio
import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

from conquest_support.cli._runtime import build_coordinator
from conquest_support.core.config import SupportConfig
from conquest_support.core.constants import ExitCode
from conquest_support.core.handoff import HandoffOutcome
from conquest_support.core.overlay import (
    BlogPresented,
    BlogUnavailable,
    CallUnavailable,
    EmailCopied,
    EmailUnavailable,
    NoOverlay,
    OverlayCoordinator,
)
from conquest_support.core.overlay.content import OverlayAction, OverlayContent, describe

_ACTION_ALIASES = {
    "copy": OverlayAction.COPY,
    "dismiss": OverlayAction.DISMISS,
    "compose": OverlayAction.COMPOSE,
    "cancel": OverlayAction.CANCEL,
}


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def render_overlay(coordinator: OverlayCoordinator, console: Console) -> OverlayContent | None:
    content = describe(coordinator.state, coordinator.target)
    if content is None:
        return None
    if isinstance(coordinator.state, EmailCopied):
        console.print(f"[green]{escape(content.message)}[/green]")
        return content
    buttons = "  ".join(escape(f"[{b.label}]") for b in content.buttons)
    console.print(
        Panel(
            escape(content.message),
            title=f"[bold]{escape(content.title)}[/bold]",
            subtitle=buttons or None,
            expand=False,
        )
    )
    return content


def choose(content: OverlayContent, preset: str, console: Console) -> OverlayAction:
    """Pick a button: the preset from the command line, or ask the user."""
    if preset != "ask":
        return _ACTION_ALIASES[preset]
    labels = [b.label for b in content.buttons]
    default = next((b.label for b in content.buttons if b.is_cancel), labels[-1])
    answer = Prompt.ask("Choose", choices=labels, default=default, console=console)
    return next(b.action for b in content.buttons if b.label == answer)


def _run(coro) -> None:
    code = asyncio.run(coro)
    if code != ExitCode.SUCCESS:
        sys.exit(code)


def _resolve_unavailable(coordinator: OverlayCoordinator, fallback: str, console: Console) -> None:
    content = render_overlay(coordinator, console)
    if content is None:
        return
    action = choose(content, fallback, console)
    if action == OverlayAction.COPY:
        text = (
            coordinator.target.phone_digits
            if isinstance(coordinator.state, CallUnavailable)
            else coordinator.target.email
        )
        if coordinator.copy():
            console.print(f"[green]Copied[/green] [cyan]{escape(text)}[/cyan] to the clipboard.")
        else:
            console.print(f"[yellow]Clipboard unavailable.[/yellow] Contact: {escape(text)}")
    else:
        coordinator.dismiss()


async def _wait_until_cleared(coordinator: OverlayCoordinator) -> None:
    if isinstance(coordinator.state, NoOverlay):
        return
    cleared = asyncio.Event()

    def _on_change(_previous, current) -> None:
        if isinstance(current, NoOverlay):
            cleared.set()

    unsubscribe = coordinator.subscribe(_on_change)
    try:
        await cleared.wait()
    finally:
        unsubscribe()


# ---------------------------------------------------------------------------
# call
# ---------------------------------------------------------------------------


def cmd_call(config: SupportConfig, fallback: str, console: Console) -> None:
    _run(_call(config, fallback, console))


async def _call(config: SupportConfig, fallback: str, console: Console) -> ExitCode:
    coordinator, _ = build_coordinator(config)
    target = coordinator.target
    try:
        console.print(f"Calling support at [cyan]{escape(target.phone_display)}[/cyan]...")
        task = coordinator.request_call()
        if task is None:
            console.print("[red]The support phone number is misconfigured.[/red]")
            return ExitCode.CONFIG_ERROR
        await task

        if isinstance(coordinator.state, CallUnavailable):
            _resolve_unavailable(coordinator, fallback, console)
            return ExitCode.HANDOFF_UNAVAILABLE

        console.print("[green]Handed off to your dialer.[/green]")
        return ExitCode.SUCCESS
    finally:
        coordinator.close()


# ---------------------------------------------------------------------------
# email
# ---------------------------------------------------------------------------


def cmd_email(config: SupportConfig, action: str, fallback: str, console: Console) -> None:
    _run(_email(config, action, fallback, console))


async def _email(config: SupportConfig, action: str, fallback: str, console: Console) -> ExitCode:
    coordinator, _ = build_coordinator(config)
    try:
        coordinator.request_email_menu()
        content = render_overlay(coordinator, console)
        assert content is not None
        picked = OverlayAction.COPY_EMAIL if action == "copy" else choose(content, action, console)

        if picked == OverlayAction.COMPOSE:
            task = coordinator.choose_compose()
            if task is not None:
                await task
            if isinstance(coordinator.state, EmailUnavailable):
                _resolve_unavailable(coordinator, fallback, console)
                return ExitCode.HANDOFF_UNAVAILABLE
            console.print("[green]Opened a new message in your mail app.[/green]")
            return ExitCode.SUCCESS

        if picked == OverlayAction.COPY_EMAIL:
            coordinator.choose_copy()
            if not isinstance(coordinator.state, EmailCopied):
                console.print(
                    f"[yellow]Clipboard unavailable.[/yellow] "
                    f"Support email: {escape(coordinator.target.email)}"
                )
                return ExitCode.ERROR
            render_overlay(coordinator, console)
            await _wait_until_cleared(coordinator)
            return ExitCode.SUCCESS

        coordinator.choose_cancel()
        console.print("Cancelled.")
        return ExitCode.SUCCESS
    finally:
        coordinator.close()


# ---------------------------------------------------------------------------
# blog
# ---------------------------------------------------------------------------


def cmd_blog(config: SupportConfig, url: str | None, open_link: bool, console: Console) -> None:
    _run(_blog(config, url, open_link, console))


async def _blog(
    config: SupportConfig, url: str | None, open_link: bool, console: Console
) -> ExitCode:
    coordinator, dispatcher = build_coordinator(config)
    try:
        coordinator.request_blog(url)
        state = coordinator.state
        render_overlay(coordinator, console)

        if isinstance(state, BlogUnavailable):
            coordinator.dismiss()
            return ExitCode.CONFIG_ERROR

        assert isinstance(state, BlogPresented)
        if open_link:
            outcome = await dispatcher.attempt(dispatcher.build_web_request(state.url))
            if outcome == HandoffOutcome.REJECTED:
                console.print("[yellow]Could not open a browser.[/yellow] Visit the link above.")
        coordinator.dismiss()
        return ExitCode.SUCCESS
    finally:
        coordinator.close()
