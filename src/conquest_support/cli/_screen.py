"""conquest-support screen | layout — terminal rendering of the support screen."""

from __future__ import annotations

import json

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from conquest_support.core.config import SupportConfig
from conquest_support.core.contact import (
    BLOG_SUBTITLE,
    BLOG_TITLE,
    FOOTER_TAGLINE,
    SCREEN_PROMPT,
    ContactTarget,
    ServicesList,
)
from conquest_support.core.layout import HeaderReservationTracker


def cmd_screen(config: SupportConfig, expanded: bool, console: Console) -> None:
    target = ContactTarget.from_config(config.contact)
    services = ServicesList(expanded=expanded)

    console.print(Panel(Text("Conquest Solutions", style="bold red", justify="center")))

    actions = Table.grid(padding=(0, 2))
    actions.add_column(style="bold")
    actions.add_column(style="cyan")
    actions.add_row("Call Support", escape(target.phone_display))
    actions.add_row("Email Support", escape(target.email))
    console.print(
        Panel(
            Group(Text(SCREEN_PROMPT, justify="center"), actions),
            border_style="red",
        )
    )

    console.print(
        Panel(
            Group(Text(BLOG_SUBTITLE), Text(escape(target.blog_url), style="underline")),
            title=f"[bold]{BLOG_TITLE}[/bold]",
            border_style="red",
        )
    )

    table = Table(title=f"Our Services ({services.state_label})", show_header=False, box=None)
    table.add_column()
    for item in services.visible:
        table.add_row(f"[red]•[/red] {escape(item.title)}")
    console.print(table)
    if not services.expanded:
        console.print("[dim]Run with --expanded to see all services.[/dim]")

    footer = Text(justify="center")
    for i, line in enumerate(FOOTER_TAGLINE):
        footer.append(line + "\n", style="red" if i == 1 else "")
    console.print(footer)


def cmd_layout(
    config: SupportConfig, heights: list[float], as_json: bool, console: Console
) -> None:
    tracker = HeaderReservationTracker.from_config(config.layout)
    rows = []
    for height in heights:
        result = tracker.accept(height)
        rows.append(
            {
                "measurement": height,
                "accepted": result is not None,
                "reserved_height": tracker.reserved_height,
            }
        )

    if as_json:
        print(
            json.dumps(
                {
                    "measurements": rows,
                    "reserved_height": tracker.reserved_height,
                    "pinned_header_height": config.layout.pinned_header_height,
                },
                indent=2,
            )
        )
        return

    table = Table(title="Header reservation")
    table.add_column("Measurement", justify="right")
    table.add_column("Result")
    table.add_column("Reserved", justify="right")
    for row in rows:
        result = "[green]accepted[/green]" if row["accepted"] else "[yellow]ignored[/yellow]"
        table.add_row(f"{row['measurement']:g}", result, f"{row['reserved_height']:g}")
    console.print(table)
    console.print(f"Reserved header height: [bold]{tracker.reserved_height:g}[/bold]")
    console.print(f"Pinned header bar: {config.layout.pinned_header_height:g}")
