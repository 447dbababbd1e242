"""CLI commands: conquest-support config show | init | validate."""

from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.markup import escape

from conquest_support.core.constants import ExitCode

console = Console()


@click.group("config")
def config_group() -> None:
    """View, create, and validate Conquest Support configuration."""


@config_group.command("show")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON")
@click.pass_context
def config_show(ctx, as_json):
    """Display the effective configuration (file + env + defaults)."""
    from conquest_support.core.config import load_config
    from conquest_support.core.exceptions import ConfigError

    try:
        cfg = load_config(_explicit_path(ctx))
    except ConfigError as exc:
        console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(ExitCode.CONFIG_ERROR)

    data = _config_to_dict(cfg)
    data["_config_path"] = str(cfg.config_path) if cfg.config_path else "built-in defaults"

    if as_json:
        click.echo(json.dumps(data, indent=2))
    else:
        _print_config_rich(data, console)


@config_group.command("init")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing config file")
@click.pass_context
def config_init(ctx, force):
    """Write a config file populated with the defaults."""
    from conquest_support.core.config import SupportConfig, _config_file_path, save_config
    from conquest_support.core.exceptions import ConfigError

    cfg_path = _explicit_path(ctx) or _config_file_path()
    if cfg_path.exists() and not force:
        console.print(f"[yellow]Config already exists:[/yellow] {cfg_path}")
        console.print("Use --force to overwrite.")
        sys.exit(ExitCode.ERROR)

    try:
        saved = save_config(_config_to_dict(SupportConfig()), cfg_path)
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(ExitCode.CONFIG_ERROR)
    console.print(f"[green]Config written:[/green] {saved}")


@config_group.command("validate")
@click.pass_context
def config_validate(ctx):
    """Validate the config file against the schema."""
    from conquest_support.core.config import _config_file_path, load_config

    cfg_path = _explicit_path(ctx) or _config_file_path()
    if not cfg_path.exists():
        console.print(f"[red]Config not found:[/red] {cfg_path}")
        sys.exit(ExitCode.CONFIG_ERROR)

    try:
        load_config(cfg_path)
        console.print(f"[green]Config is valid:[/green] {cfg_path}")
    except Exception as exc:
        console.print(f"[red]Config validation failed:[/red] {exc}")
        sys.exit(ExitCode.CONFIG_ERROR)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _explicit_path(ctx):
    """--config from the root group, if given."""
    root = ctx.find_root()
    return (root.obj or {}).get("config_path")


def _config_to_dict(cfg):
    """Serialize SupportConfig to a plain TOML-friendly dict."""
    return {
        "contact": {
            "phone_display": cfg.contact.phone_display,
            "email": cfg.contact.email,
            "email_subject": cfg.contact.email_subject,
            "email_body_lines": list(cfg.contact.email_body_lines),
            "blog_url": cfg.contact.blog_url,
        },
        "overlay": {"copied_display_seconds": cfg.overlay.copied_display_seconds},
        "layout": {
            "header_ceiling": cfg.layout.header_ceiling,
            "logo_max_height": cfg.layout.logo_max_height,
            "top_padding": cfg.layout.top_padding,
            "pinned_header_height": cfg.layout.pinned_header_height,
        },
        "logging": {"level": cfg.logging.level, "format": cfg.logging.format},
    }


def _print_config_rich(data, console):
    """Print config dict in a human-friendly format."""
    path = data.pop("_config_path", "unknown")
    console.print(f"[bold]Conquest Support Configuration[/bold]  ({escape(path)})\n")

    for section, values in data.items():
        if isinstance(values, dict):
            console.print(f"  [cyan]{escape(f'[{section}]')}[/cyan]")
            for k, v in values.items():
                console.print(f"    {k} = {escape(repr(v))}")
        else:
            console.print(f"  {section} = {escape(repr(values))}")
    console.print()
