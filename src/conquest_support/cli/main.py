"""
Conquest Support CLI entry point.

Commands:
  conquest-support screen [--expanded]        — render the support screen
  conquest-support call                       — call support (dialer handoff)
  conquest-support email [--action ...]       — email options: compose, copy, cancel
  conquest-support blog [--url URL]           — open the Conquest blog
  conquest-support layout <heights...>        — feed header measurements, show reserved space
  conquest-support config show|init|validate  — view and manage configuration
  conquest-support doctor                     — environment health check
"""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from conquest_support import __version__

console = Console()

_FALLBACK_CHOICE = click.Choice(["ask", "copy", "dismiss"])


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "--version", "-V", message="conquest-support %(version)s")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml (default: ~/.conquest-support/config.toml)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """Conquest Solutions support — reach the support team from your terminal."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


# ---------------------------------------------------------------------------
# screen
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--expanded", is_flag=True, default=False, help="Show every service")
@click.pass_context
def screen(ctx: click.Context, expanded: bool) -> None:
    """Render the support screen."""
    from conquest_support.cli._runtime import load_or_exit
    from conquest_support.cli._screen import cmd_screen

    config = load_or_exit(ctx.obj["config_path"], console)
    cmd_screen(config=config, expanded=expanded, console=console)


# ---------------------------------------------------------------------------
# call / email / blog
# ---------------------------------------------------------------------------


@cli.command()
@click.option(
    "--fallback",
    type=_FALLBACK_CHOICE,
    default="ask",
    help="What to do if this device cannot place calls",
)
@click.pass_context
def call(ctx: click.Context, fallback: str) -> None:
    """Call support."""
    from conquest_support.cli._actions import cmd_call
    from conquest_support.cli._runtime import load_or_exit

    config = load_or_exit(ctx.obj["config_path"], console)
    cmd_call(config=config, fallback=fallback, console=console)


@cli.command()
@click.option(
    "--action",
    type=click.Choice(["ask", "compose", "copy", "cancel"]),
    default="ask",
    help="Email option to pick without prompting",
)
@click.option(
    "--fallback",
    type=_FALLBACK_CHOICE,
    default="ask",
    help="What to do if mail cannot be opened",
)
@click.pass_context
def email(ctx: click.Context, action: str, fallback: str) -> None:
    """Email support: compose a message or copy the address."""
    from conquest_support.cli._actions import cmd_email
    from conquest_support.cli._runtime import load_or_exit

    config = load_or_exit(ctx.obj["config_path"], console)
    cmd_email(config=config, action=action, fallback=fallback, console=console)


@cli.command()
@click.option("--url", default=None, help="Override the configured blog URL")
@click.option("--no-open", is_flag=True, default=False, help="Validate and show the link only")
@click.pass_context
def blog(ctx: click.Context, url: str | None, no_open: bool) -> None:
    """Open the Conquest blog."""
    from conquest_support.cli._actions import cmd_blog
    from conquest_support.cli._runtime import load_or_exit

    config = load_or_exit(ctx.obj["config_path"], console)
    cmd_blog(config=config, url=url, open_link=not no_open, console=console)


# ---------------------------------------------------------------------------
# layout
# ---------------------------------------------------------------------------


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("heights", nargs=-1, type=float)
@click.option("--json", "as_json", is_flag=True, default=False)
@click.pass_context
def layout(ctx: click.Context, heights: tuple[float, ...], as_json: bool) -> None:
    """Feed header HEIGHTS to the tracker and show the reserved space."""
    from conquest_support.cli._runtime import load_or_exit
    from conquest_support.cli._screen import cmd_layout

    config = load_or_exit(ctx.obj["config_path"], console)
    cmd_layout(config=config, heights=list(heights), as_json=as_json, console=console)


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------


from conquest_support.cli._config_cmd import config_group  # noqa: E402

cli.add_command(config_group)


# ---------------------------------------------------------------------------
# doctor
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--json", "as_json", is_flag=True, default=False)
@click.pass_context
def doctor(ctx: click.Context, as_json: bool) -> None:
    """Environment and configuration health check."""
    from conquest_support.cli._doctor import cmd_doctor

    cmd_doctor(config_path=ctx.obj["config_path"], as_json=as_json, console=console)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
