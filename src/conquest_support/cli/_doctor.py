"""conquest-support doctor — environment and configuration health check."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from rich.console import Console


def cmd_doctor(config_path: Path | None, as_json: bool, console: Console) -> None:
    from conquest_support.cli._runtime import make_clipboard, make_opener
    from conquest_support.core.config import load_config

    checks = [
        {
            "name": "Python version",
            "status": "pass" if sys.version_info >= (3, 11) else "fail",
            "detail": sys.version.split()[0],
        },
        {"name": "Platform", "status": "pass", "detail": sys.platform},
    ]

    try:
        cfg = load_config(config_path)
        source = str(cfg.config_path) if cfg.config_path else "built-in defaults"
        checks.append({"name": "Configuration", "status": "pass", "detail": source})
    except Exception as exc:  # noqa: BLE001
        checks.append({"name": "Configuration", "status": "fail", "detail": str(exc)})

    opener = make_opener()
    opener_ok = bool(getattr(opener, "available", lambda: True)())
    checks.append(
        {
            "name": "Call/email handler",
            "status": "pass" if opener_ok else "warn",
            "detail": "found" if opener_ok else "not found; call and email will offer copy instead",
        }
    )

    clipboard = make_clipboard()
    clipboard_ok = bool(getattr(clipboard, "available", lambda: True)())
    checks.append(
        {
            "name": "Clipboard",
            "status": "pass" if clipboard_ok else "warn",
            "detail": "available" if clipboard_ok else "no clipboard backend",
        }
    )

    all_pass = all(c["status"] != "fail" for c in checks)

    if as_json:
        print(json.dumps({"checks": checks, "all_pass": all_pass}, indent=2))
    else:
        console.print("[bold]Conquest Support Doctor[/bold]\n")
        icons = {
            "pass": "[green]PASS[/green]",
            "warn": "[yellow]WARN[/yellow]",
            "fail": "[red]FAIL[/red]",
        }
        for c in checks:
            console.print(f"  {icons[c['status']]}  {c['name']}: {c['detail']}")

        console.print()
        if all_pass:
            console.print("[green]All checks passed.[/green]")
        else:
            console.print("[red]Some checks failed.[/red]")

    if not all_pass:
        sys.exit(1)
