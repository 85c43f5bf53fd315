"""Check command - report the tools zpick relies on."""

import json
from typing import Annotated

import typer

from zpick.console import stdout_console
from zpick.models.config import get_config
from zpick.services.deps import DepStatus, check_dependencies


def _print_dep(name: str, status: DepStatus, *, required: bool) -> None:
    if status.installed:
        mark = "[green]✓[/green]"
    elif required:
        mark = "[red]✗[/red]"
    else:
        mark = "[yellow]○[/yellow]"
    label = "required" if required else "optional"
    detail = (status.version or "installed") if status.installed else "not found"
    stdout_console.print(f"  {mark} {name} [dim]({label})[/dim] - {detail}")


def check(
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print machine-readable JSON"),
    ] = False,
) -> None:
    """Check that zmosh and the optional helpers are installed.

    Exits with status 1 when the backend is missing.
    """
    config = get_config()
    result = check_dependencies(config.backend)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        _print_dep(config.backend, result.zmosh, required=True)
        _print_dep("zoxide", result.zoxide, required=False)
        _print_dep("fzf", result.fzf, required=False)
        stdout_console.print(f"\nPlatform: {result.os}/{result.arch}, Shell: {result.shell}")

    if not result.zmosh.installed:
        raise typer.Exit(1)
