"""List command - show running zmosh sessions."""

import json
from typing import Annotated

import typer

from zpick.console import console, create_session_table, print_error, stdout_console
from zpick.exceptions import DiscoveryError
from zpick.models.config import get_config
from zpick.models.session import Session
from zpick.services.backend import ZmoshBackend
from zpick.services.discovery import SessionDiscovery


def discover_or_exit() -> list[Session]:
    """Discover sessions, exiting with an error message if that fails."""
    config = get_config()
    discovery = SessionDiscovery.from_config(config, ZmoshBackend(binary=config.backend))
    try:
        return discovery.discover()
    except DiscoveryError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


def list_sessions(
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print machine-readable JSON"),
    ] = False,
) -> None:
    """List running zmosh sessions."""
    sessions = discover_or_exit()

    if as_json:
        payload = {"sessions": [s.to_dict() for s in sessions], "count": len(sessions)}
        typer.echo(json.dumps(payload, indent=2))
        return

    if not sessions:
        console.print("[yellow]No running sessions found.[/yellow]")
        console.print("\nStart one with: [cyan]zpick[/cyan]")
        return

    stdout_console.print(create_session_table(sessions, title="zmosh sessions"))
