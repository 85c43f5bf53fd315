"""Attach command - queue a session for the shell hook to attach to."""

from pathlib import Path
from typing import Annotated

import typer

from zpick.commands.sessions import discover_or_exit
from zpick.console import console, print_error
from zpick.models.switch_target import ACTION_ATTACH, ACTION_NEW, SwitchTarget
from zpick.services.switcher import write_target


def queue_switch(action: str, name: str, directory: str = "") -> None:
    """Record a switch target for `zpick resume` to pick up."""
    try:
        write_target(SwitchTarget(action=action, name=name, dir=directory))
    except OSError as e:
        print_error(f"Could not write switch target: {e}")
        raise typer.Exit(1) from e

    verb = "Attaching to" if action == ACTION_ATTACH else "Creating"
    console.print(f"[bold green]{verb}[/bold green] [cyan]{name}[/cyan]")


def attach(
    name: Annotated[str, typer.Argument(help="Session to attach to or create")],
    directory: Annotated[
        Path | None,
        typer.Option("--dir", "-d", help="Directory to cd into before attaching"),
    ] = None,
) -> None:
    """Attach to a session, creating it if it does not exist.

    The switch happens in your shell: zpick records the target and the
    shell hook runs `zpick resume` to cd and exec into the session.
    Without the hook, finish with: eval "$(zpick resume)"
    """
    existing = {s.name for s in discover_or_exit()}
    action = ACTION_ATTACH if name in existing else ACTION_NEW
    resolved = str(directory.expanduser().resolve()) if directory else ""
    queue_switch(action, name, resolved)
