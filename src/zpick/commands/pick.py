"""Pick command - the interactive session picker."""

import os
from pathlib import Path

import typer

from zpick.commands.attach import queue_switch
from zpick.commands.sessions import discover_or_exit
from zpick.console import console, create_session_table, print_error, print_success, print_warning
from zpick.exceptions import ZpickError
from zpick.logging_config import get_logger
from zpick.models.config import get_config
from zpick.models.session import DEFAULT_STARTED_IN, Session
from zpick.models.switch_target import ACTION_ATTACH, ACTION_NEW
from zpick.services.backend import ZmoshBackend
from zpick.utils.keys import CUSTOM_KEY, KILL_KEY, KeyMap

logger = get_logger("zpick.commands.pick")


def unique_session_name(base: str, existing: set[str]) -> str:
    """Return base, or base-N for the first N >= 2 not already taken."""
    base = base or "session"
    if base not in existing:
        return base
    suffix = 2
    while f"{base}-{suffix}" in existing:
        suffix += 1
    return f"{base}-{suffix}"


def _session_dir(session: Session) -> str:
    """Directory to cd into before attaching, empty when unknown."""
    if session.started_in == DEFAULT_STARTED_IN:
        return ""
    return os.path.expanduser(session.started_in)


def _select_session(key_map: KeyMap, sessions: list[Session], key: str) -> Session | None:
    index = key_map.index_for_key(key)
    if index is None or index >= len(sessions):
        return None
    return sessions[index]


def _kill_mode(key_map: KeyMap, sessions: list[Session]) -> None:
    key = typer.prompt(
        "Kill which session? (key)", default="", show_default=False, err=True
    ).strip()
    session = _select_session(key_map, sessions, key)
    if session is None:
        print_warning(f"No session on key '{key}'.")
        raise typer.Exit(1)

    try:
        ZmoshBackend(binary=get_config().backend).kill(session.name)
    except ZpickError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    print_success(f"Killed session '{session.name}'.")


def pick() -> None:
    """Pick a session with a single key and switch to it.

    Press a session's key to attach, Enter to start a session named after
    the current directory, 'c' to type a name, or 'k' to kill a session.
    """
    config = get_config()
    key_map = KeyMap(config.key_mode)
    sessions = discover_or_exit()
    existing = {s.name for s in sessions}

    if len(sessions) > key_map.max_sessions:
        logger.info(f"Showing {key_map.max_sessions} of {len(sessions)} sessions")
        print_warning(
            f"Only the first {key_map.max_sessions} of {len(sessions)} sessions have keys."
        )
        sessions = sessions[: key_map.max_sessions]

    cwd = Path.cwd()
    default_name = unique_session_name(cwd.name, existing)

    if sessions:
        console.print(create_session_table(sessions, key_map))
    else:
        console.print("[dim]No running sessions.[/dim]")
    console.print(
        f"[dim][Enter][/dim] new [cyan]{default_name}[/cyan]  "
        f"[dim][{CUSTOM_KEY}][/dim] custom name  [dim][{KILL_KEY}][/dim] kill"
    )

    choice = typer.prompt("Select", default="", show_default=False, err=True).strip()

    if not choice:
        queue_switch(ACTION_NEW, default_name, str(cwd))
        return

    if choice == CUSTOM_KEY:
        name = typer.prompt("Session name", default="", show_default=False, err=True).strip()
        if not name:
            print_warning("No name given.")
            raise typer.Exit(1)
        action = ACTION_ATTACH if name in existing else ACTION_NEW
        queue_switch(action, name, str(cwd))
        return

    if choice == KILL_KEY:
        _kill_mode(key_map, sessions)
        return

    session = _select_session(key_map, sessions, choice)
    if session is None:
        print_warning(f"No session on key '{choice}'.")
        raise typer.Exit(1)

    queue_switch(ACTION_ATTACH, session.name, _session_dir(session))
