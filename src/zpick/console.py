"""Rich console singletons and helpers for terminal output.

Human-facing output goes to stderr so that stdout stays reserved for
machine-readable output and the command line `zpick resume` hands to the
shell.
"""

from rich.console import Console
from rich.table import Table

from zpick.models.session import Session
from zpick.utils.keys import KeyMap

# Global console instances
console = Console(stderr=True)
stdout_console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")


def create_session_table(
    sessions: list[Session],
    key_map: KeyMap | None = None,
    title: str | None = None,
) -> Table:
    """Create a table of sessions, optionally with a key column."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    if key_map is not None:
        table.add_column("Key", style="bold cyan", justify="center")
    table.add_column("Session", style="cyan")
    table.add_column("Status")
    table.add_column("Started in", style="dim")

    for index, session in enumerate(sessions):
        status = (
            f"[green]active ({session.client_count})[/green]"
            if session.active
            else "[dim]idle[/dim]"
        )
        row = [session.name, status, session.started_in]
        if key_map is not None:
            row.insert(0, key_map.key_for_index(index))
        table.add_row(*row)

    return table
