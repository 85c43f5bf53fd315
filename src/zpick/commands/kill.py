"""Kill command - stop a zmosh session."""

from typing import Annotated

import typer

from zpick.console import print_error, print_success
from zpick.exceptions import ZpickError
from zpick.models.config import get_config
from zpick.services.backend import ZmoshBackend


def kill(
    name: Annotated[str, typer.Argument(help="Session to kill")],
) -> None:
    """Kill a running zmosh session."""
    backend = ZmoshBackend(binary=get_config().backend)
    try:
        backend.kill(name)
    except ZpickError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    print_success(f"Killed session '{name}'.")
