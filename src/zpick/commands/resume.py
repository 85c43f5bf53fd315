"""Resume command - emit the shell line for a pending switch target."""

import typer

from zpick.logging_config import get_logger
from zpick.models.config import get_config
from zpick.services.backend import ZmoshBackend
from zpick.services.switcher import consume_target, resume_command

logger = get_logger("zpick.commands.resume")


def resume() -> None:
    """Print the command that performs the last picker selection.

    Meant for the shell hook: eval "$(zpick resume)". Prints nothing and
    exits 0 when nothing is pending.
    """
    target = consume_target()
    line = resume_command(target, ZmoshBackend(binary=get_config().backend))
    if not line:
        return

    logger.info(f"Resuming: {line}")
    typer.echo(line, nl=False)
