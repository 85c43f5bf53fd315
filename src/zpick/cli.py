"""zpick CLI - pick a zmosh session with one keystroke."""

import typer

from zpick import __version__
from zpick.commands.attach import attach
from zpick.commands.check import check
from zpick.commands.kill import kill
from zpick.commands.pick import pick
from zpick.commands.resume import resume
from zpick.commands.sessions import list_sessions
from zpick.console import stdout_console
from zpick.logging_config import cleanup_old_logs, get_logger, setup_logging
from zpick.models.config import set_config
from zpick.services.config_loader import load_config

# Create the Typer app
app = typer.Typer(
    name="zpick",
    help="Pick a zmosh session with one keystroke.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands
app.command(name="list")(list_sessions)
app.command(name="check")(check)
app.command(name="attach")(attach)
app.command(name="kill")(kill)
app.command(name="resume")(resume)
app.command(name="pick", hidden=True)(pick)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        is_eager=True,
    ),
) -> None:
    """zpick - session launcher for zmosh.

    Run without a command to open the picker. The choice is handed to your
    shell, which runs `zpick resume` to cd and attach.
    """
    config = load_config()
    set_config(config)

    setup_logging(config)
    cleanup_old_logs(config.log_dir, max_age_days=30)

    logger = get_logger("zpick.cli")

    if version:
        stdout_console.print(f"zpick version {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand:
        logger.debug(f"Command invoked: {ctx.invoked_subcommand}")
        return

    # No command: run the picker
    pick()


if __name__ == "__main__":
    app()
