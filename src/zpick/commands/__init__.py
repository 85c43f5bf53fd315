"""CLI commands for zpick."""

from zpick.commands.attach import attach
from zpick.commands.check import check
from zpick.commands.kill import kill
from zpick.commands.pick import pick
from zpick.commands.resume import resume
from zpick.commands.sessions import list_sessions

__all__ = ["attach", "check", "kill", "list_sessions", "pick", "resume"]
