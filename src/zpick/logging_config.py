"""Logging configuration for the zpick CLI.

Logs only ever go to files: stdout of `zpick resume` is evaluated by the
parent shell and must stay clean.
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zpick.models.config import Config

# Module-level state
_log_file: Path | None = None
_initialized: bool = False

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "zpick.log"


def setup_logging(config: Config | None = None) -> None:
    """Initialize the logging system.

    Args:
        config: Optional config supplying the state directory and verbosity.
                If verbose=True, logs DEBUG to file; otherwise INFO.
    """
    global _initialized, _log_file  # noqa: PLW0603
    if _initialized:
        return

    from zpick.models.config import Config

    config = config or Config()
    log_level = logging.DEBUG if config.verbose else logging.INFO

    root_logger = logging.getLogger("zpick")
    root_logger.setLevel(logging.DEBUG)  # Capture everything; handlers filter
    root_logger.propagate = False

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    try:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        _log_file = config.log_dir / LOG_FILE_NAME
        handler: logging.Handler = RotatingFileHandler(
            _log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB per file
            backupCount=5,
            encoding="utf-8",
        )
    except OSError:
        # A read-only home must not break the shell hook
        _log_file = None
        handler = logging.NullHandler()

    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    root_logger.addHandler(handler)

    _initialized = True

    root_logger.debug(f"zpick started (python {sys.version.split()[0]}, cwd {Path.cwd()})")


def get_log_file() -> Path | None:
    """Return the active log file, if logging to a file."""
    return _log_file


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module.

    Args:
        name: Module name (e.g., "zpick.services.backend")

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_subprocess_result(
    logger: logging.Logger,
    cmd: list[str] | str,
    exit_code: int,
    stdout: str | None = None,
    stderr: str | None = None,
    success: bool = True,
) -> None:
    """Log the result of a subprocess call.

    Args:
        logger: The logger to use
        cmd: Command that was executed
        exit_code: Process exit code
        stdout: Captured stdout (if any)
        stderr: Captured stderr (if any)
        success: Whether the operation succeeded
    """
    cmd_str = cmd if isinstance(cmd, str) else " ".join(cmd)
    level = logging.DEBUG if success else logging.WARNING

    logger.log(level, f"Subprocess: {cmd_str}")
    logger.log(level, f"  Exit code: {exit_code}")

    if stdout and stdout.strip():
        for line in stdout.strip().split("\n")[:50]:  # Limit to 50 lines
            logger.log(level, f"  stdout: {line}")
        if stdout.strip().count("\n") > 50:
            logger.log(level, "  stdout: ... (truncated)")

    if stderr and stderr.strip():
        for line in stderr.strip().split("\n")[:50]:
            logger.log(level, f"  stderr: {line}")
        if stderr.strip().count("\n") > 50:
            logger.log(level, "  stderr: ... (truncated)")


def cleanup_old_logs(log_dir: Path, max_age_days: int = 30) -> None:
    """Remove rotated log files older than max_age_days.

    Args:
        log_dir: Directory holding the logs
        max_age_days: Delete logs older than this many days
    """
    if not log_dir.is_dir():
        return

    cutoff = datetime.now(tz=UTC).timestamp() - (max_age_days * 24 * 60 * 60)
    logger = get_logger("zpick.logging")

    for log_file in log_dir.glob(f"{LOG_FILE_NAME}.*"):
        try:
            if log_file.stat().st_mtime < cutoff:
                log_file.unlink()
                logger.debug(f"Cleaned up old log file: {log_file}")
        except OSError as e:
            logger.warning(f"Failed to clean up log file {log_file}: {e}")
