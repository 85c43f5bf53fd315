"""Switch-target handoff between the picker and the parent shell.

A child process cannot change its parent shell's directory or replace it
with another program. The picker therefore records the user's choice in a
single file and exits; the shell hook then runs `zpick resume`, which turns
the record into a `cd ... && exec ...` line for the shell to eval.

The file is a single slot: each write replaces the previous record. Reading
is deliberately forgiving. A missing, empty, corrupt or stale file all mean
"nothing to resume", because the hook runs on every prompt.
"""

import contextlib
import json
import os
import tempfile
import time
from pathlib import Path

from zpick.logging_config import get_logger
from zpick.models.config import get_config
from zpick.models.switch_target import SwitchTarget
from zpick.services.backend import ZmoshBackend, shell_quote

logger = get_logger("zpick.services.switcher")


def write_target(target: SwitchTarget, path: Path | None = None) -> Path:
    """Persist a switch target, replacing any pending one.

    The record is written to a temporary file and renamed into place so a
    concurrent reader never sees half of it.

    Args:
        target: The selection to hand off
        path: Switch file location (defaults to the configured one)

    Returns:
        The path written
    """
    path = path or get_config().switch_file
    path.parent.mkdir(parents=True, exist_ok=True)

    target.written_at = time.time()
    payload = json.dumps(target.to_dict())

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise

    logger.info(f"Wrote switch target: {target.action} '{target.name}' dir={target.dir or '-'}")
    return path


def read_target(path: Path | None = None, max_age: float | None = None) -> SwitchTarget | None:
    """Read the pending switch target, if there is a usable one.

    Args:
        path: Switch file location (defaults to the configured one)
        max_age: Ignore records older than this many seconds
            (defaults to the configured switch_max_age)

    Returns:
        The pending target, or None when there is nothing to resume.
    """
    config = get_config()
    path = path or config.switch_file
    max_age = config.switch_max_age if max_age is None else max_age

    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Ignoring unreadable switch file {path}: {e}")
        return None

    if not content.strip():
        return None

    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        logger.debug(f"Ignoring malformed switch file {path}")
        return None

    if not isinstance(data, dict):
        return None

    target = SwitchTarget.from_dict(data)
    if target is None:
        logger.debug(f"Ignoring switch file {path} with unexpected fields")
        return None

    if target.written_at and time.time() - target.written_at > max_age:
        logger.debug(f"Ignoring stale switch target for '{target.name}'")
        return None

    return target


def consume_target(path: Path | None = None, max_age: float | None = None) -> SwitchTarget | None:
    """Read the pending switch target and remove the file.

    Removal is best effort; a leftover file is harmless because stale
    records are ignored.
    """
    path = path or get_config().switch_file
    target = read_target(path, max_age=max_age)
    with contextlib.suppress(OSError):
        path.unlink(missing_ok=True)
    return target


def resume_command(target: SwitchTarget | None, backend: ZmoshBackend) -> str:
    """Build the shell line that carries out a switch target.

    Returns:
        `cd "<dir>" && exec <attach>` or `exec <attach>` for attach/new
        targets, and an empty string for anything else.
    """
    if target is None or not target.is_resumable:
        return ""

    attach = backend.attach_command(target.name)
    if target.dir:
        return f"cd {shell_quote(target.dir)} && exec {attach}"
    return f"exec {attach}"
