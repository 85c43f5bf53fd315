"""Fast-path session listing straight from the zmx socket directory.

Every live session owns a Unix socket named after it. Listing the directory
avoids spawning `zmosh list`, at the cost of pid, client counts and the
starting directory. The only activity signal is ZMX_SESSION: the session the
current shell is inside is reported with one client, every other session as
idle even if someone else is attached.
"""

import os
import stat
from pathlib import Path

from zpick.exceptions import DiscoveryError
from zpick.logging_config import get_logger
from zpick.models.session import DEFAULT_STARTED_IN, Session

logger = get_logger("zpick.services.fastpath")


def resolve_socket_dir(env: dict[str, str] | None = None) -> Path:
    """Resolve the zmx socket directory.

    Order: ZMX_DIR, then $XDG_RUNTIME_DIR/zmx, then /tmp/zmx-<uid>.

    Raises:
        DiscoveryError: If no location can be determined.
    """
    env = dict(os.environ) if env is None else env

    if env.get("ZMX_DIR"):
        return Path(env["ZMX_DIR"])
    if env.get("XDG_RUNTIME_DIR"):
        return Path(env["XDG_RUNTIME_DIR"]) / "zmx"
    if hasattr(os, "getuid"):
        return Path("/tmp") / f"zmx-{os.getuid()}"  # noqa: S108
    raise DiscoveryError("Cannot determine the zmx socket directory; set ZMX_DIR")


def scan_socket_dir(directory: Path, current_session: str | None = None) -> list[Session]:
    """List sessions from the sockets directly inside a directory.

    Subdirectories (such as logs/) and regular files are ignored.

    Args:
        directory: The zmx socket directory
        current_session: Name of the session this process runs in, if any

    Returns:
        Sessions sorted by name

    Raises:
        DiscoveryError: If the directory cannot be read.
    """
    sessions: list[Session] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    mode = entry.stat(follow_symlinks=False).st_mode
                except OSError:
                    # Socket removed between listing and stat
                    continue
                if not stat.S_ISSOCK(mode):
                    continue
                clients = 1 if current_session and entry.name == current_session else 0
                sessions.append(
                    Session(name=entry.name, client_count=clients, started_in=DEFAULT_STARTED_IN)
                )
    except OSError as e:
        raise DiscoveryError(f"Cannot read socket directory {directory}: {e}") from e

    sessions.sort(key=lambda s: s.name)
    logger.debug(f"Fast path found {len(sessions)} session(s) in {directory}")
    return sessions
