"""Parsing utilities for zpick."""

from zpick.models.session import DEFAULT_STARTED_IN, Session

# zmosh prefixes the session of the invoking shell with this marker
CURRENT_SESSION_MARKER = "→ "


def _parse_int(value: str) -> int:
    """Parse an integer field, falling back to 0."""
    try:
        return int(value)
    except ValueError:
        return 0


def parse_sessions(output: str) -> list[Session]:
    """Parse the output of `zmosh list` into sessions.

    Each line holds tab-separated ``key=value`` fields, for example::

        session_name=work<TAB>pid=123<TAB>clients=1<TAB>started_in=~/code

    Lines may be indented or start with the current-session marker. Lines
    without a ``session_name`` are dropped and unparsable numbers become 0,
    so a noisy line never hides the rest of the list.

    Args:
        output: Raw stdout of `zmosh list`

    Returns:
        Sessions in the order they appear
    """
    sessions: list[Session] = []

    for raw_line in output.split("\n"):
        line = raw_line.strip().removeprefix(CURRENT_SESSION_MARKER).strip()
        if not line:
            continue

        name = ""
        pid = 0
        clients = 0
        started_in = DEFAULT_STARTED_IN

        for raw_field in line.split("\t"):
            key, sep, value = raw_field.strip().partition("=")
            if not sep:
                continue
            if key == "session_name":
                name = value
            elif key == "pid":
                pid = _parse_int(value)
            elif key == "clients":
                clients = _parse_int(value)
            elif key == "started_in":
                started_in = value or DEFAULT_STARTED_IN

        if not name:
            continue

        sessions.append(Session(name=name, pid=pid, client_count=clients, started_in=started_in))

    return sessions
