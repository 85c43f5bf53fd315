"""Session model shared by every discovery strategy."""

from dataclasses import dataclass

# Working directory shown when the real one is unknown
DEFAULT_STARTED_IN = "~"


@dataclass(frozen=True)
class Session:
    """A running zmosh session."""

    name: str
    pid: int = 0
    client_count: int = 0
    started_in: str = DEFAULT_STARTED_IN

    @property
    def active(self) -> bool:
        """Whether at least one client is attached."""
        return self.client_count > 0

    def to_dict(self) -> dict[str, object]:
        """Convert to the JSON shape used by `zpick list --json`."""
        result: dict[str, object] = {"name": self.name}
        if self.pid:
            result["pid"] = self.pid
        result["clients"] = self.client_count
        result["started_in"] = self.started_in
        result["active"] = self.active
        return result
