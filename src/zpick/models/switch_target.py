"""The record handed from the picker to the parent shell."""

from dataclasses import dataclass, field

ACTION_ATTACH = "attach"
ACTION_NEW = "new"
RESUMABLE_ACTIONS = (ACTION_ATTACH, ACTION_NEW)


@dataclass
class SwitchTarget:
    """The user's most recent selection, waiting for `zpick resume`."""

    action: str
    name: str
    dir: str = ""
    written_at: float = field(default=0.0, compare=False)

    @property
    def is_resumable(self) -> bool:
        """Whether `resume` should emit a command for this target."""
        return self.action in RESUMABLE_ACTIONS and bool(self.name)

    def to_dict(self) -> dict[str, object]:
        """Convert to a dictionary for serialization."""
        return {
            "action": self.action,
            "name": self.name,
            "dir": self.dir,
            "written_at": self.written_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "SwitchTarget | None":
        """Create a SwitchTarget from a decoded record.

        Returns None when the record does not have the expected shape.
        """
        action = data.get("action", "")
        name = data.get("name", "")
        directory = data.get("dir", "")
        written_at = data.get("written_at", 0.0)

        if not isinstance(action, str) or not isinstance(name, str):
            return None
        if not isinstance(directory, str):
            return None
        # bool is an int subclass, reject it explicitly
        if isinstance(written_at, bool) or not isinstance(written_at, int | float):
            return None

        return cls(action=action, name=name, dir=directory, written_at=float(written_at))
