"""Runtime configuration for zpick."""

import os
from dataclasses import dataclass, field
from pathlib import Path


def default_state_dir() -> Path:
    """Return the zpick state directory, honoring ZPICK_HOME."""
    override = os.environ.get("ZPICK_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".zpick"


@dataclass
class Config:
    """Runtime configuration for zpick operations."""

    # Backend settings
    backend: str = "zmosh"
    fast_path: bool = True
    socket_dir: Path | None = None  # None resolves from ZMX_DIR or the zmx default
    current_session: str | None = None  # ZMX_SESSION of the invoking shell

    # Picker settings
    key_mode: str = "numbers"  # "numbers" or "letters"

    # Handoff settings
    switch_max_age: float = 300.0  # seconds before a pending target is ignored

    # Output settings
    verbose: bool = False

    # Paths
    state_dir: Path = field(default_factory=default_state_dir)

    @property
    def switch_file(self) -> Path:
        """Path of the single-slot switch-target file."""
        return self.state_dir / "switch-target.json"

    @property
    def log_dir(self) -> Path:
        """Directory holding zpick log files."""
        return self.state_dir / "logs"


# Global config instance (set by the CLI callback)
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration, creating a default if none exists."""
    global _config  # noqa: PLW0603
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration."""
    global _config  # noqa: PLW0603
    _config = config
