"""Configuration file loader for zpick."""

import json
import os
from pathlib import Path

from zpick.logging_config import get_logger
from zpick.models.config import Config, default_state_dir

logger = get_logger("zpick.services.config_loader")

CONFIG_FILE_NAME = "config.json"

_TRUTHY = ("1", "true", "yes")


def load_config(env: dict[str, str] | None = None) -> Config:
    """Load configuration from the config file and environment.

    Environment variables override file config:
    - ZPICK_HOME: State directory (default ~/.zpick)
    - ZPICK_BACKEND: Backend binary to run (default "zmosh")
    - ZPICK_KEYS: Key ordering, "numbers" or "letters"
    - ZPICK_NO_FASTPATH: "1" to always run `zmosh list`
    - ZPICK_VERBOSE: "1" to log at DEBUG level
    - ZMX_DIR: Socket directory scanned by the fast path
    - ZMX_SESSION: Session the current shell is attached to

    Args:
        env: Environment mapping, defaults to os.environ

    Returns:
        Config with values from env, file, or defaults.
    """
    env = dict(os.environ) if env is None else env

    state_dir = Path(env["ZPICK_HOME"]).expanduser() if env.get("ZPICK_HOME") else None
    if state_dir is None:
        state_dir = default_state_dir()

    data = _load_file(state_dir / CONFIG_FILE_NAME)
    config = Config(state_dir=state_dir)

    backend = env.get("ZPICK_BACKEND") or data.get("backend")
    if isinstance(backend, str) and backend:
        config.backend = backend

    key_mode = env.get("ZPICK_KEYS") or data.get("keys")
    if isinstance(key_mode, str) and key_mode:
        config.key_mode = key_mode

    fast_path = data.get("fast_path")
    if isinstance(fast_path, bool):
        config.fast_path = fast_path
    if env.get("ZPICK_NO_FASTPATH", "").lower() in _TRUTHY:
        config.fast_path = False

    max_age = data.get("switch_max_age")
    if isinstance(max_age, int | float) and not isinstance(max_age, bool) and max_age > 0:
        config.switch_max_age = float(max_age)

    verbose = data.get("verbose")
    if isinstance(verbose, bool):
        config.verbose = verbose
    env_verbose = env.get("ZPICK_VERBOSE")
    if env_verbose is not None:
        config.verbose = env_verbose.lower() in _TRUTHY

    if env.get("ZMX_DIR"):
        config.socket_dir = Path(env["ZMX_DIR"])
    config.current_session = env.get("ZMX_SESSION") or None

    return config


def _load_file(config_file: Path) -> dict[str, object]:
    """Load the raw settings dictionary from the config file.

    Returns:
        The decoded settings, or an empty dict if missing or unreadable.
    """
    if not config_file.exists():
        logger.debug(f"Config file not found: {config_file}")
        return {}

    try:
        with config_file.open(encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to load config file: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {config_file}: expected a JSON object")
        return {}
    return data
