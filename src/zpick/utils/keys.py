"""Keystroke assignment for the session picker.

Sessions are selected with a single keypress. 'c' is reserved for entering a
custom session name and 'k' for kill mode, so neither appears in a table.
"""

CUSTOM_KEY = "c"
KILL_KEY = "k"

NUMBERS_FIRST = "123456789abdefghijlmnopqrstuvwxy"
LETTERS_FIRST = "abdefghijlmnopqrstuvwxy123456789"

# Returned by key_for_index when the position has no key
NO_KEY = "?"

LETTERS_MODE = "letters"
NUMBERS_MODE = "numbers"


def table_for_mode(mode: str) -> str:
    """Return the key table for a mode name.

    Only "letters" selects the letters-first table; every other value,
    including unknown ones, falls back to numbers-first.
    """
    if mode.strip().lower() == LETTERS_MODE:
        return LETTERS_FIRST
    return NUMBERS_FIRST


class KeyMap:
    """Maps picker positions to keys and back for one ordering mode."""

    def __init__(self, mode: str = NUMBERS_MODE) -> None:
        self._keys = table_for_mode(mode)
        self.mode = LETTERS_MODE if self._keys == LETTERS_FIRST else NUMBERS_MODE

    @property
    def keys(self) -> str:
        return self._keys

    @property
    def max_sessions(self) -> int:
        """Maximum number of sessions one picker screen can show."""
        return len(self._keys)

    def key_for_index(self, index: int) -> str:
        """Return the key for a session position, or NO_KEY if out of range."""
        if index < 0 or index >= len(self._keys):
            return NO_KEY
        return self._keys[index]

    def index_for_key(self, key: str) -> int | None:
        """Return the session position for a key, or None if it has none."""
        if len(key) != 1:
            return None
        position = self._keys.find(key)
        return position if position >= 0 else None
