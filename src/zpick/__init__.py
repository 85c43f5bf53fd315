"""zpick - session picker for zmosh."""

__version__ = "0.5.0"
