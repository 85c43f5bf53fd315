"""Service layer for backend integration and session handoff."""

from zpick.services.backend import ZmoshBackend
from zpick.services.discovery import (
    FastPathStrategy,
    SessionDiscovery,
    TextProtocolStrategy,
)

__all__ = ["FastPathStrategy", "SessionDiscovery", "TextProtocolStrategy", "ZmoshBackend"]
