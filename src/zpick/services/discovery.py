"""Session discovery: pick one strategy per call and return its sessions."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from zpick.exceptions import DiscoveryError
from zpick.logging_config import get_logger
from zpick.models.config import Config
from zpick.models.session import Session
from zpick.services.backend import ZmoshBackend
from zpick.services.fastpath import resolve_socket_dir, scan_socket_dir
from zpick.utils.parsing import parse_sessions

logger = get_logger("zpick.services.discovery")


class DiscoveryStrategy(Protocol):
    """One way of finding the running sessions."""

    name: str

    def discover(self) -> list[Session]:
        """Return the running sessions, raising DiscoveryError on failure."""
        ...


@dataclass
class FastPathStrategy:
    """List sessions from the zmx socket directory."""

    socket_dir: Path
    current_session: str | None = None
    name: str = "fast-path"

    def discover(self) -> list[Session]:
        return scan_socket_dir(self.socket_dir, self.current_session)


@dataclass
class TextProtocolStrategy:
    """List sessions by running `zmosh list` and parsing its output."""

    backend: ZmoshBackend
    name: str = "text-protocol"

    def discover(self) -> list[Session]:
        return parse_sessions(self.backend.list_output())


class SessionDiscovery:
    """Runs discovery strategies in order until one succeeds.

    Results are never merged: the first strategy that succeeds provides the
    whole list, in its own order. An empty list is a successful answer.
    """

    def __init__(self, strategies: Sequence[DiscoveryStrategy]) -> None:
        if not strategies:
            raise ValueError("SessionDiscovery needs at least one strategy")
        self.strategies = list(strategies)

    @classmethod
    def from_config(cls, config: Config, backend: ZmoshBackend | None = None) -> "SessionDiscovery":
        """Build the strategy chain for a configuration.

        The fast path goes first unless disabled; `zmosh list` is always the
        fallback.
        """
        backend = backend or ZmoshBackend(binary=config.backend)
        strategies: list[DiscoveryStrategy] = []

        if config.fast_path:
            socket_dir = config.socket_dir
            if socket_dir is None:
                try:
                    socket_dir = resolve_socket_dir()
                except DiscoveryError as e:
                    logger.debug(f"Fast path unavailable: {e}")
            if socket_dir is not None:
                strategies.append(FastPathStrategy(socket_dir, config.current_session))

        strategies.append(TextProtocolStrategy(backend))
        return cls(strategies)

    def discover(self) -> list[Session]:
        """Return the sessions reported by the first working strategy.

        Raises:
            DiscoveryError: If every strategy failed; carries the last failure.
        """
        last_error: DiscoveryError | None = None

        for strategy in self.strategies:
            try:
                sessions = strategy.discover()
            except DiscoveryError as e:
                logger.info(f"Discovery via {strategy.name} failed: {e}")
                last_error = e
                continue
            logger.debug(f"Discovered {len(sessions)} session(s) via {strategy.name}")
            return sessions

        assert last_error is not None
        raise last_error
