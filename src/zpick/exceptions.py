"""Custom exceptions for zpick."""


class ZpickError(Exception):
    """Base exception for all zpick errors."""


class DependencyMissingError(ZpickError):
    """Raised when a required external dependency is not installed."""

    def __init__(self, dependencies: list[str]) -> None:
        self.dependencies = dependencies
        deps_str = ", ".join(dependencies)
        super().__init__(f"Missing required dependencies: {deps_str}")


class DiscoveryError(ZpickError):
    """Raised when the list of running sessions cannot be determined."""


class BackendError(ZpickError):
    """Raised when a zmosh operation fails."""
