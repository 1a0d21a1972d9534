"""Error types raised by internationalize."""

from typing import Sequence

SUPPORTED_ENGINES: tuple[str, ...] = ("sqlite", "postgresql", "mysql")


class InternationalizeError(Exception):
    """Base class for internationalize errors."""


class UnsupportedAdapter(InternationalizeError):
    """Raised when a database driver name matches no known adapter."""

    def __init__(self, driver_name: str, supported: Sequence[str] = SUPPORTED_ENGINES) -> None:
        """Build the error message from the offending driver name."""
        self.driver_name = driver_name
        self.supported = tuple(supported)
        super().__init__(
            f"Database adapter '{driver_name}' is not supported. "
            f"Supported adapters: {', '.join(self.supported)}"
        )
