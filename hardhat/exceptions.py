"""Hard Hat exceptions.

All operational errors inherit from ``HardHatError`` so the CLI can report
them uniformly. Security findings are never raised; they are collected into
the scan result.
"""


class HardHatError(Exception):
    """Base exception for all Hard Hat errors."""


class PathNotFound(HardHatError):
    """Raised when the scan target does not exist."""

    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f"Path not found: {path}")


class ConfigError(HardHatError):
    """Raised when a configuration file cannot be used."""
