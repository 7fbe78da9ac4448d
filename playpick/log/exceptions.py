"""
Exceptions raised by the logging system.
"""

from typing import Any


class LogError(Exception):
    """Base exception for logging-related errors."""

    pass


class InvalidLogLevelError(LogError):
    """Raised when an invalid log level is specified."""

    def __init__(self, level: Any) -> None:
        self.level = level
        super().__init__(f"Invalid log level: {level}")


class InvalidLogLocationError(LogError):
    """Raised when the location setting is not a whole number."""

    def __init__(self, location: Any) -> None:
        self.location = location
        super().__init__(f"Invalid log location: {location!r}")
