"""
Unified exception hierarchy for playpick.

Every fatal precondition of a run surfaces as a subclass of PlaypickError,
so the CLI can turn any of them into a console message and exit status 1
with a single except clause.
"""

from typing import Any


class PlaypickError(Exception):
    """
    Base exception for all playpick errors.

    Example:
        try:
            targets = read_targets(path)
        except PlaypickError as e:
            lg.error("cannot read targets", extra={"exception": e})
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(PlaypickError):
    """
    Configuration-related errors.

    Examples:
        - Runner configuration file missing or unreadable
        - Invalid YAML syntax in playpick.yaml
        - Unknown category hint in a structured target list
    """

    pass


class DiscoveryError(PlaypickError):
    """
    Test file discovery errors.

    Examples:
        - Tests directory missing or unreadable
        - No spec files left after the suffix filter and exclusion
    """

    pass


class SelectionError(PlaypickError):
    """
    Target selection errors.

    Raised when the mandatory Desktop category has no members.
    """

    pass


class RunnerError(PlaypickError):
    """
    Errors starting the external test runner.

    The runner's own non-zero exit status is not an error here, it is
    forwarded verbatim. This covers failing to start it at all.
    """

    pass
