"""
External test runner integration.
"""

from .delegate import delegate, exit_status
from .invocation import DEFAULT_COMMAND, Invocation, build_invocation

__all__ = [
    "DEFAULT_COMMAND",
    "Invocation",
    "build_invocation",
    "delegate",
    "exit_status",
]
