"""
Errors raised by the application framework itself.

These point at mistakes in how tools are defined or wired together, as
opposed to PlaypickError which covers problems with the user's project.
"""

from typing import Any


class AppError(Exception):
    """Base exception for playpick.app."""


class UndefNameError(AppError):
    """A tool was created without a ToolConfig name."""

    def __init__(self, cls: Any | None = None) -> None:
        self.cls = cls
        what = f"Tool class {cls.__name__}" if cls else "Tool"
        super().__init__(f"{what} must define a name")


class DupToolError(AppError):
    """A tool name or alias is already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool '{name}' is already registered")


class UnknownToolError(AppError):
    """The main tool named is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool '{name}' is not registered")


class MissingLoggerError(AppError):
    """A tool logger was used before setup()."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Tool '{tool_name}' has no logger; call setup() first")


class MissingParentError(AppError):
    """A tool needs its App for something but was never registered."""

    def __init__(self, tool_name: str, property_name: str):
        self.tool_name = tool_name
        self.property_name = property_name
        super().__init__(
            f"Tool '{tool_name}' needs a parent App to access '{property_name}'"
        )
