"""
Application framework: an App made of Tools, with standard arguments,
configuration loading and logging setup.
"""

from .app import App
from .args import DefaultsHelpFormatter
from .errors import (
    DupToolError,
    AppError,
    MissingLoggerError,
    MissingParentError,
    UndefNameError,
    UnknownToolError,
)
from .tool import Tool, ToolConfig

__all__ = [
    "App",
    "DefaultsHelpFormatter",
    "DupToolError",
    "AppError",
    "MissingLoggerError",
    "MissingParentError",
    "Tool",
    "ToolConfig",
    "UndefNameError",
    "UnknownToolError",
]
