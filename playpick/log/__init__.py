"""
Logging module with colored output, structured extra fields and a TRACE level.

This module extends Python's standard logging with:
- Custom TRACE log level for detailed debugging
- Colored console output with ANSI escape sequences
- Structured logging with extra fields rendered as [key:value]
- Derived "view" loggers sharing the root logger's handler
- Complete logging disable functionality (level=False or level="false")
"""

import logging

from .config import LogConfig, resolve_level
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, InvalidLogLocationError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import Logger

logging.addLevelName(LogConstants.CUSTOM_LEVELS["TRACE"], "TRACE")

__all__ = [
    "InvalidLogLevelError",
    "InvalidLogLocationError",
    "LogConfig",
    "LogConstants",
    "LogError",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
    "resolve_level",
]
