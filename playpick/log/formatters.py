"""
Log formatters with colored output and structured extra fields.

A record renders as:

    [12:34:56,789] [I] message             [key:value] [1234] [/targets]
"""

import logging
import os
import re
from typing import Any

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants

# Pattern to match ANSI escape sequences
_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

EXTRA_ATTR = "__playpick__extra"


def _visual_len(text: str) -> int:
    """Calculate visual width of text, excluding ANSI escape codes."""
    if "\x1b" not in text:
        return len(text)
    return len(_ANSI_PATTERN.sub("", text))


def _escape(value: Any) -> str:
    # Extra values are spliced into the format string
    return str(value).replace("%", "%%")


def _render_value(value: Any) -> str:
    if isinstance(value, BaseException):
        return f"{value.__class__.__name__}: {value}"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


class PreFormatter(logging.Formatter):
    """Standard formatter with optional microsecond precision on timestamps."""

    def __init__(self, fmt: str, micros: bool) -> None:
        self._micros = micros
        super().__init__(fmt)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        s = super().formatTime(record, "%H:%M:%S")
        s += f",{int(record.msecs):03d}"
        if self._micros:
            micros = int((record.created % 1) * 1000000) % 1000
            s += f".{micros:03d}"
        return s


class FieldFormatter:
    """Handles individual field formatting with colors and brackets."""

    def __init__(self, config: LogConfig):
        self._config = config

    def format_field(self, value: Any, col: str = "", bold: str = "", name: str = "") -> str:
        """
        Format a single field as ``name[value]`` or ``[name:value]``.

        Args:
            value: The value to format
            col: Color escape sequence (empty when colors are off)
            bold: Bold color escape sequence
            name: Field name (empty for anonymous fields)
        """
        text = _escape(_render_value(value))
        if not self._config.colors:
            return f"[{name}:{text}]" if name else f"[{text}]"

        head = ColorManager.RESET + col + (name + "[" if name else "[")
        return head + bold + text + ColorManager.RESET + col + "]"

    def format_fields(self, fields: dict[str, Any], col: str = "", bold: str = "") -> str:
        """Format a mapping of extra fields, sorted by key."""
        return " ".join(
            self.format_field(fields[k], col, bold, k) for k in sorted(fields)
        )


class LogFormatter(logging.Formatter):
    """
    Log formatter with colored output and structured field formatting.

    Provides console output with:
    - ANSI color codes for different log levels
    - Structured extra fields in brackets
    - Optional file location display
    - Process and logger name information
    """

    def __init__(self, config: LogConfig):
        super().__init__()
        self._config = config
        self._field_formatter = FieldFormatter(config)
        self._pre_formatter = PreFormatter(LogConstants.DEFAULT_FORMAT, config.micros)

    @property
    def config(self) -> LogConfig:
        return self._config

    def format(self, record: logging.LogRecord) -> str:
        fmt = self._build_format(record)
        self._pre_formatter._fmt = fmt
        self._pre_formatter._style._fmt = fmt
        return self._pre_formatter.format(record)

    def _calculate_width(self, record: logging.LogRecord) -> int:
        # "[" + timestamp + "] [" + level + "] " + message
        timestamp_len = 16 if self._config.micros else 12
        return 1 + timestamp_len + 4 + 1 + 2 + _visual_len(record.getMessage())

    def _padding(self, record: logging.LogRecord) -> str:
        rule = (
            LogConstants.MICRO_RULE_WIDTH
            if self._config.micros
            else LogConstants.DEFAULT_RULE_WIDTH
        )
        return " " * max(1, rule - self._calculate_width(record))

    def _build_format(self, record: logging.LogRecord) -> str:
        extra = getattr(record, EXTRA_ATTR, None) or {}
        if not self._config.colors:
            return self._build_plain(record, extra)
        return self._build_colored(record, extra)

    def _build_plain(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        fmt = LogConstants.DEFAULT_FORMAT + self._padding(record)
        if extra:
            fmt += self._field_formatter.format_fields(extra) + " "
        fmt += "[%(process)d] [%(name)s]"
        fmt += self._render_location(record)
        return fmt

    def _build_colored(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        col = ColorManager.get_color_for_level(record.levelno) or ColorManager.DEFAULT
        bold = ColorManager.create_bold_color(col)
        col += "m"

        fmt = col + "[%(asctime)s] "
        fmt += "[" + bold + "%(levelname).1s" + ColorManager.RESET + col + "] "
        fmt += bold + "%(message)s" + ColorManager.RESET + col
        fmt += self._padding(record)
        if extra:
            fmt += self._field_formatter.format_fields(extra, col, bold) + " "

        gray = ColorManager.create_gray_level(9)
        fmt += ColorManager.RESET + gray + "m[%(process)d] [%(name)s]"
        fmt += self._render_location(record)
        return fmt + ColorManager.RESET

    def _render_location(self, record: logging.LogRecord) -> str:
        if not self._config.location:
            return ""
        path = "./" + os.path.relpath(record.pathname, os.getcwd())
        return f" [{_escape(path)}:{record.lineno}]"
