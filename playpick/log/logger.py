"""
Logger class with structured extra fields and a TRACE level.
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants
from .formatters import EXTRA_ATTR

TRACE = LogConstants.CUSTOM_LEVELS["TRACE"]


class Logger(logging.Logger):
    """
    Logger that keeps extra fields for LogFormatter.

    - extra={...} passed to a log call, merged over the fields given at
      construction, is rendered as [key:value] after the message
    - level False from LogConfig switches the logger off entirely
    - a "view" logger (see LoggerFactory.derive) owns no handlers and
      emits through its root logger's handlers under its own name
    """

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        extra: dict[str, Any] | None = None,
    ):
        config = config or LogConfig.from_params("info")
        off = config.level is False
        super().__init__(name, logging.CRITICAL + 1 if off else config.level)
        # Standard attribute; isEnabledFor() returns False while it is set
        self.disabled = off

        self._config = config
        self._extra = dict(extra or {})
        self._root_logger: Logger | None = None

    @property
    def config(self) -> LogConfig:
        return self._config

    def get_level(self) -> int | bool:
        """Configured level, False when logging is off."""
        return self._config.level

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: Any,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        fields = {**self._extra, **(extra or {})}
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func, fields, sinfo
        )
        setattr(record, EXTRA_ATTR, fields)
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log at TRACE level, below DEBUG."""
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    def callHandlers(self, record: logging.LogRecord) -> None:
        if self._root_logger is None:
            super().callHandlers(record)
            return
        for handler in self._root_logger.handlers:
            if record.levelno >= handler.level:
                handler.handle(record)
