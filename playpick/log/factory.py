"""
Factory for creating and configuring loggers.

A CLI run has one root logger named "/" with a console handler. Tools and
modules log through views of it named like "/run" or "/run/runner".
"""

import logging
import sys
from typing import Any, TextIO

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


def _register(lg: Logger) -> Logger:
    # Visible to logging.getLogger(name) and cleaned up with the registry
    logging.root.manager.loggerDict[lg.name] = lg
    return lg


class LoggerFactory:
    """Creates root loggers and derives views from them."""

    @staticmethod
    def create_root(config: LogConfig, stream: TextIO | None = None) -> Logger:
        """
        Create the "/" logger.

        Example:
            >>> lg = LoggerFactory.create_root(LogConfig.from_params("info", colors=False))
            >>> lg.info("selected targets", extra={"seed": 3})
            [12:34:56,789] [I] selected targets       [seed:3] [1234] [/]
        """
        return LoggerFactory.create("/", config, stream=stream)

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        stream: TextIO | None = None,
        extra: dict[str, Any] | None = None,
    ) -> Logger:
        """
        Create a logger owning a console handler.

        A logger registered earlier under the same name is replaced.

        Args:
            name: Logger name
            config: Level and formatting settings
            stream: Handler stream (default: sys.stdout at call time)
            extra: Fields added to every record of this logger
        """
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(LogFormatter(config))

        lg = Logger(name, config, extra)
        lg.addHandler(handler)
        lg.parent = logging.root
        lg.propagate = False
        return _register(lg)

    @staticmethod
    def derive(parent: Logger, tags: str | list[str]) -> Logger:
        """
        Return a view of parent's root named after tags.

        Examples:
            >>> LoggerFactory.derive(root, "targets").name
            '/targets'
            >>> LoggerFactory.derive(root, ["cli", "run"]).name
            '/cli/run'

        Deriving the same name from the same root twice returns the same view.
        """
        parts = [tags] if isinstance(tags, str) else list(tags)
        name = parent.name.rstrip("/") + "/" + "/".join(parts)
        root = parent._root_logger or parent

        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger) and existing._root_logger is root:
            return existing

        lg = parent.__class__(name, parent.config)
        lg._root_logger = root
        lg.parent = parent
        lg.propagate = False
        return _register(lg)
