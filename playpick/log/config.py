"""
Immutable logger configuration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError, InvalidLogLocationError


def resolve_level(level: str | int | bool) -> int | bool:
    """
    Turn a level name, number or flag into a logging level.

    "info", "DEBUG", "trace", "15" and 15 resolve to numbers; False and
    "false" resolve to False, meaning logging is off. True means info.

    Raises:
        InvalidLogLevelError: If the name is not a known level
    """
    if isinstance(level, bool):
        return logging.INFO if level else False
    if isinstance(level, int):
        return level
    text = str(level).strip().lower()
    if text.isnumeric():
        return int(text)
    if text in LogConstants.LEVEL_NAMES:
        return LogConstants.LEVEL_NAMES[text]
    raise InvalidLogLevelError(level)


@dataclass(frozen=True)
class LogConfig:
    """
    Settings for loggers created by LoggerFactory.

    Derived loggers write through their root's handler, so location, micros
    and colors are set once per root; only the level is per logger.
    """

    level: int | bool = logging.INFO  # False: logging off
    location: int = 0
    micros: bool = False
    colors: bool = True

    @classmethod
    def from_params(
        cls,
        level: str | int | bool,
        location: bool | int = 0,
        micros: bool = False,
        colors: bool = True,
    ) -> LogConfig:
        """
        Build a config from loosely typed values, e.g. command-line input.

        Args:
            level: Level name or number, or False to switch logging off
            location: Show source file:line in each line (True/False or 0/1)
            micros: Add microseconds to timestamps
            colors: Color lines by level

        Raises:
            InvalidLogLevelError: If level is an unknown name
            InvalidLogLocationError: If location is not a whole number
        """
        try:
            depth = int(location)
        except (TypeError, ValueError) as e:
            raise InvalidLogLocationError(location) from e

        return cls(
            level=resolve_level(level),
            location=depth,
            micros=bool(micros),
            colors=bool(colors),
        )

    @classmethod
    def from_config(cls, config_dict: dict[str, Any], section: str = "logging") -> LogConfig:
        """
        Build a config from the logging section of a settings mapping.

        Example:
            config = Config("etc/playpick.yaml")
            log_config = LogConfig.from_config(config.to_dict())
        """
        node: Any = config_dict
        for part in section.split("."):
            node = node.get(part) if isinstance(node, dict) else None
        if not isinstance(node, dict):
            node = {}

        return cls.from_params(
            level=node.get("level", "info"),
            location=node.get("location", 0),
            micros=node.get("micros", False),
            colors=node.get("colors", True),
        )
