"""
Constants for the logging system: format strings, widths and level names.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"

    # Messages are padded to this width before extra fields are appended
    DEFAULT_RULE_WIDTH: int = 70
    MICRO_RULE_WIDTH: int = 74

    CUSTOM_LEVELS: dict[str, int] = {"TRACE": 5}

    LEVEL_NAMES: dict[str, int | bool] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "trace": 5,
        "false": False,  # disables all logging
    }

    RESET: str = "\x1b[0m"

    # Gray level range for metadata fields
    GRAY_BASE: int = 232
    GRAY_MAX_LEVELS: int = 24
