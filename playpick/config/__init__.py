"""
Configuration management package.

Provides the Config class for loading playpick.yaml and the helpers that
locate the etc directory it lives in.
"""

from .config import (
    Config,
    get_package_etc_dir,
    load_config,
    resolve_etc_dir,
)
from .constants import DEFAULT_CONFIG_FILENAME, ENV_PREFIX, MAX_CONFIG_SIZE_BYTES

__all__ = [
    "Config",
    "get_package_etc_dir",
    "load_config",
    "resolve_etc_dir",
    "DEFAULT_CONFIG_FILENAME",
    "ENV_PREFIX",
    "MAX_CONFIG_SIZE_BYTES",
]
