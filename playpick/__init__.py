"""
playpick - randomized cross-section runs for Playwright test suites.
"""

from importlib.metadata import PackageNotFoundError, version

from .dot_dict import DotDict
from .exceptions import (
    ConfigError,
    DiscoveryError,
    PlaypickError,
    RunnerError,
    SelectionError,
)

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("playpick")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    "DotDict",
    "ConfigError",
    "DiscoveryError",
    "PlaypickError",
    "RunnerError",
    "SelectionError",
]
