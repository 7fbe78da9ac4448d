"""
Configuration loading for playpick.

playpick.yaml is read with PyYAML, PLAYPICK_* environment variables are
layered on top, and ${dotted.key} references inside strings are replaced
with the value they name. The result is a Config, which is a DotDict.
"""

import os
import re
from collections.abc import Mapping
from importlib.resources import files
from pathlib import Path
from typing import Any

import yaml

from playpick.dot_dict import DotDict, DotDictPathNotFoundError
from playpick.exceptions import ConfigError

from .constants import DEFAULT_CONFIG_FILENAME, ENV_PREFIX, MAX_CONFIG_SIZE_BYTES

# Only plain config keys can be referenced
_VAR_PATTERN = re.compile(r"\$\{([a-zA-Z0-9_.]+)\}")


def coerce_env_value(raw: str) -> Any:
    """
    Give an environment string the YAML-ish type it spells.

    "" / null / none -> None, true / false -> bool, "a,b" -> list,
    numbers -> int or float, anything else stays a string.
    """
    lowered = raw.lower()
    if lowered in ("", "null", "none"):
        return None
    if lowered in ("true", "false"):
        return lowered == "true"
    if "," in raw:
        return [coerce_env_value(part.strip()) for part in raw.split(",")]
    number = float if "." in raw else int
    try:
        return number(raw)
    except ValueError:
        return raw


def env_overrides(prefix: str, environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """
    Collect overrides from the environment as dotted paths.

    PLAYPICK_LOGGING_LEVEL=debug becomes {"logging.level": "debug"}.
    """
    environ = os.environ if environ is None else environ
    return {
        ".".join(key[len(prefix) :].lower().split("_")): coerce_env_value(value)
        for key, value in environ.items()
        if key.startswith(prefix) and len(key) > len(prefix)
    }


def _apply_path(data: dict[str, Any], path: str, value: Any) -> None:
    *parents, leaf = path.split(".")
    node = data
    for part in parents:
        child = node.get(part)
        if not isinstance(child, dict):
            child = node[part] = {}
        node = child
    node[leaf] = value


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}", path=str(path))

    size = path.stat().st_size
    if size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            f"Configuration file '{path}' is {size} bytes, "
            f"exceeding maximum size of {MAX_CONFIG_SIZE_BYTES} bytes",
            path=str(path),
        )

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML in configuration file: {e}", path=str(path)
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            "Configuration file must contain a mapping at the top level",
            path=str(path),
        )
    return data


class Config(DotDict):
    """
    Settings loaded from a YAML file.

    Environment variables named PLAYPICK_<SECTION>_<KEY> override file
    values before ${...} references are resolved:

        PLAYPICK_LOGGING_LEVEL=debug
        PLAYPICK_TESTS_DIR=e2e
        PLAYPICK_RUNNER_COMMAND=npx,playwright,test

    Example:
        config = Config("etc/playpick.yaml")
        config.tests.dir
        config.get("runner.command")
    """

    def __init__(
        self,
        fname: str,
        enable_env_overrides: bool = True,
        env_prefix: str = ENV_PREFIX,
    ):
        """
        Load and resolve a configuration file.

        Args:
            fname: Path to the YAML file
            enable_env_overrides: Apply PLAYPICK_* environment variables
            env_prefix: Prefix of the override variables

        Raises:
            ConfigError: If the file is missing, too large, not valid YAML,
                not a mapping, or references an undefined ${variable}
        """
        super().__init__()
        self._env_prefix = env_prefix if enable_env_overrides else None
        self._config_path = Path(fname).resolve()

        data = _read_yaml(self._config_path)
        for path, value in self.get_env_overrides().items():
            _apply_path(data, path, value)
        self.set(**data)

        try:
            self.set(**self._substitute(self.to_dict()))
        except DotDictPathNotFoundError as e:
            raise ConfigError(
                f"Undefined variable ${{{e.path}}}", path=str(self._config_path)
            ) from e

    @property
    def path(self) -> Path:
        """Resolved path of the loaded file."""
        return self._config_path

    def get_env_overrides(self) -> dict[str, Any]:
        """Overrides taken from the environment, keyed by dotted path."""
        if self._env_prefix is None:
            return {}
        return env_overrides(self._env_prefix)

    def _substitute(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: self._substitute(v) for k, v in value.items()}
        if isinstance(value, list):
            return [self._substitute(v) for v in value]
        if isinstance(value, str):
            return _VAR_PATTERN.sub(self._lookup_var, value)
        return value

    def _lookup_var(self, match: re.Match) -> str:
        name = match.group(1)
        if not self.has(name):
            raise DotDictPathNotFoundError(self, name)
        return str(self.get(name))


def get_package_etc_dir() -> Path:
    """Path to the etc directory shipped inside the playpick package."""
    return Path(str(files("playpick") / "etc"))


def resolve_etc_dir(custom_path: str | None = None) -> Path:
    """
    Find the directory holding playpick.yaml.

    Resolution order:
    1. custom_path (from --etc-dir)
    2. ./etc/ in the current directory, if it holds playpick.yaml
    3. the etc/ directory shipped with the package

    Raises:
        ConfigError: If custom_path is given but is not a directory
    """
    if custom_path:
        path = Path(custom_path).expanduser().resolve()
        if not path.is_dir():
            raise ConfigError(f"etc directory not found: {custom_path}")
        return path

    cwd_etc = Path.cwd() / "etc"
    if (cwd_etc / DEFAULT_CONFIG_FILENAME).is_file():
        return cwd_etc

    return get_package_etc_dir()


def load_config(
    etc_dir: str | None = None, enable_env_overrides: bool = True
) -> Config:
    """
    Load playpick.yaml from the resolved etc directory.

    Args:
        etc_dir: Custom etc directory (from --etc-dir)
        enable_env_overrides: Whether to apply PLAYPICK_* overrides
    """
    path = resolve_etc_dir(etc_dir) / DEFAULT_CONFIG_FILENAME
    return Config(str(path), enable_env_overrides=enable_env_overrides)
