"""
Shared base for tools that work on a Playwright project directory.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from playpick.app import Tool
from playpick.exceptions import ConfigError
from playpick.runner import DEFAULT_COMMAND
from playpick.targets import Target, discover_test_files, read_targets
from playpick.targets.discovery import DEFAULT_EXCLUDE, DEFAULT_SUFFIX

DEFAULT_TARGETS_CONFIG = "playwright.config.ts"
DEFAULT_TESTS_DIR = "tests"


class ProjectTool(Tool):
    """
    Tool operating on a project root.

    Resolves the runner configuration, the tests directory and the runner
    command from command-line arguments first, then the app configuration,
    then built-in defaults. Relative paths are taken from --root.
    """

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--root",
            default=".",
            help="project directory; relative paths are resolved against it",
        )
        parser.add_argument(
            "--config",
            dest="targets_config",
            default=None,
            help="runner configuration declaring the targets "
            "(default: targets.config setting)",
        )

    def _setting(self, path: str, default: Any) -> Any:
        config = self.app.config
        if config is None:
            return default
        value = config.get(path)
        return default if value is None else value

    @property
    def root(self) -> Path:
        return Path(self.args.root)

    def _resolve(self, value: str | Path) -> Path:
        path = Path(value).expanduser()
        return path if path.is_absolute() else self.root / path

    @property
    def targets_config(self) -> Path:
        name = getattr(self.args, "targets_config", None) or self._setting(
            "targets.config", DEFAULT_TARGETS_CONFIG
        )
        return self._resolve(name)

    @property
    def tests_dir(self) -> Path:
        name = getattr(self.args, "tests_dir", None) or self._setting(
            "tests.dir", DEFAULT_TESTS_DIR
        )
        return self._resolve(name)

    @property
    def runner_command(self) -> tuple[str, ...]:
        """
        Runner command from the runner.command setting.

        Raises:
            ConfigError: If the setting is not a non-empty list or string
        """
        command = self._setting("runner.command", list(DEFAULT_COMMAND))
        if isinstance(command, str):
            command = command.split()
        if not isinstance(command, list) or not command:
            raise ConfigError("runner.command must be a non-empty list", value=command)
        return tuple(str(part) for part in command)

    def load_targets(self) -> list[Target]:
        """Read the declared targets from the runner configuration."""
        path = self.targets_config
        targets = read_targets(path)
        self.lg.debug("read targets", extra={"path": path, "count": len(targets)})
        return targets

    def discover(self, exclude: str | None = None) -> list[str]:
        """Spec files under the tests directory, relative to --root."""
        files = discover_test_files(
            self.tests_dir,
            suffix=self._setting("tests.suffix", DEFAULT_SUFFIX),
            exclude=exclude,
            root=self.root,
        )
        self.lg.debug(
            "discovered test files", extra={"dir": self.tests_dir, "count": len(files)}
        )
        return files

    @property
    def excluded_suite(self) -> str:
        """File name of the visual-regression suite kept out of random runs."""
        return str(self._setting("tests.exclude", DEFAULT_EXCLUDE))

    def relative(self, path: Path) -> str:
        """POSIX path relative to --root when it lies below it."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()
