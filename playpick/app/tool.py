"""
Base tool class for command-line subcommands.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..log import Logger, LoggerFactory
from .errors import MissingLoggerError, MissingParentError, UndefNameError

if TYPE_CHECKING:
    from ..cli.output import OutputWriter
    from .app import App


@dataclass
class ToolConfig:
    """Configuration for a tool."""

    name: str
    aliases: list[str] = field(default_factory=list)
    help_text: str = ""
    description: str = ""


class Tool:
    """
    Base class for a subcommand.

    Subclasses provide a ToolConfig, add their arguments in add_args() and
    implement run(). The owning App parses arguments, sets the tool up with
    a derived logger and calls run().
    """

    def __init__(self, parent: App | None = None, config: ToolConfig | None = None):
        """
        Initialize the tool.

        Args:
            parent: Owning application (set on registration if omitted)
            config: Tool configuration
        """
        self.parent = parent
        self.config = config or self._create_config()
        self._logger: Logger | None = None
        self._parsed_args: argparse.Namespace | None = None

    def _create_config(self) -> ToolConfig:
        """Create default configuration. Override in subclasses."""
        raise UndefNameError(cls=self.__class__)

    @property
    def name(self) -> str:
        if self.config and self.config.name:
            return self.config.name
        raise UndefNameError(self.__class__)

    @property
    def cmd(self) -> tuple[list[str], dict[str, Any]]:
        """Command name and keyword arguments for add_parser()."""
        return [self.name], {
            "aliases": self.config.aliases,
            "help": self.config.help_text,
            "description": self.config.description or self.config.help_text,
        }

    @property
    def lg(self) -> Logger:
        """
        Logger for this tool.

        Raises:
            MissingLoggerError: If accessed before setup() is called
        """
        if self._logger is None:
            raise MissingLoggerError(self.name)
        return self._logger

    @property
    def args(self) -> argparse.Namespace:
        """
        Parsed command-line arguments.

        Raises:
            MissingParentError: If the tool has neither its own args nor a parent
        """
        if self._parsed_args is not None:
            return self._parsed_args
        if self.parent is None or self.parent.args is None:
            raise MissingParentError(self.name, "args")
        return self.parent.args

    @property
    def app(self) -> App:
        if self.parent is None:
            raise MissingParentError(self.name, "app")
        return self.parent

    @property
    def out(self) -> OutputWriter:
        """Output writer of the owning app."""
        return self.app.out

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        """Add tool-specific arguments. Override in subclasses."""
        pass

    def setup(self, lg: Logger, args: argparse.Namespace | None = None) -> None:
        """
        Prepare the tool for running.

        Args:
            lg: Parent logger; the tool logs through a derived logger
            args: Parsed arguments (default: the parent's)
        """
        self._logger = LoggerFactory.derive(lg, self.name)
        if args is not None:
            self._parsed_args = args

    def run(self, **kwargs: Any) -> int:
        """Run the tool and return an exit code. Override in subclasses."""
        raise NotImplementedError(f"Tool '{self.name}' does not implement run()")
