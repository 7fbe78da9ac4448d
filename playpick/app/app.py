"""
Core app class for CLI tools.

The App owns the argument parser, the loaded configuration and the root
logger. Tools are registered as subcommands; a main tool runs when no
subcommand is given on the command line.
"""

import argparse
import os
import sys
import time
from typing import Any, TextIO

from ..cli.output import ConsoleOutput, OutputWriter
from ..config import load_config
from ..dot_dict import DotDict
from ..exceptions import PlaypickError
from ..log import LogConfig, LogError, Logger, LoggerFactory
from .args import DefaultsHelpFormatter
from .errors import DupToolError, UnknownToolError
from .tool import Tool

TOOL_DEST = "tool"

# Standard options that take a value, for main-tool detection
_VALUE_OPTIONS = frozenset({"--etc-dir", "-l", "--log-level", "--log-location"})
_ROOT_ONLY = frozenset({"-h", "--help", "--version"})


def _should_use_color(stream: Any) -> bool:
    """Color only on a terminal, honoring NO_COLOR and FORCE_COLOR."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class App:
    """
    Command-line application made of tools.

    Provides:
    - Tool registration with aliases and an optional main tool
    - Standard arguments (--etc-dir, --log-level, --log-location, --quiet)
    - Configuration loading from etc/playpick.yaml
    - Root logger creation from the logging section
    - Conversion of PlaypickError into an error message and exit code 1
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        version: str | None = None,
        config: DotDict | None = None,
        out: OutputWriter | None = None,
        err: TextIO | None = None,
    ):
        """
        Initialize the app.

        Args:
            name: Program name shown in usage
            description: Program description shown in help
            version: Version string for --version
            config: Preloaded configuration (default: loaded in setup())
            out: Writer for tool reports (default: stdout)
            err: Stream for error messages (default: stderr)
        """
        self.name = name
        self.description = description
        self.version = version
        self.config: DotDict | None = config
        self.out: OutputWriter = out if out is not None else ConsoleOutput()
        self._err = err if err is not None else sys.stderr
        self._tools: dict[str, Tool] = {}
        self._aliases: dict[str, str] = {}
        self._main_tool: str | None = None
        self.parser: argparse.ArgumentParser | None = None
        self._parsed_args: argparse.Namespace | None = None
        self._logger: Logger | None = None
        self._start_time: float | None = None

    @property
    def args(self) -> argparse.Namespace | None:
        return self._parsed_args

    @property
    def lg(self) -> Logger:
        if self._logger is None:
            raise RuntimeError("App.setup() has not been called")
        return self._logger

    @property
    def tools(self) -> list[Tool]:
        return list(self._tools.values())

    def add_tool(self, tool: Tool) -> "App":
        """
        Register a tool as a subcommand.

        Raises:
            DupToolError: If the name or an alias is already taken
        """
        names = [tool.name, *tool.config.aliases]
        for name in names:
            if name in self._tools or name in self._aliases:
                raise DupToolError(name)

        tool.parent = self
        self._tools[tool.name] = tool
        for alias in tool.config.aliases:
            self._aliases[alias] = tool.name
        return self

    def set_main_tool(self, name: str) -> "App":
        """Run this tool when no subcommand is given."""
        if name not in self._tools:
            raise UnknownToolError(name)
        self._main_tool = name
        return self

    def get_tool(self, name: str) -> Tool | None:
        """Look up a tool by name or alias."""
        return self._tools.get(self._aliases.get(name, name))

    def _add_standard_args(
        self, parser: argparse.ArgumentParser, suppress: bool = False
    ) -> None:
        # Subcommand copies use SUPPRESS so they never clobber root values
        def default(value: Any) -> Any:
            return argparse.SUPPRESS if suppress else value

        group = parser.add_argument_group("standard options")
        group.add_argument(
            "--etc-dir",
            default=default(None),
            help="directory holding playpick.yaml",
        )
        group.add_argument(
            "-l",
            "--log-level",
            default=default(None),
            help="log level: trace, debug, info, warning, error, critical",
        )
        group.add_argument(
            "--log-location",
            type=int,
            default=default(None),
            help="show source locations in log lines (0 disables)",
        )
        group.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            default=default(False),
            help="disable logging",
        )

    def create_args(self) -> argparse.ArgumentParser:
        """Create the parser with standard options and one subparser per tool."""
        parser = argparse.ArgumentParser(
            prog=self.name,
            description=self.description,
            formatter_class=DefaultsHelpFormatter,
        )
        if self.version:
            parser.add_argument(
                "--version", action="version", version=f"{self.name} {self.version}"
            )
        self._add_standard_args(parser)

        if self._tools:
            subparsers = parser.add_subparsers(dest=TOOL_DEST, metavar="COMMAND")
            for tool in self.tools:
                cmd_args, cmd_kwargs = tool.cmd
                sub = subparsers.add_parser(
                    *cmd_args, formatter_class=DefaultsHelpFormatter, **cmd_kwargs
                )
                self._add_standard_args(sub, suppress=True)
                tool.add_args(sub)

        self.parser = parser
        return parser

    def _inject_main_tool(self, argv: list[str]) -> list[str]:
        """Insert the main tool name when argv selects no subcommand."""
        if self._main_tool is None:
            return argv

        i = 0
        while i < len(argv):
            token = argv[i]
            if token in _VALUE_OPTIONS:
                i += 2
                continue
            if token in ("-q", "--quiet") or token.split("=")[0] in _VALUE_OPTIONS:
                i += 1
                continue
            if token in _ROOT_ONLY or self.get_tool(token) is not None:
                return argv
            break

        return argv[:i] + [self._main_tool] + argv[i:]

    def parse_args(self, argv: list[str] | None = None) -> argparse.Namespace:
        """
        Parse arguments, defaulting to sys.argv[1:].

        Everything after the first "--" is kept verbatim in
        args.passthrough for tools that forward it to another program.
        """
        parser = self.parser or self.create_args()
        argv = list(sys.argv[1:] if argv is None else argv)

        passthrough: list[str] = []
        if "--" in argv:
            idx = argv.index("--")
            argv, passthrough = argv[:idx], argv[idx + 1 :]

        self._parsed_args = parser.parse_args(self._inject_main_tool(argv))
        self._parsed_args.passthrough = passthrough
        return self._parsed_args

    def _apply_args_to_config(self, config: DotDict) -> None:
        """Command-line logging options override the logging section."""
        args = self._parsed_args
        if not config.has("logging") or not isinstance(config.logging, DotDict):
            config["logging"] = {}
        logging_cfg = config.logging

        if getattr(args, "log_level", None) is not None:
            logging_cfg["level"] = args.log_level
        if getattr(args, "log_location", None) is not None:
            logging_cfg["location"] = args.log_location
        if getattr(args, "quiet", False):
            logging_cfg["level"] = False

    def setup_logging(self, config: DotDict) -> Logger:
        """Create the root logger from the logging section of config."""
        log_config = LogConfig.from_config(config.to_dict(), "logging")
        if log_config.colors and not _should_use_color(sys.stdout):
            log_config = LogConfig(
                level=log_config.level,
                location=log_config.location,
                micros=log_config.micros,
                colors=False,
            )
        return LoggerFactory.create_root(log_config)

    def setup(self, argv: list[str] | None = None) -> None:
        """
        Parse arguments, load configuration and create the root logger.

        Raises:
            PlaypickError: If the configuration cannot be loaded
            LogError: If the logging settings are invalid
        """
        self._start_time = time.monotonic()
        args = self.parse_args(argv)

        if self.config is None:
            self.config = load_config(getattr(args, "etc_dir", None))
        self._apply_args_to_config(self.config)

        self._logger = self.setup_logging(self.config)
        self._logger.debug(
            "*** start ***",
            extra={"prog_args": " ".join(sys.argv), "cwd": os.getcwd()},
        )

    def fail(self, e: Exception) -> int:
        """Report a fatal error on the error stream and return exit code 1."""
        print(f"error: {e}", file=self._err)
        if self._logger is not None:
            self._logger.debug("fatal error", extra={"exception": e})
        return 1

    def run(self) -> int:
        """Run the selected tool and return its exit code."""
        if self._parsed_args is None:
            raise RuntimeError("App.setup() has not been called")

        tool_name = getattr(self._parsed_args, TOOL_DEST, None)
        tool = self.get_tool(tool_name) if tool_name else None
        if tool is None:
            if self.parser is None:
                raise RuntimeError("App.parse_args() has not been called")
            self.parser.print_help(self._err)
            return 1

        tool.setup(self.lg)
        self.lg.trace("running tool", extra={"tool": tool.name})
        try:
            return_code = tool.run()
        except PlaypickError as e:
            return_code = self.fail(e)

        if self._start_time is not None:
            self.lg.debug(
                "done",
                extra={
                    "code": return_code,
                    "secs": round(time.monotonic() - self._start_time, 3),
                },
            )
        return return_code

    def main(self, argv: list[str] | None = None) -> int:
        """
        Main application entry point.

        Returns:
            int: Exit code (0 for success, non-zero for error)
        """
        try:
            self.setup(argv)
        except (PlaypickError, LogError) as e:
            return self.fail(e)

        try:
            return self.run()
        except KeyboardInterrupt:
            self.lg.info("... interrupted by user")
            return 130
        except Exception as e:
            self.lg.error("app exception", extra={"exception": e})
            raise
