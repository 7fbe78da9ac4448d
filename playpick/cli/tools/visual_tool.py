"""
Runs the visual-regression suite against every target.
"""

from __future__ import annotations

import argparse
from typing import Any

from playpick.app import ToolConfig
from playpick.exceptions import DiscoveryError
from playpick.runner import Invocation, delegate

from ..report import write_command
from .base import ProjectTool


class VisualTool(ProjectTool):
    """
    Run the suite that random runs leave out.

    Screenshot baselines exist per target, so the visual suite runs with no
    project filter at all.
    """

    def __init__(self, parent: Any = None):
        config = ToolConfig(
            name="visual",
            aliases=["v"],
            help_text="Run the visual-regression suite on all targets",
        )
        super().__init__(parent, config)

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        super().add_args(parser)
        parser.add_argument(
            "--tests-dir",
            default=None,
            help="directory holding the spec files (default: tests.dir setting)",
        )
        parser.add_argument(
            "-n",
            "--dry-run",
            action="store_true",
            help="print the command without running it",
        )

    def run(self, **kwargs: Any) -> int:
        suite = self.tests_dir / self.excluded_suite
        if not suite.is_file():
            raise DiscoveryError(f"visual suite not found: {suite}")

        invocation = Invocation(
            command=self.runner_command,
            files=(self.relative(suite),),
            extra_args=tuple(self.args.passthrough),
        )
        write_command(self.out, invocation)
        self.out.flush()

        if self.args.dry_run:
            return 0
        return delegate(invocation, cwd=self.root, lg=self.lg)
