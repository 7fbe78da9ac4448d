"""
Random cross-section run: one target per category, every regular spec file.
"""

from __future__ import annotations

import argparse
import random
from typing import Any

from playpick.app import ToolConfig
from playpick.runner import build_invocation, delegate
from playpick.targets import plan

from ..report import write_plan
from .base import ProjectTool


class RunTool(ProjectTool):
    """
    Select one random target per category and hand the run to Playwright.

    Prints the discovered categories, the selection, the test files and the
    command line, then runs the command and returns its exit status.
    """

    def __init__(self, parent: Any = None):
        config = ToolConfig(
            name="run",
            aliases=["r"],
            help_text="Run the test suite on a random target per category",
            description=(
                "Read the targets declared in the runner configuration, pick "
                "one at random from each category (Desktop, Mobile Safari, "
                "Mobile Chrome, Tablet) and run every spec file except the "
                "visual-regression suite against them. Arguments after -- "
                "are passed to the runner."
            ),
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
            "--seed",
            type=int,
            default=None,
            help="seed the random selection for a reproducible run",
        )
        parser.add_argument(
            "-n",
            "--dry-run",
            action="store_true",
            help="print the report and command without running it",
        )

    def run(self, **kwargs: Any) -> int:
        rng = random.Random(self.args.seed)
        targets = self.load_targets()
        files = self.discover(exclude=self.excluded_suite)

        run_plan = plan(targets, files, rng)
        for warning in run_plan.selection.warnings:
            self.lg.warning(warning)
        self.lg.info(
            "selected targets",
            extra={"targets": run_plan.selection.names, "seed": self.args.seed},
        )

        invocation = build_invocation(
            run_plan, self.runner_command, extra_args=self.args.passthrough
        )
        write_plan(self.out, run_plan, invocation)

        if self.args.dry_run:
            self.lg.info("dry run, runner not started")
            return 0

        status = delegate(invocation, cwd=self.root, lg=self.lg)
        if status != 0:
            self.lg.error("runner failed", extra={"status": status})
        return status
