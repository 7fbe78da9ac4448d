"""
Invocation descriptor for the external test runner.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from dataclasses import dataclass

from playpick.targets import Plan

DEFAULT_COMMAND = ("npx", "playwright", "test")


@dataclass(frozen=True)
class Invocation:
    """
    "Run these spec files, restricted to these named targets."

    An empty projects tuple means no filter: the runner uses every target.
    """

    command: tuple[str, ...]
    projects: tuple[str, ...] = ()
    files: tuple[str, ...] = ()
    extra_args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        """Full argument vector passed to the runner process."""
        return [
            *self.command,
            *(f"--project={name}" for name in self.projects),
            *self.extra_args,
            *self.files,
        ]

    @property
    def command_line(self) -> str:
        """Shell-quoted command line, for display."""
        return shlex.join(self.argv)


def build_invocation(
    plan: Plan,
    command: Sequence[str] = DEFAULT_COMMAND,
    extra_args: Sequence[str] = (),
) -> Invocation:
    """Restrict the runner to the plan's selected targets and test files."""
    return Invocation(
        command=tuple(command),
        projects=tuple(plan.selection.names),
        files=plan.test_files,
        extra_args=tuple(extra_args),
    )
