"""
Human-readable run report.

Line-oriented text written through an OutputWriter before the runner
starts: discovered categories, the random selection, the test files and
the assembled command line.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..runner import Invocation
from ..targets import CATEGORY_ORDER, Buckets, Plan, Selection
from .output import OutputWriter

INDENT = "   "


def write_categories(out: OutputWriter, buckets: Buckets) -> None:
    """Discovered categories with their members, or None when empty."""
    out.write("Discovered targets:")
    for category in CATEGORY_ORDER:
        members = buckets[category]
        out.write(f"{INDENT}{category.label}: {', '.join(members) if members else 'None'}")
    if buckets.uncategorized:
        out.write(f"{INDENT}Uncategorized: {', '.join(buckets.uncategorized)}")
    out.write()


def write_selection(out: OutputWriter, selection: Selection) -> None:
    out.write("Randomly selected targets:")
    for pick in selection.picks:
        out.write(f"{INDENT}{pick.category.label}: {pick.name}")
    out.write()


def write_test_files(out: OutputWriter, files: Sequence[str]) -> None:
    out.write(f"Test files ({len(files)}):")
    for path in files:
        out.write(f"{INDENT}{path}")
    out.write()


def write_command(out: OutputWriter, invocation: Invocation) -> None:
    out.write(f"Running: {invocation.command_line}")
    out.write()


def write_plan(out: OutputWriter, plan: Plan, invocation: Invocation) -> None:
    """Full report for a random run, in the order the run was built."""
    write_categories(out, plan.buckets)
    write_selection(out, plan.selection)
    write_test_files(out, plan.test_files)
    write_command(out, invocation)
    out.flush()
