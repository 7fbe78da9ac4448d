"""
Lists the targets declared in the runner configuration.
"""

from __future__ import annotations

import argparse
from io import StringIO
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from playpick.app import ToolConfig
from playpick.targets import CATEGORY_ORDER, Target, bucketize

from .base import ProjectTool

TABLE_WIDTH = 100


class TargetsTool(ProjectTool):
    """Show each declared target with its category, uncategorized ones included."""

    def __init__(self, parent: Any = None):
        config = ToolConfig(
            name="targets",
            aliases=["t", "ls"],
            help_text="List declared targets and their categories",
        )
        super().__init__(parent, config)

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        super().add_args(parser)
        parser.add_argument(
            "--color",
            action="store_true",
            help="render the table with terminal colors",
        )

    def run(self, **kwargs: Any) -> int:
        targets = self.load_targets()
        self.out.write_raw(self.render(targets, color=self.args.color))
        self.out.flush()
        return 0

    def render(self, targets: list[Target], color: bool = False) -> str:
        """Render targets as a table, followed by a per-category summary line."""
        table = Table(title=f"Targets in {self.targets_config.name}")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Name", style="bold")
        table.add_column("Category")

        for i, target in enumerate(targets, 1):
            category = target.category
            if category is None:
                table.add_row(str(i), Text(target.name), Text("-", style="dim"))
            else:
                table.add_row(str(i), Text(target.name), category.label)

        console = Console(
            file=StringIO(), width=TABLE_WIDTH, force_terminal=color, no_color=not color
        )
        console.print(table)

        buckets = bucketize(targets)
        counts = ", ".join(f"{c.label}: {len(buckets[c])}" for c in CATEGORY_ORDER)
        console.print(f"{counts}, Uncategorized: {len(buckets.uncategorized)}")

        output: str = console.file.getvalue()  # type: ignore[attr-defined]
        return output
