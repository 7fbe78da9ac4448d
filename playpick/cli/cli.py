#!/usr/bin/env python3
"""
playpick CLI - run a Playwright suite on one random target per category.

Usage:
    playpick                          # same as: playpick run
    playpick run --seed 42 --dry-run
    playpick run -- --headed --workers=2
    playpick targets
    playpick visual
"""

import playpick
from playpick.app import App
from playpick.cli.tools import RunTool, TargetsTool, VisualTool

_TOOLS = [RunTool, TargetsTool, VisualTool]

MAIN_TOOL = "run"


def _build_app() -> App:
    """Build the CLI application with all tools registered."""
    app = App(
        "playpick",
        description="Run a Playwright suite on one random target per category",
        version=playpick.__version__,
    )
    for tool_cls in _TOOLS:
        app.add_tool(tool_cls())
    return app.set_main_tool(MAIN_TOOL)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the playpick CLI."""
    return _build_app().main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
