"""
Subcommands of the playpick CLI.
"""

from .run_tool import RunTool
from .targets_tool import TargetsTool
from .visual_tool import VisualTool

__all__ = ["RunTool", "TargetsTool", "VisualTool"]
