"""
Target selection: read declared targets, categorize them, draw one per
category and discover the spec files to run.
"""

from .category import CATEGORY_ORDER, DESKTOP_BROWSERS, Category, categorize
from .discovery import discover_test_files
from .reader import (
    PatternTargetReader,
    Target,
    TargetReader,
    YamlTargetReader,
    read_targets,
    reader_for,
)
from .selector import Buckets, Pick, Plan, Selection, bucketize, plan, select

__all__ = [
    "CATEGORY_ORDER",
    "DESKTOP_BROWSERS",
    "Buckets",
    "Category",
    "PatternTargetReader",
    "Pick",
    "Plan",
    "Selection",
    "Target",
    "TargetReader",
    "YamlTargetReader",
    "bucketize",
    "categorize",
    "discover_test_files",
    "plan",
    "read_targets",
    "reader_for",
    "select",
]
