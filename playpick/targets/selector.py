"""
Randomized selection of one target per category.

The functions here are pure: they take discovered targets, discovered test
files and a random generator, and return values. Reporting and process
execution live in the CLI and runner packages.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from playpick.exceptions import ConfigError, DiscoveryError, SelectionError

from .category import CATEGORY_ORDER, Category
from .reader import Target


@dataclass
class Buckets:
    """Target names grouped by category, each in source order."""

    members: dict[Category, list[str]] = field(
        default_factory=lambda: {c: [] for c in CATEGORY_ORDER}
    )
    uncategorized: list[str] = field(default_factory=list)

    def __getitem__(self, category: Category) -> list[str]:
        return self.members[category]

    def is_empty(self, category: Category) -> bool:
        return not self.members[category]


@dataclass(frozen=True)
class Pick:
    """One selected target and the category it was drawn from."""

    category: Category
    name: str


@dataclass(frozen=True)
class Selection:
    """Selected targets in category order, plus warnings for empty categories."""

    picks: tuple[Pick, ...]
    warnings: tuple[str, ...] = ()

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.picks]

    def get(self, category: Category) -> str | None:
        """Selected name for a category, or None if it was empty."""
        for pick in self.picks:
            if pick.category is category:
                return pick.name
        return None

    def __len__(self) -> int:
        return len(self.picks)


@dataclass(frozen=True)
class Plan:
    """Everything a run needs: the buckets, the selection and the test files."""

    buckets: Buckets
    selection: Selection
    test_files: tuple[str, ...]


def bucketize(targets: Iterable[Target]) -> Buckets:
    """Group targets by category; names matching no rule go to uncategorized."""
    buckets = Buckets()
    for target in targets:
        category = target.category
        if category is None:
            buckets.uncategorized.append(target.name)
        else:
            buckets[category].append(target.name)
    return buckets


def select(buckets: Buckets, rng: random.Random) -> Selection:
    """
    Draw one target uniformly at random from each non-empty category.

    Args:
        buckets: Categorized target names
        rng: Random source; seed it for reproducible selections

    Returns:
        Selection ordered Desktop, Mobile Safari, Mobile Chrome, Tablet

    Raises:
        SelectionError: If the Desktop category is empty
    """
    if buckets.is_empty(Category.DESKTOP):
        raise SelectionError("no desktop browser target found")

    picks = []
    warnings = []
    for category in CATEGORY_ORDER:
        names = buckets[category]
        if not names:
            warnings.append(f"no {category.label} targets found, skipping category")
            continue
        picks.append(Pick(category, names[rng.randrange(len(names))]))

    return Selection(tuple(picks), tuple(warnings))


def plan(
    targets: Sequence[Target], test_files: Sequence[str], rng: random.Random
) -> Plan:
    """
    Build a run plan from discovered targets and test files.

    Raises:
        ConfigError: If no targets were declared at all
        SelectionError: If no Desktop target was declared
        DiscoveryError: If there are no test files
    """
    if not targets:
        raise ConfigError("no targets found in configuration")
    if not test_files:
        raise DiscoveryError("no test files to run")

    buckets = bucketize(targets)
    return Plan(buckets, select(buckets, rng), tuple(test_files))
