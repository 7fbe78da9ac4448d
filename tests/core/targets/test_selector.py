"""
Tests for bucketing, random selection and run planning.
"""

import random

import pytest

from playpick.exceptions import ConfigError, DiscoveryError, SelectionError
from playpick.targets import (
    Buckets,
    Category,
    Pick,
    Selection,
    Target,
    bucketize,
    plan,
    select,
)


def targets(*names):
    return [Target(n) for n in names]


ALL_CATEGORIES = targets(
    "chromium",
    "firefox",
    "Mobile Safari - iPhone 12",
    "Mobile Chrome - Pixel 5",
    "Tablet - iPad",
    "Tablet - iPad Pro",
)


@pytest.mark.unit
class TestBucketize:
    def test_groups_in_source_order(self):
        buckets = bucketize(
            targets("webkit", "Tablet - iPad", "chromium", "Tablet - iPad Pro")
        )

        assert buckets[Category.DESKTOP] == ["webkit", "chromium"]
        assert buckets[Category.TABLET] == ["Tablet - iPad", "Tablet - iPad Pro"]
        assert buckets.is_empty(Category.MOBILE_SAFARI)

    def test_uncategorized_kept_separately(self):
        buckets = bucketize(targets("chromium", "setup", "teardown"))

        assert buckets.uncategorized == ["setup", "teardown"]
        assert buckets[Category.DESKTOP] == ["chromium"]

    def test_duplicates_kept(self):
        buckets = bucketize(targets("firefox", "firefox"))
        assert buckets[Category.DESKTOP] == ["firefox", "firefox"]

    def test_hint_used(self):
        buckets = bucketize([Target("Pixel Tablet", Category.TABLET)])
        assert buckets[Category.TABLET] == ["Pixel Tablet"]


@pytest.mark.unit
class TestSelect:
    def test_one_pick_per_category_in_order(self):
        selection = select(bucketize(ALL_CATEGORIES), random.Random(7))

        assert [p.category for p in selection.picks] == [
            Category.DESKTOP,
            Category.MOBILE_SAFARI,
            Category.MOBILE_CHROME,
            Category.TABLET,
        ]
        assert selection.warnings == ()
        assert len(selection) == 4

    def test_picks_come_from_their_bucket(self):
        buckets = bucketize(ALL_CATEGORIES)
        selection = select(buckets, random.Random(3))

        for pick in selection.picks:
            assert pick.name in buckets[pick.category]

    def test_same_seed_same_selection(self):
        buckets = bucketize(ALL_CATEGORIES)

        first = select(buckets, random.Random(42))
        second = select(buckets, random.Random(42))

        assert first == second

    def test_empty_desktop_is_fatal(self):
        buckets = bucketize(targets("Mobile Safari - iPhone 12", "Tablet - iPad"))

        with pytest.raises(SelectionError, match="no desktop browser target"):
            select(buckets, random.Random(0))

    def test_desktop_only(self):
        selection = select(bucketize(targets("firefox")), random.Random(0))

        assert selection.picks == (Pick(Category.DESKTOP, "firefox"),)
        assert selection.warnings == (
            "no Mobile Safari targets found, skipping category",
            "no Mobile Chrome targets found, skipping category",
            "no Tablet targets found, skipping category",
        )

    def test_missing_category_omitted_not_padded(self):
        selection = select(
            bucketize(targets("webkit", "Tablet - iPad")), random.Random(0)
        )

        assert selection.names == ["webkit", "Tablet - iPad"]
        assert selection.get(Category.MOBILE_CHROME) is None
        assert selection.get(Category.TABLET) == "Tablet - iPad"

    def test_uses_randrange_per_bucket(self):
        class LastIndex(random.Random):
            def randrange(self, n):
                return n - 1

        selection = select(bucketize(ALL_CATEGORIES), LastIndex())

        assert selection.names == [
            "firefox",
            "Mobile Safari - iPhone 12",
            "Mobile Chrome - Pixel 5",
            "Tablet - iPad Pro",
        ]

    def test_selection_varies_across_runs(self):
        buckets = bucketize(targets("chromium", "firefox", "edge", "webkit"))
        rng = random.Random()

        seen = {select(buckets, rng).get(Category.DESKTOP) for _ in range(1000)}

        assert len(seen) > 1


@pytest.mark.unit
class TestPlan:
    def test_plan_combines_selection_and_files(self):
        files = ["tests/a.spec.ts", "tests/b.spec.ts"]
        result = plan(ALL_CATEGORIES, files, random.Random(1))

        assert result.test_files == ("tests/a.spec.ts", "tests/b.spec.ts")
        assert isinstance(result.buckets, Buckets)
        assert isinstance(result.selection, Selection)
        assert len(result.selection) == 4

    def test_no_targets(self):
        with pytest.raises(ConfigError, match="no targets found"):
            plan([], ["tests/a.spec.ts"], random.Random(1))

    def test_no_test_files(self):
        with pytest.raises(DiscoveryError, match="no test files"):
            plan(ALL_CATEGORIES, [], random.Random(1))

    def test_only_uncategorized_targets(self):
        with pytest.raises(SelectionError):
            plan(targets("setup"), ["tests/a.spec.ts"], random.Random(1))
