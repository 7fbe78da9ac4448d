"""
Tests for spec file discovery.
"""

import pytest

from playpick.exceptions import DiscoveryError
from playpick.targets import discover_test_files


def touch(directory, *names):
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / name).write_text("", encoding="utf-8")


@pytest.mark.unit
class TestDiscoverTestFiles:
    def test_suffix_filter_and_exclusion(self, temp_dir):
        tests_dir = temp_dir / "tests"
        touch(tests_dir, "b.spec.ts", "a.spec.ts", "visual.spec.ts", "readme.md")

        assert discover_test_files(tests_dir) == ["tests/a.spec.ts", "tests/b.spec.ts"]

    def test_sorted(self, temp_dir):
        tests_dir = temp_dir / "tests"
        touch(tests_dir, "elements.spec.ts", "abtest.spec.ts", "basic_auth.spec.ts")

        assert discover_test_files(tests_dir) == [
            "tests/abtest.spec.ts",
            "tests/basic_auth.spec.ts",
            "tests/elements.spec.ts",
        ]

    def test_excluded_name_never_returned(self, temp_dir):
        tests_dir = temp_dir / "tests"
        touch(tests_dir, "visual.spec.ts", "login.spec.ts")

        assert "tests/visual.spec.ts" not in discover_test_files(tests_dir)

    def test_immediate_files_only(self, temp_dir):
        tests_dir = temp_dir / "tests"
        touch(tests_dir, "a.spec.ts")
        touch(tests_dir / "nested", "deep.spec.ts")
        (tests_dir / "dir.spec.ts").mkdir()

        assert discover_test_files(tests_dir) == ["tests/a.spec.ts"]

    def test_relative_to_root(self, temp_dir):
        tests_dir = temp_dir / "e2e" / "specs"
        touch(tests_dir, "a.spec.ts")

        assert discover_test_files(tests_dir, root=temp_dir) == ["e2e/specs/a.spec.ts"]

    def test_custom_suffix_and_no_exclusion(self, temp_dir):
        tests_dir = temp_dir / "tests"
        touch(tests_dir, "a.test.js", "visual.spec.ts", "b.test.js")

        assert discover_test_files(tests_dir, suffix=".test.js", exclude=None) == [
            "tests/a.test.js",
            "tests/b.test.js",
        ]

    def test_only_excluded_file(self, temp_dir):
        tests_dir = temp_dir / "tests"
        touch(tests_dir, "visual.spec.ts", "notes.txt")

        with pytest.raises(DiscoveryError, match="no test files"):
            discover_test_files(tests_dir)

    def test_missing_directory(self, temp_dir):
        with pytest.raises(DiscoveryError, match="cannot list test directory"):
            discover_test_files(temp_dir / "missing")
