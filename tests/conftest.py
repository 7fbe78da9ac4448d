"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the playpick test suite.
"""

import logging
import os
import shutil
import sys
import tempfile
from collections.abc import Callable, Generator, Iterable
from pathlib import Path

import pytest

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (CLI driven against a stub runner)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")


def pytest_collection_modifyitems(config, items):
    """Add 'unit' marker to tests without other markers."""
    for item in items:
        if not any(mark.name in ["e2e", "property"] for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Logging State
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """
    Reset Python logging global state after each test.

    Loggers created by LoggerFactory are registered under names starting
    with "/" and would otherwise leak between tests.
    """
    original_class = logging.getLoggerClass()
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    yield

    logging.setLoggerClass(original_class)
    for name in list(logging.root.manager.loggerDict.keys()):
        if name.startswith("/") or name.startswith("test"):
            del logging.root.manager.loggerDict[name]
    logging.root.handlers = original_handlers
    logging.root.setLevel(original_level)


@pytest.fixture(autouse=True)
def no_playpick_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PLAYPICK_* variables of the surrounding shell out of tests."""
    for key in list(os.environ):
        if key.startswith("PLAYPICK_"):
            monkeypatch.delenv(key)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory that is cleaned up after the test.

    Yields:
        Path: Temporary directory path
    """
    temp_path = Path(tempfile.mkdtemp(prefix="playpick-test-"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


STANDARD_TARGETS = [
    "chromium",
    "firefox",
    "webkit",
    "Mobile Safari - iPhone 12",
    "Mobile Safari - iPhone 14",
    "Mobile Chrome - Pixel 5",
    "Tablet - iPad",
]

STANDARD_SPECS = [
    "abtest.spec.ts",
    "basic_auth.spec.ts",
    "broken_images.spec.ts",
    "elements.spec.ts",
    "visual.spec.ts",
]


def render_playwright_config(names: Iterable[str]) -> str:
    """A playwright.config.ts declaring one project per name."""
    projects = "\n".join(
        f"    {{\n      name: '{name}',\n      use: {{}},\n    }}," for name in names
    )
    return (
        "import { defineConfig, devices } from '@playwright/test';\n\n"
        "export default defineConfig({\n"
        "  testDir: './tests',\n"
        "  projects: [\n"
        f"{projects}\n"
        "  ],\n"
        "});\n"
    )


@pytest.fixture
def make_project(temp_dir: Path) -> Callable[..., Path]:
    """
    Factory building a Playwright project directory.

    Returns:
        Callable taking target names and spec file names, returning the root
    """

    def _make(
        names: Iterable[str] = STANDARD_TARGETS,
        specs: Iterable[str] = STANDARD_SPECS,
    ) -> Path:
        (temp_dir / "playwright.config.ts").write_text(
            render_playwright_config(names), encoding="utf-8"
        )
        tests_dir = temp_dir / "tests"
        tests_dir.mkdir(exist_ok=True)
        for spec in specs:
            (tests_dir / spec).write_text("// spec\n", encoding="utf-8")
        return temp_dir

    return _make


@pytest.fixture
def stub_runner(temp_dir: Path) -> Callable[[int], list[str]]:
    """
    Factory writing a stand-in for the Playwright runner.

    The stub records its arguments in runner-args.txt and exits with the
    given status. Returns the runner command to configure.
    """

    def _make(status: int = 0) -> list[str]:
        script = temp_dir / "stub_runner.py"
        script.write_text(
            "import sys\n"
            "from pathlib import Path\n"
            "Path(__file__).with_name('runner-args.txt').write_text(\n"
            "    '\\n'.join(sys.argv[1:]), encoding='utf-8'\n"
            ")\n"
            f"sys.exit({status})\n",
            encoding="utf-8",
        )
        return [sys.executable, str(script)]

    return _make


@pytest.fixture
def runner_args(temp_dir: Path) -> Callable[[], list[str] | None]:
    """Arguments the stub runner received, or None if it never ran."""

    def _read() -> list[str] | None:
        path = temp_dir / "runner-args.txt"
        if not path.exists():
            return None
        text = path.read_text(encoding="utf-8")
        return text.split("\n") if text else []

    return _read
