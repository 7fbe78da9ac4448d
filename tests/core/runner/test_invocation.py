"""
Tests for the runner invocation descriptor.
"""

import random

import pytest

from playpick.runner import DEFAULT_COMMAND, Invocation, build_invocation
from playpick.targets import Target, plan


@pytest.mark.unit
class TestInvocation:
    def test_argv_order(self):
        invocation = Invocation(
            command=("npx", "playwright", "test"),
            projects=("firefox", "Tablet - iPad"),
            files=("tests/a.spec.ts",),
            extra_args=("--headed",),
        )

        assert invocation.argv == [
            "npx",
            "playwright",
            "test",
            "--project=firefox",
            "--project=Tablet - iPad",
            "--headed",
            "tests/a.spec.ts",
        ]

    def test_no_projects_means_no_filter(self):
        invocation = Invocation(command=DEFAULT_COMMAND, files=("tests/visual.spec.ts",))
        assert not any(arg.startswith("--project") for arg in invocation.argv)

    def test_command_line_is_shell_quoted(self):
        invocation = Invocation(
            command=DEFAULT_COMMAND, projects=("Mobile Safari - iPhone 14",)
        )
        assert invocation.command_line == (
            "npx playwright test '--project=Mobile Safari - iPhone 14'"
        )

    def test_immutable(self):
        invocation = Invocation(command=DEFAULT_COMMAND)
        with pytest.raises(AttributeError):
            invocation.projects = ("firefox",)  # type: ignore[misc]


@pytest.mark.unit
class TestBuildInvocation:
    def test_from_plan(self):
        run_plan = plan(
            [Target("webkit"), Target("Mobile Chrome - Pixel 5")],
            ["tests/a.spec.ts", "tests/b.spec.ts"],
            random.Random(0),
        )

        invocation = build_invocation(run_plan, extra_args=["--workers=2"])

        assert invocation.command == DEFAULT_COMMAND
        assert invocation.projects == ("webkit", "Mobile Chrome - Pixel 5")
        assert invocation.files == ("tests/a.spec.ts", "tests/b.spec.ts")
        assert invocation.extra_args == ("--workers=2",)

    def test_custom_command(self):
        run_plan = plan([Target("edge")], ["tests/a.spec.ts"], random.Random(0))

        invocation = build_invocation(run_plan, command=["pnpm", "exec", "playwright", "test"])

        assert invocation.argv[:4] == ["pnpm", "exec", "playwright", "test"]
