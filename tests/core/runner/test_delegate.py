"""
Tests for delegating an invocation to the external runner.
"""

import signal
import subprocess
import sys
from unittest.mock import Mock, patch

import pytest

from playpick.exceptions import RunnerError
from playpick.runner import Invocation, delegate, exit_status


def python_command(code):
    return (sys.executable, "-c", code)


@pytest.mark.unit
class TestExitStatus:
    @pytest.mark.parametrize("code", [0, 1, 2, 127, 255])
    def test_non_negative_passthrough(self, code):
        assert exit_status(code) == code

    def test_signal_maps_to_128_plus_signum(self):
        assert exit_status(-signal.SIGTERM) == 128 + signal.SIGTERM
        assert exit_status(-9) == 137


@pytest.mark.unit
class TestDelegate:
    def test_success(self):
        assert delegate(Invocation(python_command("import sys; sys.exit(0)"))) == 0

    def test_failure_status_mirrored(self):
        assert delegate(Invocation(python_command("import sys; sys.exit(3)"))) == 3

    def test_arguments_and_cwd(self, temp_dir):
        code = (
            "import os, sys; "
            "open('seen.txt', 'w').write(os.getcwd() + '|' + ' '.join(sys.argv[1:]))"
        )
        invocation = Invocation(
            python_command(code), projects=("firefox",), files=("tests/a.spec.ts",)
        )

        assert delegate(invocation, cwd=temp_dir) == 0

        cwd, args = (temp_dir / "seen.txt").read_text().split("|")
        assert cwd == str(temp_dir.resolve()) or cwd == str(temp_dir)
        assert args == "--project=firefox tests/a.spec.ts"

    def test_runs_without_capture_or_check(self):
        with patch("subprocess.run") as run:
            run.return_value = subprocess.CompletedProcess(["x"], 5)
            status = delegate(Invocation(("npx", "playwright", "test")), cwd="/work")

        assert status == 5
        run.assert_called_once_with(
            ["npx", "playwright", "test"], cwd="/work", check=False
        )

    def test_killed_by_signal(self):
        with patch("subprocess.run") as run:
            run.return_value = subprocess.CompletedProcess(["x"], -signal.SIGINT)
            assert delegate(Invocation(("npx",))) == 128 + signal.SIGINT

    def test_missing_executable(self):
        invocation = Invocation(("playpick-no-such-runner-binary", "test"))

        with pytest.raises(RunnerError, match="runner not found"):
            delegate(invocation)

    def test_empty_command(self):
        with pytest.raises(RunnerError, match="empty"):
            delegate(Invocation(()))

    def test_logs_start_and_finish(self):
        lg = Mock()
        delegate(Invocation(python_command("pass")), lg=lg)

        messages = [c.args[0] for c in lg.debug.call_args_list]
        assert messages == ["starting runner", "runner finished"]
