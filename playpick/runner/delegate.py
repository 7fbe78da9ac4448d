"""
Hands an invocation to the external runner and forwards its exit status.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from playpick.exceptions import RunnerError
from playpick.log import Logger

from .invocation import Invocation


def exit_status(returncode: int) -> int:
    """
    Map a child return code to this process's exit status.

    Non-negative codes pass through unchanged. A negative code means the
    child was killed by that signal and becomes 128 + signal, as shells do.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def delegate(
    invocation: Invocation,
    cwd: str | Path | None = None,
    lg: Logger | None = None,
) -> int:
    """
    Run the invocation in the foreground and return its exit status.

    The runner inherits stdin/stdout/stderr. There is no retry and no
    interpretation of the result beyond forwarding the status.

    Args:
        invocation: What to run
        cwd: Working directory for the runner (default: current directory)
        lg: Optional logger for start/finish messages

    Raises:
        RunnerError: If the runner command is empty or cannot be started
    """
    argv = invocation.argv
    if not invocation.command:
        raise RunnerError("runner command is empty")

    if lg is not None:
        lg.debug("starting runner", extra={"argv": argv, "cwd": cwd or "."})

    try:
        result = subprocess.run(argv, cwd=cwd, check=False)
    except FileNotFoundError as e:
        raise RunnerError(
            f"runner not found: {invocation.command[0]}", cwd=cwd or "."
        ) from e
    except PermissionError as e:
        raise RunnerError(f"runner not executable: {invocation.command[0]}") from e

    status = exit_status(result.returncode)
    if lg is not None:
        lg.debug("runner finished", extra={"status": status})
    return status
