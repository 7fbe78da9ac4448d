"""
Report writers for CLI tools.

Tools never print directly. They write through the app's OutputWriter,
which is the terminal in production and an in-memory buffer in tests.
"""

import sys
from io import StringIO
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    """Destination for report text."""

    def write(self, text: str = "") -> None:
        """Write one line."""
        ...

    def write_raw(self, text: str) -> None:
        """Write text as-is, e.g. a pre-rendered table."""
        ...

    def flush(self) -> None: ...


class ConsoleOutput:
    """Writes report lines to a text stream, stdout unless given."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout

    def write(self, text: str = "") -> None:
        self._stream.write(text + "\n")

    def write_raw(self, text: str) -> None:
        self._stream.write(text)

    def flush(self) -> None:
        self._stream.flush()


class BufferedOutput:
    """
    Keeps the report in memory.

    Example:
        out = BufferedOutput()
        write_plan(out, plan, invocation)
        assert out.lines[0] == "Discovered targets:"
    """

    def __init__(self) -> None:
        self._buf = StringIO()

    def write(self, text: str = "") -> None:
        self._buf.write(text + "\n")

    def write_raw(self, text: str) -> None:
        self._buf.write(text)

    def flush(self) -> None:
        pass

    @property
    def text(self) -> str:
        return self._buf.getvalue()

    @property
    def lines(self) -> list[str]:
        """Complete lines written so far, plus any unterminated tail."""
        lines = self.text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def clear(self) -> None:
        self._buf = StringIO()
