"""LineIO protocol definition."""

from __future__ import annotations

from typing import Protocol


class LineIO(Protocol):
    """Protocol for line-oriented prompt collaborators.

    Both operations raise IOFailure on error.
    """

    def write_prompt(self, text: str) -> None: ...

    def read_line(self) -> str: ...


def strip_newline(line: str) -> str:
    """Remove one trailing line terminator, leaving other whitespace alone."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n") or line.endswith("\r"):
        return line[:-1]
    return line
