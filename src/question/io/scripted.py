"""ScriptedIO: replays a fixed list of input lines."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from question.errors import EndOfInput, IOFailure


class ScriptedIO:
    """Collaborator that answers prompts from a prepared script.

    Each entry is returned by one read_line() call. An entry that is an
    exception instance is raised instead. Exception subclasses are
    wrapped in IOFailure unless they already are one; KeyboardInterrupt
    and other BaseException entries are raised unchanged.
    Every prompt written is kept in ``prompts``.
    """

    def __init__(self, lines: Iterable[str | BaseException] = ()) -> None:
        self._lines: deque[str | BaseException] = deque(lines)
        self.prompts: list[str] = []
        self.reads = 0

    def feed(self, *lines: str | BaseException) -> None:
        """Append more lines to the end of the script."""
        self._lines.extend(lines)

    @property
    def remaining(self) -> int:
        return len(self._lines)

    def write_prompt(self, text: str) -> None:
        self.prompts.append(text)

    def read_line(self) -> str:
        self.reads += 1
        if not self._lines:
            raise EndOfInput()
        entry = self._lines.popleft()
        if isinstance(entry, IOFailure):
            raise entry
        if isinstance(entry, Exception):
            raise IOFailure(str(entry), cause=entry) from entry
        if isinstance(entry, BaseException):
            raise entry
        return entry
