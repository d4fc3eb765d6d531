"""RecordingIO: wraps another collaborator and records every exchange."""

from __future__ import annotations

from dataclasses import dataclass

from question.errors import IOFailure
from question.io.base import LineIO


@dataclass(frozen=True)
class Exchange:
    """A recorded prompt and the line read in reply.

    ``failed`` is set when the read raised IOFailure; ``line`` is then
    empty.
    """

    prompt: str
    line: str = ""
    failed: bool = False


class RecordingIO:
    """Collaborator decorator that records all prompt/reply exchanges.

    Every call is forwarded to the inner collaborator. Failures are
    recorded and then re-raised unchanged.
    """

    def __init__(self, inner: LineIO) -> None:
        self._inner = inner
        self._records: list[Exchange] = []
        self._pending = ""

    def write_prompt(self, text: str) -> None:
        self._pending = text
        self._inner.write_prompt(text)

    def read_line(self) -> str:
        prompt, self._pending = self._pending, ""
        try:
            line = self._inner.read_line()
        except IOFailure:
            self._records.append(Exchange(prompt=prompt, failed=True))
            raise
        self._records.append(Exchange(prompt=prompt, line=line))
        return line

    def transcript(self) -> list[Exchange]:
        """Return the list of all recorded exchanges."""
        return list(self._records)

    def clear(self) -> None:
        """Clear the recording history."""
        self._records.clear()
