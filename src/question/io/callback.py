"""CallbackIO: delegates to user-supplied callables."""

from __future__ import annotations

from typing import Callable

from question.errors import IOFailure


class CallbackIO:
    """Collaborator that delegates reading and writing to callbacks.

    ``read`` is called with the most recent prompt and must return the
    line. ``write`` is optional; without it prompts are only remembered
    for the next read. OSError and EOFError from the callbacks become
    IOFailure.
    """

    def __init__(
        self,
        read: Callable[[str], str],
        write: Callable[[str], None] | None = None,
    ) -> None:
        self._read = read
        self._write = write
        self._last_prompt = ""

    def write_prompt(self, text: str) -> None:
        self._last_prompt = text
        if self._write is None:
            return
        try:
            self._write(text)
        except OSError as exc:
            raise IOFailure(f"could not write prompt: {exc}", cause=exc) from exc

    def read_line(self) -> str:
        try:
            return self._read(self._last_prompt)
        except (OSError, EOFError) as exc:
            raise IOFailure(f"could not read input: {exc}", cause=exc) from exc
