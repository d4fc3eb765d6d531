"""ConsoleIO: prompts the user at the terminal."""

from __future__ import annotations

import sys

import click

from question.errors import EndOfInput, IOFailure
from question.io.base import strip_newline


class ConsoleIO:
    """Collaborator that uses stdin/stdout for interactive prompts.

    The streams are looked up on every call so that redirected or
    replaced sys.stdin / sys.stdout are honored. A closed stdin reads as
    one empty line, then raises EndOfInput.
    """

    def __init__(self) -> None:
        self._at_eof = False

    def write_prompt(self, text: str) -> None:
        try:
            click.echo(text, nl=False)
        except OSError as exc:
            raise IOFailure(f"could not write prompt: {exc}", cause=exc) from exc

    def read_line(self) -> str:
        if self._at_eof:
            raise EndOfInput()
        try:
            line = sys.stdin.readline()
        except (OSError, ValueError) as exc:
            raise IOFailure(f"could not read input: {exc}", cause=exc) from exc
        if line == "":
            self._at_eof = True
        return strip_newline(line)
