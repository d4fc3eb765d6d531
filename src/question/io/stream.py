"""StreamIO: reads and writes arbitrary text streams."""

from __future__ import annotations

from typing import TextIO

from question.errors import EndOfInput, IOFailure
from question.io.base import strip_newline


class StreamIO:
    """Collaborator over a reader/writer pair of text streams.

    Any file-like objects work, including ``io.StringIO`` buffers, which
    makes this the in-memory collaborator for tests and embedding.

    The first read at end of stream returns an empty line; reads after
    that raise EndOfInput.
    """

    def __init__(self, reader: TextIO, writer: TextIO) -> None:
        self.reader = reader
        self.writer = writer
        self._at_eof = False

    def write_prompt(self, text: str) -> None:
        try:
            self.writer.write(text)
            self.writer.flush()
        except (OSError, ValueError) as exc:
            raise IOFailure(f"could not write prompt: {exc}", cause=exc) from exc

    def read_line(self) -> str:
        if self._at_eof:
            raise EndOfInput()
        try:
            line = self.reader.readline()
        except (OSError, ValueError) as exc:
            raise IOFailure(f"could not read input: {exc}", cause=exc) from exc
        if line == "":
            self._at_eof = True
        return strip_newline(line)
