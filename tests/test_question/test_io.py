"""Tests for the line I/O collaborators."""

from __future__ import annotations

import io

import pytest

from question.errors import EndOfInput, IOFailure
from question.io.base import strip_newline


class _BrokenStream(io.StringIO):
    def readline(self, *args) -> str:  # type: ignore[override]
        raise OSError("device gone")

    def write(self, s: str) -> int:
        raise OSError("device gone")


# ===========================================================================
# strip_newline
# ===========================================================================


class TestStripNewline:
    def test_strips_lf(self) -> None:
        assert strip_newline("42\n") == "42"

    def test_strips_crlf(self) -> None:
        assert strip_newline("42\r\n") == "42"

    def test_keeps_other_whitespace(self) -> None:
        assert strip_newline(" 42 \n") == " 42 "

    def test_no_terminator(self) -> None:
        assert strip_newline("42") == "42"


# ===========================================================================
# StreamIO
# ===========================================================================


class TestStreamIO:
    def test_writes_prompt_verbatim(self) -> None:
        from question.io.stream import StreamIO

        out = io.StringIO()
        stream = StreamIO(io.StringIO(""), out)

        stream.write_prompt("what is the meaning to life")

        assert out.getvalue() == "what is the meaning to life"

    def test_reads_lines_in_order(self) -> None:
        from question.io.stream import StreamIO

        stream = StreamIO(io.StringIO("the universe,\nand everything\n"), io.StringIO())

        assert stream.read_line() == "the universe,"
        assert stream.read_line() == "and everything"

    def test_last_line_without_newline(self) -> None:
        from question.io.stream import StreamIO

        stream = StreamIO(io.StringIO("42"), io.StringIO())
        assert stream.read_line() == "42"

    def test_end_of_input(self) -> None:
        from question.io.stream import StreamIO

        stream = StreamIO(io.StringIO("y\n"), io.StringIO())
        assert stream.read_line() == "y"
        assert stream.read_line() == ""

        with pytest.raises(EndOfInput):
            stream.read_line()

    def test_empty_stream_reads_one_empty_line(self) -> None:
        from question.io.stream import StreamIO

        stream = StreamIO(io.StringIO(""), io.StringIO())

        assert stream.read_line() == ""
        with pytest.raises(EndOfInput):
            stream.read_line()
        with pytest.raises(EndOfInput):
            stream.read_line()

    def test_empty_line_is_not_end_of_input(self) -> None:
        from question.io.stream import StreamIO

        stream = StreamIO(io.StringIO("\n"), io.StringIO())
        assert stream.read_line() == ""

    def test_read_error_wrapped(self) -> None:
        from question.io.stream import StreamIO

        stream = StreamIO(_BrokenStream(), io.StringIO())

        with pytest.raises(IOFailure) as excinfo:
            stream.read_line()
        assert isinstance(excinfo.value.cause, OSError)

    def test_write_error_wrapped(self) -> None:
        from question.io.stream import StreamIO

        stream = StreamIO(io.StringIO(""), _BrokenStream())

        with pytest.raises(IOFailure):
            stream.write_prompt("Continue? ")


# ===========================================================================
# ConsoleIO
# ===========================================================================


class TestConsoleIO:
    def test_reads_from_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from question.io.console import ConsoleIO

        monkeypatch.setattr("sys.stdin", io.StringIO("yes\n"))
        assert ConsoleIO().read_line() == "yes"

    def test_closed_stdin_reads_empty_line_then_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from question.io.console import ConsoleIO

        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        console = ConsoleIO()

        assert console.read_line() == ""
        with pytest.raises(EndOfInput):
            console.read_line()

    def test_writes_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        from question.io.console import ConsoleIO

        ConsoleIO().write_prompt("Continue? ")

        assert capsys.readouterr().out == "Continue? "


# ===========================================================================
# ScriptedIO
# ===========================================================================


class TestScriptedIO:
    def test_replays_script_and_records_prompts(self) -> None:
        from question.io.scripted import ScriptedIO

        scripted = ScriptedIO(["a", "b"])
        scripted.write_prompt("first ")
        assert scripted.read_line() == "a"
        scripted.write_prompt("second ")
        assert scripted.read_line() == "b"

        assert scripted.prompts == ["first ", "second "]
        assert scripted.reads == 2
        assert scripted.remaining == 0

    def test_exhausted_script(self) -> None:
        from question.io.scripted import ScriptedIO

        with pytest.raises(EndOfInput):
            ScriptedIO().read_line()

    def test_exception_entries_are_raised_as_io_failure(self) -> None:
        from question.io.scripted import ScriptedIO

        scripted = ScriptedIO([OSError("boom"), "ok"])

        with pytest.raises(IOFailure) as excinfo:
            scripted.read_line()
        assert isinstance(excinfo.value.cause, OSError)
        assert scripted.read_line() == "ok"

    def test_keyboard_interrupt_is_not_wrapped(self) -> None:
        from question.io.scripted import ScriptedIO

        scripted = ScriptedIO([KeyboardInterrupt()])

        with pytest.raises(KeyboardInterrupt):
            scripted.read_line()

    def test_feed_appends(self) -> None:
        from question.io.scripted import ScriptedIO

        scripted = ScriptedIO(["a"])
        scripted.feed("b", "c")
        assert scripted.remaining == 3


# ===========================================================================
# CallbackIO
# ===========================================================================


class TestCallbackIO:
    def test_read_receives_last_prompt(self) -> None:
        from question.io.callback import CallbackIO

        seen: list[str] = []

        def reply(prompt: str) -> str:
            seen.append(prompt)
            return "42"

        callback = CallbackIO(reply)
        callback.write_prompt("Meaning? ")

        assert callback.read_line() == "42"
        assert seen == ["Meaning? "]

    def test_write_callback(self) -> None:
        from question.io.callback import CallbackIO

        written: list[str] = []
        callback = CallbackIO(lambda prompt: "", written.append)
        callback.write_prompt("Q ")

        assert written == ["Q "]

    def test_eof_error_wrapped(self) -> None:
        from question.io.callback import CallbackIO

        def closed(prompt: str) -> str:
            raise EOFError

        with pytest.raises(IOFailure):
            CallbackIO(closed).read_line()


# ===========================================================================
# RecordingIO
# ===========================================================================


class TestRecordingIO:
    def test_records_transcript(self) -> None:
        from question.io.recording import Exchange, RecordingIO
        from question.io.scripted import ScriptedIO

        recorder = RecordingIO(ScriptedIO(["maybe", "yes"]))
        recorder.write_prompt("Q1 ")
        recorder.read_line()
        recorder.write_prompt("Q2 ")
        recorder.read_line()

        assert recorder.transcript() == [
            Exchange(prompt="Q1 ", line="maybe"),
            Exchange(prompt="Q2 ", line="yes"),
        ]

    def test_records_and_reraises_failures(self) -> None:
        from question.io.recording import RecordingIO
        from question.io.scripted import ScriptedIO

        recorder = RecordingIO(ScriptedIO())
        recorder.write_prompt("Q ")

        with pytest.raises(EndOfInput):
            recorder.read_line()

        transcript = recorder.transcript()
        assert len(transcript) == 1
        assert transcript[0].failed
        assert transcript[0].prompt == "Q "

    def test_delegates_writes(self) -> None:
        from question.io.recording import RecordingIO
        from question.io.scripted import ScriptedIO

        inner = ScriptedIO()
        RecordingIO(inner).write_prompt("hello ")

        assert inner.prompts == ["hello "]

    def test_clear_and_copy(self) -> None:
        from question.io.recording import RecordingIO
        from question.io.scripted import ScriptedIO

        recorder = RecordingIO(ScriptedIO(["a"]))
        recorder.read_line()
        t1 = recorder.transcript()
        assert t1 is not recorder.transcript()

        recorder.clear()
        assert recorder.transcript() == []
        assert len(t1) == 1


# ===========================================================================
# Imports from __init__.py
# ===========================================================================


class TestIOExports:
    def test_all_exports_importable(self) -> None:
        from question.io import (
            CallbackIO,
            ConsoleIO,
            Exchange,
            LineIO,
            RecordingIO,
            ScriptedIO,
            StreamIO,
        )

        assert CallbackIO is not None
        assert ConsoleIO is not None
        assert Exchange is not None
        assert LineIO is not None
        assert RecordingIO is not None
        assert ScriptedIO is not None
        assert StreamIO is not None
