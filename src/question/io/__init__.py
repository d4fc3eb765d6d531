"""Line I/O collaborators used by Question to talk to the user."""

from question.io.base import LineIO
from question.io.callback import CallbackIO
from question.io.console import ConsoleIO
from question.io.recording import Exchange, RecordingIO
from question.io.scripted import ScriptedIO
from question.io.stream import StreamIO

__all__ = [
    "LineIO",
    "ConsoleIO",
    "StreamIO",
    "ScriptedIO",
    "CallbackIO",
    "RecordingIO",
    "Exchange",
]
