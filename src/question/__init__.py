"""question -- ask users questions from command line programs.

Reduces asking a question to a one liner::

    from question import Question

    Question("Do you want to continue?").confirm()
"""

__version__ = "0.2.2"

from question.engine import Question
from question.errors import ConfigurationError, EndOfInput, IOFailure, QuestionError
from question.io import CallbackIO, ConsoleIO, Exchange, LineIO, RecordingIO, ScriptedIO, StreamIO
from question.model import Answer, AnswerKind, QuestionConfig

__all__ = [
    "__version__",
    # engine
    "Question",
    # model
    "Answer",
    "AnswerKind",
    "QuestionConfig",
    # errors
    "QuestionError",
    "IOFailure",
    "EndOfInput",
    "ConfigurationError",
    # io
    "LineIO",
    "ConsoleIO",
    "StreamIO",
    "ScriptedIO",
    "CallbackIO",
    "RecordingIO",
    "Exchange",
]
