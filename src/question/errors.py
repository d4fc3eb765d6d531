"""Error hierarchy for the question package."""
from __future__ import annotations


class QuestionError(Exception):
    """Base error for all question errors."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class IOFailure(QuestionError):
    """Reading from or writing to the line collaborator failed."""


class EndOfInput(IOFailure):
    """The input stream is exhausted."""

    def __init__(self, message: str = "end of input", **kwargs) -> None:
        super().__init__(message, **kwargs)


class ConfigurationError(QuestionError):
    """The question was configured in a way that cannot be asked."""
