"""Answer model: the result of asking a question."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class AnswerKind(Enum):
    """Tag for the three forms an answer can take."""

    RESPONSE = "RESPONSE"
    YES = "YES"
    NO = "NO"


@dataclass(frozen=True)
class Answer:
    """The user's answer to a Question.

    A free-text reply is built with ``Answer.response(text)``; the yes/no
    answers are the shared ``Answer.YES`` and ``Answer.NO`` values.
    Equality and hashing are structural.
    """

    kind: AnswerKind
    text: str = ""

    YES: ClassVar[Answer]
    NO: ClassVar[Answer]

    @classmethod
    def response(cls, text: str) -> Answer:
        return cls(kind=AnswerKind.RESPONSE, text=text)

    @property
    def is_yes(self) -> bool:
        return self.kind is AnswerKind.YES

    @property
    def is_no(self) -> bool:
        return self.kind is AnswerKind.NO

    @property
    def is_response(self) -> bool:
        return self.kind is AnswerKind.RESPONSE

    def __str__(self) -> str:
        if self.is_response:
            return self.text
        return self.kind.value.lower()


Answer.YES = Answer(kind=AnswerKind.YES)
Answer.NO = Answer(kind=AnswerKind.NO)
