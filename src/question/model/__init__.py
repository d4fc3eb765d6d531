"""Question model layer -- public type re-exports."""

from question.model.answer import Answer, AnswerKind
from question.model.config import YES_NO_RESPONSES, QuestionConfig, normalize

__all__ = [
    # answer
    "AnswerKind",
    "Answer",
    # config
    "QuestionConfig",
    "YES_NO_RESPONSES",
    "normalize",
]
