"""QuestionConfig: the mutable state behind a Question builder."""

from __future__ import annotations

from dataclasses import dataclass, field

from question.model.answer import Answer

YES_NO_RESPONSES: dict[str, Answer] = {
    "yes": Answer.YES,
    "y": Answer.YES,
    "no": Answer.NO,
    "n": Answer.NO,
}


def normalize(text: str) -> str:
    """Normalize raw input for matching: trim and lowercase."""
    return text.strip().lower()


@dataclass
class QuestionConfig:
    """Everything a Question knows about how it should be asked.

    max_tries is ignored when retry_until_valid is set.
    """

    base_text: str
    rendered_prompt: str = ""
    default: Answer | None = None
    clarification: str | None = None
    accepted_literals: list[str] | None = None
    valid_responses: dict[str, Answer] | None = None
    max_tries: int | None = None
    retry_until_valid: bool = False
    show_default_hint: bool = False
    is_yes_no: bool = False

    def __post_init__(self) -> None:
        if not self.rendered_prompt:
            self.rendered_prompt = self.base_text

    @property
    def is_validated(self) -> bool:
        """True when asking goes through the validate-with-retry loop."""
        return self.retry_until_valid or self.max_tries is not None

    def merge_responses(self, responses: dict[str, Answer]) -> None:
        """Merge entries into valid_responses, overwriting equal keys."""
        if self.valid_responses is None:
            self.valid_responses = {}
        for key, answer in responses.items():
            self.valid_responses[normalize(key)] = answer

    def lookup(self, raw: str) -> Answer | None:
        if not self.valid_responses:
            return None
        return self.valid_responses.get(normalize(raw))
