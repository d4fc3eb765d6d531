"""Question: fluent builder and prompt/validate/retry loop."""

from __future__ import annotations

import logging
from typing import Iterable, TextIO

from question.errors import ConfigurationError, IOFailure
from question.io.base import LineIO
from question.io.console import ConsoleIO
from question.io.stream import StreamIO
from question.model.answer import Answer, AnswerKind
from question.model.config import YES_NO_RESPONSES, QuestionConfig

logger = logging.getLogger(__name__)


class Question:
    """An Answer builder.

    Configure the question with the chaining methods, then call either
    ask() or confirm() to get an answer::

        Question("Do you want to continue?").enable_yes_no().retry_until_acceptable().ask()

    is equivalent to::

        Question("Do you want to continue?").confirm()

    A Question is meant to be asked by one caller, once.
    """

    def __init__(self, text: str, io: LineIO | None = None) -> None:
        self.config = QuestionConfig(base_text=text)
        self.io: LineIO = io if io is not None else ConsoleIO()
        self._io_warned = False

    @classmethod
    def with_streams(cls, text: str, reader: TextIO, writer: TextIO) -> Question:
        """Build a Question that reads from and writes to the given streams."""
        return cls(text, io=StreamIO(reader, writer))

    # --- builder ------------------------------------------------------------

    def accept(self, text: str) -> Question:
        """Add a single acceptable response to the list."""
        if self.config.accepted_literals is None:
            self.config.accepted_literals = []
        self.config.accepted_literals.append(text)
        return self

    def acceptable(self, texts: Iterable[str]) -> Question:
        """Add a collection of acceptable responses to the list."""
        if self.config.accepted_literals is None:
            self.config.accepted_literals = []
        self.config.accepted_literals.extend(texts)
        return self

    def enable_yes_no(self) -> Question:
        """Accept yes/y as YES and no/n as NO, in any case."""
        self.config.is_yes_no = True
        self.config.merge_responses(YES_NO_RESPONSES)
        return self

    def map_response(self, text: str, answer: Answer) -> Question:
        """Make input matching ``text`` (case-insensitively) resolve to ``answer``."""
        self.config.merge_responses({text: answer})
        return self

    def with_tries(self, tries: int) -> Question:
        """Set a maximum number of attempts to get an acceptable answer.

        0 means never stop asking. 1 changes nothing, since a single
        attempt is what ask() does anyway; max_tries stays unset.
        """
        if tries < 0:
            raise ValueError(f"tries must be >= 0, got {tries}")
        if tries == 0:
            self.config.retry_until_valid = True
        elif tries > 1:
            self.config.max_tries = tries
        return self

    def retry_until_acceptable(self) -> Question:
        """Never stop asking until the user provides an acceptable answer."""
        self.config.retry_until_valid = True
        return self

    def show_default_hint(self) -> Question:
        """Show the default that an empty reply stands for.

        YES and NO defaults render as (Y/n) and (y/N), a response default
        renders its text, and no default renders (y/n).
        """
        self.config.show_default_hint = True
        return self

    def set_default(self, answer: Answer) -> Question:
        """Provide the answer used when the user enters an empty line."""
        self.config.default = answer
        return self

    def set_clarification(self, text: str) -> Question:
        """Provide a message shown above the prompt after an invalid reply."""
        self.config.clarification = text
        return self

    # --- asking -------------------------------------------------------------

    def ask(self) -> Answer | None:
        """Ask the question exactly as it has been built.

        Returns None when a bounded number of tries ran out, or when the
        single free-form read failed.
        """
        if self.config.is_validated:
            self._require_responses()
        self._render()
        if self.config.retry_until_valid:
            return self._until_valid()
        if self.config.max_tries is not None:
            return self._max_tries(self.config.max_tries)
        return self._free_form()

    def confirm(self) -> Answer:
        """Ask a yes/no question until an acceptable reply is given."""
        self.enable_yes_no()
        self._render()
        return self._until_valid()

    # --- prompt rendering ---------------------------------------------------

    def build_prompt(self) -> None:
        """Decorate the current rendered prompt with the default hint."""
        cfg = self.config
        if cfg.show_default_hint:
            default = cfg.default
            if default is None:
                cfg.rendered_prompt += " (y/n)"
            elif default.kind is AnswerKind.YES:
                cfg.rendered_prompt += " (Y/n)"
            elif default.kind is AnswerKind.NO:
                cfg.rendered_prompt += " (y/N)"
            else:
                cfg.rendered_prompt += f" ({default.text})"
        cfg.rendered_prompt += " "

    def build_clarification(self) -> None:
        """Put the clarification message, if any, above the prompt."""
        cfg = self.config
        if cfg.clarification is None:
            return
        cfg.rendered_prompt = f"{cfg.clarification}\n{cfg.base_text}"
        self.build_prompt()

    def _render(self) -> None:
        self._io_warned = False
        self.config.rendered_prompt = self.config.base_text
        self.build_prompt()
        logger.debug("Rendered prompt %r", self.config.rendered_prompt)

    # --- loops --------------------------------------------------------------

    def _require_responses(self) -> None:
        if not self.config.valid_responses:
            raise ConfigurationError(
                "validated question has no valid responses; "
                "call enable_yes_no() or map_response() first"
            )

    def _prompt_user(self) -> str:
        self.io.write_prompt(self.config.rendered_prompt)
        return self.io.read_line()

    def _free_form(self) -> Answer | None:
        try:
            raw = self._prompt_user()
        except IOFailure as exc:
            logger.warning("Could not read answer: %s", exc)
            return None
        text = raw.strip()
        if not text and self.config.default is not None:
            logger.debug("Empty reply, using default %r", self.config.default)
            return self.config.default
        return Answer.response(text)

    def _valid_response(self) -> Answer | None:
        """Make one attempt. Returns None if it did not produce an answer."""
        try:
            raw = self._prompt_user()
        except IOFailure as exc:
            if self._io_warned:
                logger.debug("Attempt failed on I/O: %s", exc)
            else:
                logger.warning("Attempt failed on I/O: %s", exc)
                self._io_warned = True
            return None
        answer = self.config.lookup(raw)
        if answer is not None:
            logger.debug("Reply %r matched %r", raw, answer)
            return answer
        if raw == "" and self.config.default is not None:
            logger.debug("Empty reply, using default %r", self.config.default)
            return self.config.default
        logger.debug("Reply %r is not acceptable", raw)
        return None

    def _max_tries(self, tries: int) -> Answer | None:
        attempts = 0
        while True:
            answer = self._valid_response()
            if answer is not None:
                return answer
            attempts += 1
            if attempts >= tries:
                logger.debug("Giving up after %d attempts", attempts)
                return None
            self.build_clarification()

    def _until_valid(self) -> Answer:
        while True:
            answer = self._valid_response()
            if answer is not None:
                return answer
            self.build_clarification()
