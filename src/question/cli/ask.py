"""CLI command: question ask -- ask a question and print the answer."""

from __future__ import annotations

import sys

import click

from question.engine import Question
from question.errors import ConfigurationError
from question.model.answer import Answer
from question.model.config import YES_NO_RESPONSES, normalize


def parse_default(value: str, yes_no: bool) -> Answer:
    """Turn a --default value into an Answer.

    With yes/no matching, y/yes/n/no map to YES/NO; anything else is a
    plain response.
    """
    if yes_no:
        answer = YES_NO_RESPONSES.get(normalize(value))
        if answer is not None:
            return answer
    return Answer.response(value)


@click.command()
@click.argument("text")
@click.option("--yes-no", is_flag=True, help="Accept yes/y/no/n replies")
@click.option("--accept", "accepted", multiple=True, help="Record an acceptable reply")
@click.option("--default", "default", default=None, help="Answer used for an empty reply")
@click.option("--show-default", is_flag=True, help="Show the default hint after the prompt")
@click.option("--clarification", default=None, help="Message shown after an invalid reply")
@click.option("--tries", type=click.IntRange(min=0), default=None, help="Maximum attempts (0 = unlimited)")
@click.option("--until-acceptable", is_flag=True, help="Ask until a valid reply is given")
def ask(
    text: str,
    yes_no: bool,
    accepted: tuple[str, ...],
    default: str | None,
    show_default: bool,
    clarification: str | None,
    tries: int | None,
    until_acceptable: bool,
) -> None:
    """Ask TEXT and print the answer.

    Exits with status 1 when no answer could be obtained.
    """
    question = Question(text)
    if accepted:
        question.acceptable(accepted)
    if yes_no:
        question.enable_yes_no()
    if default is not None:
        question.set_default(parse_default(default, yes_no))
    if show_default:
        question.show_default_hint()
    if clarification:
        question.set_clarification(clarification)
    if tries is not None:
        question.with_tries(tries)
    if until_acceptable:
        question.retry_until_acceptable()

    try:
        answer = question.ask()
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)
    if answer is None:
        click.echo("No answer", err=True)
        sys.exit(1)
    click.echo(str(answer))
