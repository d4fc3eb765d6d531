"""CLI command: question confirm -- ask a yes/no question."""

from __future__ import annotations

import sys

import click

from question.engine import Question
from question.model.answer import Answer


@click.command()
@click.argument("text")
@click.option(
    "--default",
    "default",
    type=click.Choice(["yes", "no"], case_sensitive=False),
    default=None,
    help="Answer used for an empty reply",
)
@click.option("--show-default", is_flag=True, help="Show (Y/n) or (y/N) after the prompt")
@click.option("--clarification", default=None, help="Message shown after an invalid reply")
def confirm(
    text: str,
    default: str | None,
    show_default: bool,
    clarification: str | None,
) -> None:
    """Ask TEXT until yes or no is given.

    Exits with status 0 for yes and 1 for no.
    """
    question = Question(text)
    if default is not None:
        question.set_default(Answer.YES if default.lower() == "yes" else Answer.NO)
    if show_default:
        question.show_default_hint()
    if clarification:
        question.set_clarification(clarification)

    answer = question.confirm()
    if answer.is_yes:
        click.echo("Onward then!")
        sys.exit(0)
    click.echo("Aborting...")
    sys.exit(1)
