"""Question CLI entry point: Click group with subcommands."""

import logging

import click

from question import __version__


@click.group()
@click.version_option(version=__version__, prog_name="question")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """Question - ask a question on the terminal and print the answer."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from question.cli.ask import ask  # noqa: E402
from question.cli.confirm import confirm  # noqa: E402

cli.add_command(ask)
cli.add_command(confirm)


def main() -> None:
    cli()
