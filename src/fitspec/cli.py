"""CLI entry point for fitspec."""

import logging

import click

from . import __version__
from .commands import assess, categories, history, init, serve, standards
from .config import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="fitspec")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """fitspec: fitness assessment scoring engine.

    Scores a member's exercise measurements against level standards
    adjusted for age, gender and bodyweight.

    Example usage:

        # List what can be measured
        fitspec categories

        # Show thresholds for a member
        fitspec standards --age 28 --weight 70 --gender male

        # Score a measurement file and keep it in history
        fitspec init
        fitspec assess measurements.json --chart weight --save
        fitspec history list
    """
    configure_logging(logging.DEBUG if verbose else None)


main.add_command(init)
main.add_command(categories)
main.add_command(standards)
main.add_command(assess)
main.add_command(history)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
