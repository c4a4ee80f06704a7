from __future__ import annotations

import logging
import sys

import click

from ivc import __version__
from ivc.commands.compare import compare_cmd
from ivc.commands.pair import pair_cmd

LOG_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def _setup_logging(ctx: click.Context, param: click.Parameter, value: str) -> None:
    """Configure root logging on stderr at the chosen level."""
    logging.basicConfig(
        level=LOG_LEVELS[value],
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="ivc")
@click.option(
    "--log-level",
    type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
    default="info",
    show_default=True,
    envvar="IVC_LOG_LEVEL",
    expose_value=False,
    is_eager=True,
    callback=_setup_logging,
    help="Log verbosity.",
)
def main() -> None:
    """ivc: visual regression checks between two image trees."""


main.add_command(compare_cmd, name="compare")
main.add_command(pair_cmd, name="pair")


if __name__ == "__main__":
    main()
