"""ivc compare -- compare the original and latest image trees."""

from __future__ import annotations

import logging
import sys

import click

from ivc.commands._helpers import fail, tolerance_option
from ivc.config import (
    DEFAULT_DIRECTORY,
    DEFAULT_EXTENSION,
    DEFAULT_TIMEOUT_S,
    CompareConfig,
    default_workers,
)
from ivc.errors import IVCError
from ivc.report import render_json, render_summary
from ivc.runner import run

log = logging.getLogger(__name__)


@click.command("compare")
@click.option(
    "-d",
    "--directory",
    default=DEFAULT_DIRECTORY,
    show_default=True,
    envvar="IVC_DIRECTORY",
    help="Directory holding the 'original' and 'latest' image trees.",
)
@tolerance_option
@click.option(
    "--extension",
    default=DEFAULT_EXTENSION,
    show_default=True,
    help="Image file extension to collect (case-sensitive).",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Pairs compared at once (default: CPU count).",
)
@click.option(
    "--timeout",
    "timeout_s",
    type=click.FloatRange(min=0.0),
    default=DEFAULT_TIMEOUT_S,
    show_default=True,
    help="Per-pair time limit in seconds, 0 disables it.",
)
@click.option("--keep-going", is_flag=True, help="Record failing pairs and keep comparing.")
@click.option("--fail-on-diff", is_flag=True, help="Exit 1 if any pixel differs.")
@click.option("--json", "use_json", is_flag=True, help="JSON output.")
def compare_cmd(
    directory: str,
    tolerance: float,
    extension: str,
    workers: int | None,
    timeout_s: float,
    keep_going: bool,
    fail_on_diff: bool,
    use_json: bool,
) -> None:
    """Compare every image under DIRECTORY/original with DIRECTORY/latest.

    Exit 0 on success, exit 1 on any fatal error (or on a difference,
    with --fail-on-diff).
    """
    try:
        config = CompareConfig.from_directory(
            directory,
            tolerance=tolerance,
            extension=extension,
            max_workers=workers or default_workers(),
            timeout_s=timeout_s or None,
            fail_fast=not keep_going,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    log.debug("comparing %s against %s", config.original_dir, config.latest_dir)
    try:
        outcome = run(config)
    except IVCError as exc:
        fail(exc)

    if use_json:
        click.echo(render_json(outcome, config.tolerance))
    else:
        for line in render_summary(outcome):
            click.echo(line)

    if not outcome.ok or (fail_on_diff and outcome.mismatched_results):
        sys.exit(1)
