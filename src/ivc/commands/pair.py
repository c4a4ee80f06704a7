"""ivc pair -- compare two individual image files."""

from __future__ import annotations

import json
import sys

import click

from ivc.commands._helpers import fail, tolerance_option
from ivc.errors import IVCError
from ivc.models import ComparisonResult
from ivc.orchestrator import compare_one
from ivc.report import result_to_dict


def _text_output(result: ComparisonResult) -> list[str]:
    if result.is_match:
        return ["match"]
    total = result.width * result.height
    lines = [f"diff: {result.mismatch_count}/{total} pixels"]
    lines.extend(f"  ({c.x}, {c.y})" for c in result.mismatched_pixels)
    return lines


@click.command("pair")
@click.argument("original", type=click.Path(dir_okay=False))
@click.argument("latest", type=click.Path(dir_okay=False))
@tolerance_option
@click.option("--fail-on-diff", is_flag=True, help="Exit 1 if any pixel differs.")
@click.option("--json", "use_json", is_flag=True, help="JSON output.")
def pair_cmd(
    original: str,
    latest: str,
    tolerance: float,
    fail_on_diff: bool,
    use_json: bool,
) -> None:
    """Compare ORIGINAL with LATEST pixel by pixel.

    Lists every pixel whose squared Lab distance exceeds the tolerance.
    """
    try:
        result = compare_one(0, original, latest, tolerance)
    except IVCError as exc:
        fail(exc)

    if use_json:
        data = result_to_dict(result)
        data["tolerance"] = tolerance
        click.echo(json.dumps(data))
    else:
        for line in _text_output(result):
            click.echo(line)

    if fail_on_diff and not result.is_match:
        sys.exit(1)
