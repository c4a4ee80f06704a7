"""Text and JSON rendering of comparison outcomes."""

from __future__ import annotations

import json
from typing import Any

from ivc.models import ComparisonResult, PairFailure, RunOutcome


def result_to_dict(result: ComparisonResult) -> dict[str, Any]:
    return {
        "original": result.original,
        "latest": result.latest,
        "width": result.width,
        "height": result.height,
        "mismatched_count": result.mismatch_count,
        "mismatched_pixels": [[c.x, c.y] for c in result.mismatched_pixels],
    }


def failure_to_dict(failure: PairFailure) -> dict[str, Any]:
    return {
        "original": failure.original,
        "latest": failure.latest,
        "error": type(failure.error).__name__,
        "message": str(failure.error),
    }


def outcome_to_dict(outcome: RunOutcome, tolerance: float) -> dict[str, Any]:
    return {
        "tolerance": tolerance,
        "pairs": len(outcome.results) + len(outcome.failures),
        "mismatched_pairs": len(outcome.mismatched_results),
        "mismatched_pixels": outcome.total_mismatched_pixels,
        "results": [result_to_dict(r) for r in outcome.results],
        "failures": [failure_to_dict(f) for f in outcome.failures],
    }


def render_json(outcome: RunOutcome, tolerance: float) -> str:
    return json.dumps(outcome_to_dict(outcome, tolerance), indent=2)


def render_summary(outcome: RunOutcome) -> list[str]:
    """One line per pair that differs or failed, then a totals line."""
    lines = [
        f"diff: {r.original} -> {r.latest}: {r.mismatch_count}/{r.width * r.height} pixels"
        for r in outcome.mismatched_results
    ]
    lines.extend(f"failed: {f.original}: {f.error}" for f in outcome.failures)
    total = len(outcome.results) + len(outcome.failures)
    if not lines:
        lines.append(f"match: {total} pairs")
    else:
        lines.append(
            f"{len(outcome.mismatched_results)}/{total} pairs differ, "
            f"{outcome.total_mismatched_pixels} pixels, {len(outcome.failures)} failed"
        )
    return lines
