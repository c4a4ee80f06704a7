"""Shared CLI command helpers."""

from __future__ import annotations

from typing import Any, Callable, NoReturn, TypeVar

import click

from ivc.config import DEFAULT_TOLERANCE, MAX_TOLERANCE

__all__ = ["fail", "tolerance_option"]

F = TypeVar("F", bound=Callable[..., Any])


def fail(exc: Exception) -> NoReturn:
    """Print *exc* as an error line on stderr and exit 1."""
    click.echo(f"error: {exc}", err=True)
    raise SystemExit(1)


def tolerance_option(func: F) -> F:
    """Attach the shared ``-t/--tolerance`` option."""
    return click.option(
        "-t",
        "--tolerance",
        type=click.FloatRange(0.0, MAX_TOLERANCE),
        default=DEFAULT_TOLERANCE,
        show_default=True,
        envvar="IVC_TOLERANCE",
        help="Largest squared Lab distance still counted as a matching pixel (0 - 100).",
    )(func)
