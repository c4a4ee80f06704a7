"""Match files between the original and latest trees by relative path."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from ivc.errors import ImageCountMismatchError, ImageNotPairedError

log = logging.getLogger(__name__)


def relative_path(path: str, root: str) -> str:
    """Strip *root* from *path*, giving a ``/``-separated relative path."""
    return Path(path).relative_to(root).as_posix()


def _index_by_relative_path(paths: Sequence[str], root: str) -> dict[str, str]:
    return {relative_path(p, root): p for p in paths}


def pair_file_paths(
    original_root: str,
    latest_root: str,
    original_paths: Sequence[str],
    latest_paths: Sequence[str],
) -> list[tuple[str, str]]:
    """Pair every original file with the latest file at the same relative path.

    Returns:
        ``(original_path, latest_path)`` tuples in the order of
        *original_paths*.

    Raises:
        ImageCountMismatchError: If the two lists differ in length.
        ImageNotPairedError: If some relative path exists on one side
            only. Lists the offending relative paths of both sides.
    """
    if len(original_paths) != len(latest_paths):
        raise ImageCountMismatchError(len(original_paths), len(latest_paths))

    by_original = _index_by_relative_path(original_paths, original_root)
    by_latest = _index_by_relative_path(latest_paths, latest_root)

    only_original = sorted(by_original.keys() - by_latest.keys())
    only_latest = sorted(by_latest.keys() - by_original.keys())
    if only_original or only_latest:
        log.debug("unpaired: original=%s latest=%s", only_original, only_latest)
        raise ImageNotPairedError(only_original, only_latest)

    pairs = [(path, by_latest[rel]) for rel, path in by_original.items()]
    log.debug("paired %d images", len(pairs))
    return pairs
