"""Root directory checks and recursive image file enumeration."""

from __future__ import annotations

import logging
from pathlib import Path

from ivc.errors import MissingDirectoriesError

log = logging.getLogger(__name__)


def resolve_directories(original_dir: str, latest_dir: str) -> tuple[str, str]:
    """Confirm both roots exist and are directories.

    Returns:
        ``(original_dir, latest_dir)`` unchanged.

    Raises:
        MissingDirectoriesError: Naming each missing root ("original",
            "latest") with its path.
    """
    missing: dict[str, str] = {}
    if not Path(original_dir).is_dir():
        missing["original"] = original_dir
    if not Path(latest_dir).is_dir():
        missing["latest"] = latest_dir
    if missing:
        for name, path in missing.items():
            log.debug("%s directory not found: %s", name, path)
        raise MissingDirectoriesError(missing)
    return original_dir, latest_dir


def find_files(root: str, extension: str) -> list[str]:
    """Recursively collect regular files under *root* with *extension*.

    The extension match is exact and case-sensitive, given without a
    leading dot. Symlinks are not followed and entries that cannot be
    read are skipped. The result is sorted.
    """
    base = Path(root)
    if not base.is_dir():
        return []
    suffix = f".{extension}"
    # is_symlink/is_file report False on stat errors
    found = sorted(
        str(path)
        for path in base.rglob("*")
        if path.suffix == suffix and not path.is_symlink() and path.is_file()
    )
    log.debug("found %d %s files under %s", len(found), suffix, root)
    return found
