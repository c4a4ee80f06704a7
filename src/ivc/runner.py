"""Entry point of the comparison core."""

from __future__ import annotations

import logging

from ivc.config import CompareConfig
from ivc.discovery import find_files, resolve_directories
from ivc.models import RunOutcome
from ivc.orchestrator import compare_pairs
from ivc.pairing import pair_file_paths

log = logging.getLogger(__name__)


def run(config: CompareConfig) -> RunOutcome:
    """Discover, pair and compare every image under the two configured roots.

    Stops at the first discovery problem. Per-pair problems stop the run
    too unless ``config.fail_fast`` is False, in which case they are
    returned in :attr:`RunOutcome.failures`.

    Raises:
        IVCError: Any fatal error of the run.
    """
    original_dir, latest_dir = resolve_directories(config.original_dir, config.latest_dir)

    original_paths = find_files(original_dir, config.extension)
    latest_paths = find_files(latest_dir, config.extension)
    log.info(
        "found %d original and %d latest .%s images",
        len(original_paths),
        len(latest_paths),
        config.extension,
    )

    pairs = pair_file_paths(original_dir, latest_dir, original_paths, latest_paths)

    return compare_pairs(
        pairs,
        config.tolerance,
        max_workers=config.max_workers,
        timeout_s=config.timeout_s,
        fail_fast=config.fail_fast,
    )
