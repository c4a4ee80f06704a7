"""Concurrent comparison of many image pairs.

Each pair runs on one of a bounded set of daemon worker threads: load
both files, check dimensions, compare pixels. Workers pull pairs from a
job queue and post outcomes to a result queue, so they share nothing but
the lock-guarded table of running pairs used for per-pair timeouts.

A pair that outlives its timeout is reported as failed and its worker
is retired: the thread cannot be interrupted, but it takes no further
pairs and a fresh worker is started in its slot. Daemon threads never
hold up interpreter exit.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Sequence

from ivc.compare import compare_pair
from ivc.errors import ImagePairDimensionMismatchError, IVCError, PairTimeoutError, WorkerJoinError
from ivc.image_loader import load_image_pair
from ivc.models import ComparisonResult, PairFailure, RunOutcome
from ivc.validation import dimensions_match

log = logging.getLogger(__name__)

_POLL_INTERVAL_S = 0.1

_Job = tuple[int, str, str]
_Outcome = tuple[int, ComparisonResult | Exception]


class _RunningPairs:
    """Lock-guarded record of when each in-flight pair was picked up."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._started: dict[int, float] = {}

    def start(self, index: int) -> None:
        with self._lock:
            self._started[index] = time.monotonic()

    def finish(self, index: int) -> bool:
        """Drop *index*; False if it had already been expired."""
        with self._lock:
            return self._started.pop(index, None) is not None

    def expire(self, timeout_s: float) -> list[int]:
        """Drop and return every pair running for longer than *timeout_s*."""
        now = time.monotonic()
        with self._lock:
            overdue = sorted(i for i, t in self._started.items() if now - t > timeout_s)
            for i in overdue:
                del self._started[i]
            return overdue


def compare_one(
    index: int,
    original: str,
    latest: str,
    tolerance: float,
) -> ComparisonResult:
    """Load, validate and compare a single pair.

    Raises:
        IOReadError: If either file cannot be decoded.
        ImagePairDimensionMismatchError: If the sizes differ.
    """
    pair = load_image_pair(original, latest)
    if not dimensions_match(pair.original, pair.latest):
        raise ImagePairDimensionMismatchError(original, latest)
    mismatched = compare_pair(pair, tolerance)
    log.debug("%s: %d mismatched pixels", original, len(mismatched))
    return ComparisonResult(
        index=index,
        original=original,
        latest=latest,
        width=pair.original.width,
        height=pair.original.height,
        mismatched_pixels=tuple(mismatched),
    )


def _work(
    jobs: queue.SimpleQueue[_Job],
    outcomes: queue.SimpleQueue[_Outcome],
    running: _RunningPairs,
    stop: threading.Event,
    tolerance: float,
) -> None:
    while not stop.is_set():
        try:
            index, original, latest = jobs.get_nowait()
        except queue.Empty:
            return
        running.start(index)
        outcome: ComparisonResult | Exception
        try:
            outcome = compare_one(index, original, latest, tolerance)
        except Exception as exc:  # noqa: BLE001
            outcome = exc
        if not running.finish(index):
            # timed out; this worker's slot has been handed to a replacement
            return
        outcomes.put((index, outcome))


def _as_error(exc: Exception, original: str, latest: str) -> IVCError:
    """Pass comparison errors through; wrap anything else as WorkerJoinError."""
    if isinstance(exc, IVCError):
        return exc
    error = WorkerJoinError(f"comparing '{original}' and '{latest}'", str(exc))
    error.__cause__ = exc
    return error


def compare_pairs(
    pairs: Sequence[tuple[str, str]],
    tolerance: float,
    *,
    max_workers: int = 1,
    timeout_s: float | None = None,
    fail_fast: bool = True,
) -> RunOutcome:
    """Compare every ``(original, latest)`` pair concurrently.

    Args:
        pairs: Validated path pairs, as returned by
            :func:`ivc.pairing.pair_file_paths`.
        tolerance: Largest squared Lab distance still counted as a match.
        max_workers: Upper bound on pairs in flight at once.
        timeout_s: Per-pair limit, counted from when a worker picks the
            pair up. ``None`` waits indefinitely.
        fail_fast: Raise the first error and drop every other pair. When
            False, failures are collected into the outcome instead.

    Returns:
        RunOutcome with results (and failures, when not failing fast)
        ordered by pair index.

    Raises:
        IVCError: The first failure, when *fail_fast* is set.
    """
    results: list[ComparisonResult] = []
    failures: list[PairFailure] = []

    jobs: queue.SimpleQueue[_Job] = queue.SimpleQueue()
    for i, (original, latest) in enumerate(pairs):
        jobs.put((i, original, latest))
    outcomes: queue.SimpleQueue[_Outcome] = queue.SimpleQueue()
    running = _RunningPairs()
    stop = threading.Event()
    spawned = 0

    def spawn_worker() -> None:
        nonlocal spawned
        spawned += 1
        threading.Thread(
            target=_work,
            args=(jobs, outcomes, running, stop, tolerance),
            name=f"ivc-compare-{spawned}",
            daemon=True,
        ).start()

    def record(index: int, error: IVCError) -> None:
        if fail_fast:
            raise error
        original, latest = pairs[index]
        log.warning("pair %d failed: %s", index, error)
        failures.append(PairFailure(index, original, latest, error))

    pending = set(range(len(pairs)))
    poll = None if timeout_s is None else min(timeout_s, _POLL_INTERVAL_S)
    try:
        for _ in range(min(max_workers, len(pairs))):
            spawn_worker()

        while pending:
            try:
                index, outcome = outcomes.get(timeout=poll)
            except queue.Empty:
                pass
            else:
                pending.discard(index)
                if isinstance(outcome, ComparisonResult):
                    results.append(outcome)
                else:
                    record(index, _as_error(outcome, *pairs[index]))

            if timeout_s is None:
                continue
            for index in running.expire(timeout_s):
                pending.discard(index)
                record(index, PairTimeoutError(*pairs[index], timeout_s))
                spawn_worker()
    finally:
        # idle workers exit before their next pair; busy ones are abandoned
        stop.set()

    results.sort(key=lambda r: r.index)
    failures.sort(key=lambda f: f.index)
    log.info("compared %d pairs, %d failed", len(results), len(failures))
    return RunOutcome(results=tuple(results), failures=tuple(failures))
