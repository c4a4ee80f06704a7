"""Error taxonomy for a comparison run.

Every failure the core can produce is an :class:`IVCError`. The CLI maps
any of them to exit status 1; the kinds exist so callers can tell data
problems (missing files, bad pairs) from runtime problems (a worker
crashing or hanging).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence


class IVCError(Exception):
    """Base class for every fatal error of a comparison run."""


# -- configuration / discovery ------------------------------------------------


class MissingDirectoriesError(IVCError):
    def __init__(self, missing_directories: Mapping[str, str]) -> None:
        self.missing_directories = dict(missing_directories)
        listed = ", ".join(f"'{name}': '{path}'" for name, path in self.missing_directories.items())
        super().__init__(f"Could not find directories: {listed}.")


class ImageCountMismatchError(IVCError):
    def __init__(self, original_count: int, latest_count: int) -> None:
        self.original_count = original_count
        self.latest_count = latest_count
        super().__init__(
            "Number of images in original and latest directories do not match. "
            f"Original: {original_count}, Latest: {latest_count}."
        )


class ImageNotPairedError(IVCError):
    """Raised when the two trees do not hold the same relative paths."""

    def __init__(
        self,
        unpaired_original: Sequence[str] = (),
        unpaired_latest: Sequence[str] = (),
    ) -> None:
        self.unpaired_original = tuple(unpaired_original)
        self.unpaired_latest = tuple(unpaired_latest)
        msg = (
            "Not all images are paired up between original and latest. Please confirm image "
            "names are the same within the original and latest directories."
        )
        if self.unpaired_original:
            msg += f" Only in original: {', '.join(self.unpaired_original)}."
        if self.unpaired_latest:
            msg += f" Only in latest: {', '.join(self.unpaired_latest)}."
        super().__init__(msg)


# -- i/o -----------------------------------------------------------------------


class IOReadError(IVCError):
    """A file could not be opened or decoded.

    ``source_message`` is the decoder's own text, kept verbatim.
    """

    def __init__(self, location: str, source_message: str) -> None:
        self.location = location
        self.source_message = source_message
        super().__init__(
            f"Issue parsing file at location: '{location}'. Message: '{source_message}'"
        )


# -- comparison precondition ---------------------------------------------------


class ImagePairDimensionMismatchError(IVCError):
    def __init__(self, location_one: str, location_two: str) -> None:
        self.location_one = location_one
        self.location_two = location_two
        super().__init__(f"Image dimensions do not match: '{location_one}' and '{location_two}'.")


# -- concurrency infrastructure ------------------------------------------------


class WorkerJoinError(IVCError):
    """The worker running a pair failed outside the comparison itself."""

    def __init__(self, stage: str, detail: str) -> None:
        self.stage = stage
        self.detail = detail
        super().__init__(f"Worker failed while {stage}. Message: '{detail}'")


class PairTimeoutError(WorkerJoinError):
    def __init__(self, original: str, latest: str, timeout_s: float) -> None:
        self.original = original
        self.latest = latest
        self.timeout_s = timeout_s
        super().__init__(
            f"comparing '{original}' and '{latest}'",
            f"timed out after {timeout_s:g}s",
        )
