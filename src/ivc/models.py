"""Value types shared across discovery, comparison and reporting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from ivc.errors import IVCError

ImageLocation = str


class PixelCoord(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True, eq=False)
class DecodedImage:
    """Decoded RGBA bitmap plus the location it was read from.

    ``pixels`` has shape (height, width, 4) and dtype uint8.
    """

    pixels: np.ndarray
    location: ImageLocation

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height


class ImagePair(NamedTuple):
    original: DecodedImage
    latest: DecodedImage


@dataclass(frozen=True)
class ComparisonResult:
    """Mismatched pixels for one pair, in row-major scan order."""

    index: int
    original: ImageLocation
    latest: ImageLocation
    width: int
    height: int
    mismatched_pixels: tuple[PixelCoord, ...] = ()

    @property
    def is_match(self) -> bool:
        return not self.mismatched_pixels

    @property
    def mismatch_count(self) -> int:
        return len(self.mismatched_pixels)


@dataclass(frozen=True)
class PairFailure:
    index: int
    original: ImageLocation
    latest: ImageLocation
    error: IVCError


@dataclass(frozen=True)
class RunOutcome:
    results: tuple[ComparisonResult, ...] = ()
    failures: tuple[PairFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def mismatched_results(self) -> tuple[ComparisonResult, ...]:
        return tuple(r for r in self.results if not r.is_match)

    @property
    def total_mismatched_pixels(self) -> int:
        return sum(r.mismatch_count for r in self.results)
