"""Pair-level predicates used before and during comparison."""

from __future__ import annotations

import numpy as np

from ivc.colour import colour_distance
from ivc.models import DecodedImage, PixelCoord


def dimensions_match(a: DecodedImage, b: DecodedImage) -> bool:
    return a.size == b.size


def pixel_matches(a: DecodedImage, b: DecodedImage, coord: PixelCoord, tolerance: float) -> bool:
    """Return True if the pixel at *coord* is within *tolerance* in both images.

    The bound is inclusive: a squared Lab distance equal to *tolerance*
    still matches, so ``tolerance=0`` demands an exact colour match.
    """
    distance = colour_distance(a.pixels[coord.y, coord.x], b.pixels[coord.y, coord.x])
    return bool(distance <= np.float32(tolerance))
