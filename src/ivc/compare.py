"""Per-pixel comparison of a validated image pair."""

from __future__ import annotations

import numpy as np

from ivc.colour import rgba_to_lab, squared_distance
from ivc.models import ImagePair, PixelCoord


def mismatch_mask(pair: ImagePair, tolerance: float) -> np.ndarray:
    """Boolean (height, width) mask, True where the pixels differ past *tolerance*."""
    distances = squared_distance(rgba_to_lab(pair.original.pixels), rgba_to_lab(pair.latest.pixels))
    return distances > np.float32(tolerance)


def compare_pair(pair: ImagePair, tolerance: float) -> list[PixelCoord]:
    """Return every pixel coordinate whose squared Lab distance exceeds *tolerance*.

    Every pixel is evaluated; the result is in row-major order (y outer,
    x inner). Dimensions must already match, see
    :func:`ivc.validation.dimensions_match`.

    Args:
        pair: Original and latest image, same width and height.
        tolerance: Largest squared Lab distance still counted as a match.
            ``0`` requires an exact colour match.
    """
    ys, xs = np.nonzero(mismatch_mask(pair, tolerance))
    return [PixelCoord(int(x), int(y)) for y, x in zip(ys, xs)]
