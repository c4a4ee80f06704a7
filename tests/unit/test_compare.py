"""Tests for the pair comparator."""

from __future__ import annotations

import numpy as np
from conftest import gradient_pixels, with_changed_pixels

from ivc.compare import compare_pair, mismatch_mask
from ivc.models import DecodedImage, ImagePair, PixelCoord
from ivc.validation import pixel_matches


def _pair(original: np.ndarray, latest: np.ndarray) -> ImagePair:
    return ImagePair(DecodedImage(original, "original.png"), DecodedImage(latest, "latest.png"))


class TestComparePair:
    def test_identical_images_have_no_mismatches(self) -> None:
        pair = _pair(gradient_pixels(), gradient_pixels())
        assert compare_pair(pair, 0.0) == []

    def test_mismatches_in_row_major_order(self) -> None:
        latest = with_changed_pixels(gradient_pixels(), [(3, 4), (1, 2), (4, 0)])
        pair = _pair(gradient_pixels(), latest)
        assert compare_pair(pair, 5.0) == [PixelCoord(4, 0), PixelCoord(1, 2), PixelCoord(3, 4)]

    def test_every_pixel_reported(self) -> None:
        black = np.zeros((3, 4, 4), dtype=np.uint8)
        black[..., 3] = 255
        white = np.full((3, 4, 4), 255, dtype=np.uint8)
        result = compare_pair(_pair(black, white), 100.0)
        assert len(result) == 12
        assert result[0] == PixelCoord(0, 0)
        assert result[4] == PixelCoord(0, 1)
        assert result[-1] == PixelCoord(3, 2)

    def test_small_change_within_tolerance(self) -> None:
        latest = with_changed_pixels(gradient_pixels(), [(2, 2)], (2, 2, 254, 255))
        pair = _pair(gradient_pixels(), latest)
        assert compare_pair(pair, 0.0) == [PixelCoord(2, 2)]
        assert compare_pair(pair, 5.0) == []

    def test_non_square_image(self) -> None:
        original = gradient_pixels(7, 2)
        latest = with_changed_pixels(original, [(6, 1), (0, 1)])
        assert compare_pair(_pair(original, latest), 5.0) == [PixelCoord(0, 1), PixelCoord(6, 1)]

    def test_deterministic(self) -> None:
        rng = np.random.default_rng(3)
        original = rng.integers(0, 256, size=(8, 8, 4), dtype=np.uint8)
        latest = rng.integers(0, 256, size=(8, 8, 4), dtype=np.uint8)
        pair = _pair(original, latest)
        assert compare_pair(pair, 20.0) == compare_pair(pair, 20.0)


class TestMismatchMask:
    def test_agrees_with_pixel_matches(self) -> None:
        original = gradient_pixels()
        latest = with_changed_pixels(original, [(0, 0), (2, 1)], (90, 10, 10, 255))
        pair = _pair(original, latest)
        mask = mismatch_mask(pair, 5.0)
        for y in range(5):
            for x in range(5):
                coord = PixelCoord(x, y)
                assert mask[y, x] == (not pixel_matches(pair.original, pair.latest, coord, 5.0))
