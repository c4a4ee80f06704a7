"""Shared helpers for unit tests."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

WHITE = (255, 255, 255, 255)


def gradient_pixels(width: int = 5, height: int = 5) -> np.ndarray:
    """RGBA array where pixel (x, y) is (x, y, 255, 255)."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            pixels[y, x] = (x, y, 255, 255)
    return pixels


def with_changed_pixels(
    pixels: np.ndarray,
    coords: Iterable[tuple[int, int]],
    colour: tuple[int, int, int, int] = WHITE,
) -> np.ndarray:
    """Return a copy of *pixels* with each (x, y) in *coords* set to *colour*."""
    changed = pixels.copy()
    for x, y in coords:
        changed[y, x] = colour
    return changed


def save_image(path: Path, pixels: np.ndarray | None = None) -> Path:
    """Write *pixels* (default: 5x5 gradient) as an image at *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(gradient_pixels() if pixels is None else pixels).save(path)
    return path


def make_tree(root: Path, rel_paths: Iterable[str], pixels: np.ndarray | None = None) -> Path:
    """Create *root* holding one image per relative path."""
    root.mkdir(parents=True, exist_ok=True)
    for rel in rel_paths:
        save_image(root / rel, pixels)
    return root


IMAGE_NAMES = [
    "another_dir/more_image.png",
    "image.png",
    "some_dir/some_image.png",
    "some_dir/some_image_two.png",
    "some_dir/nested/deep_image.png",
]


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo the handlers ``--log-level`` installs on the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
