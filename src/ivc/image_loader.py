"""Decode image files into RGBA bitmaps."""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from ivc.errors import IOReadError
from ivc.models import DecodedImage, ImageLocation, ImagePair

log = logging.getLogger(__name__)


def load_image(location: ImageLocation) -> DecodedImage:
    """Decode the file at *location* into an RGBA :class:`DecodedImage`.

    Raises:
        IOReadError: If the file is missing, unreadable, or not a
            decodable image. The decoder's message is kept as-is.
    """
    try:
        with Image.open(location) as img:
            pixels = np.array(img.convert("RGBA"), dtype=np.uint8)
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise IOReadError(location, str(exc)) from exc
    log.debug("decoded %s (%dx%d)", location, pixels.shape[1], pixels.shape[0])
    return DecodedImage(pixels=pixels, location=location)


def load_image_pair(original: ImageLocation, latest: ImageLocation) -> ImagePair:
    """Load both sides of a pair, original first."""
    return ImagePair(load_image(original), load_image(latest))
