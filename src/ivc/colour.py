"""RGBA -> CIE L*a*b* conversion and squared colour distance.

sRGB companding, D65 reference white. Alpha is carried along in the input
but does not take part in the conversion; a pixel's colour coordinate is
its RGB components only.
"""

from __future__ import annotations

import numpy as np

# sRGB (D65) linear RGB -> XYZ
_M = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)
_WHITE = (0.95047, 1.00000, 1.08883)
_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


def _linearize(c: np.ndarray) -> np.ndarray:
    return np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def _f(t: np.ndarray) -> np.ndarray:
    return np.where(t > _EPSILON, np.cbrt(t), (_KAPPA * t + 16.0) / 116.0)


def rgba_to_lab(rgba: np.ndarray) -> np.ndarray:
    """Convert an array of RGBA u8 values (last axis 4) to Lab (last axis 3).

    Accepts a single pixel of shape (4,) or any (..., 4) array; the
    leading shape is preserved.
    """
    arr = np.asarray(rgba, dtype=np.float64)[..., :3] / 255.0
    lin = _linearize(arr)
    r, g, b = lin[..., 0], lin[..., 1], lin[..., 2]
    # elementwise, so a lone pixel and a full image take the same path
    xyz = [(m[0] * r + m[1] * g + m[2] * b) / w for m, w in zip(_M, _WHITE)]
    fx, fy, fz = (_f(t) for t in xyz)
    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)


def squared_distance(lab_a: np.ndarray, lab_b: np.ndarray) -> np.ndarray:
    """Squared Euclidean distance between Lab coordinates, as float32."""
    diff = np.asarray(lab_a) - np.asarray(lab_b)
    return np.sum(diff * diff, axis=-1).astype(np.float32)


def colour_distance(
    rgba_a: tuple[int, int, int, int] | np.ndarray,
    rgba_b: tuple[int, int, int, int] | np.ndarray,
) -> np.float32:
    """Squared Lab distance between two RGBA pixels."""
    return np.float32(squared_distance(rgba_to_lab(rgba_a), rgba_to_lab(rgba_b)))
