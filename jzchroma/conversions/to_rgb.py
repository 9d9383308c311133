"""
Inverse pipeline: JzAzBz -> LMS -> CIE XYZ -> linear RGB -> gamma-encoded sRGB.

Mirrors ``to_jzazbz`` stage for stage. Non-real inverse PQ results are
treated as 0, so the chain never produces NaN from a finite JzAzBz triple.
"""
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from .gamma import linear_to_srgb, np_linear_to_srgb
from .pq import pq_inverse, np_pq_inverse
from .matrices import (
    IAB_TO_LMS_PRIME,
    LMS_TO_XYZ,
    XYZ_TO_LINEAR_RGB,
    D0,
    mul3,
    np_mul3,
)

_IAB_LMS_ROWS = IAB_TO_LMS_PRIME.tolist()
_LMS_XYZ_ROWS = LMS_TO_XYZ.tolist()
_XYZ_RGB_ROWS = XYZ_TO_LINEAR_RGB.tolist()


def jzazbz_to_lms(j: float, a: float, b: float) -> Tuple[float, float, float]:
    """Recover iz from lightness, rebuild L'M'S' and undo the PQ gamma."""
    jz = j + D0
    iz = jz / (0.44 + 0.56 * jz)
    lp, mp, sp = mul3(_IAB_LMS_ROWS, iz, a, b)
    return pq_inverse(lp), pq_inverse(mp), pq_inverse(sp)

def lms_to_xyz(l: float, m: float, s: float) -> Tuple[float, float, float]:
    return mul3(_LMS_XYZ_ROWS, l, m, s)

def xyz_to_linear_rgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    return mul3(_XYZ_RGB_ROWS, x, y, z)

def linear_rgb_to_unit_rgb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return linear_to_srgb(r), linear_to_srgb(g), linear_to_srgb(b)

def jzazbz_to_linear_rgb(j: float, a: float, b: float) -> Tuple[float, float, float]:
    l, m, s = jzazbz_to_lms(j, a, b)
    x, y, z = lms_to_xyz(l, m, s)
    return xyz_to_linear_rgb(x, y, z)

def jzazbz_to_unit_rgb(j: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert JzAzBz to gamma-encoded sRGB. Channels are not clamped to [0, 1]."""
    return linear_rgb_to_unit_rgb(*jzazbz_to_linear_rgb(j, a, b))


def np_jzazbz_to_lms(jab: NDArray) -> NDArray:
    jab = np.asarray(jab, dtype=float)
    jz = jab[..., 0] + D0
    iz = jz / (0.44 + 0.56 * jz)
    iab = np.concatenate([iz[..., None], jab[..., 1:]], axis=-1)
    return np_pq_inverse(np_mul3(IAB_TO_LMS_PRIME, iab))

def np_lms_to_xyz(lms: NDArray) -> NDArray:
    return np_mul3(LMS_TO_XYZ, np.asarray(lms, dtype=float))

def np_xyz_to_linear_rgb(xyz: NDArray) -> NDArray:
    return np_mul3(XYZ_TO_LINEAR_RGB, np.asarray(xyz, dtype=float))

def np_linear_rgb_to_unit_rgb(rgb: NDArray) -> NDArray:
    return np_linear_to_srgb(rgb)

def np_jzazbz_to_linear_rgb(jab: NDArray) -> NDArray:
    return np_xyz_to_linear_rgb(np_lms_to_xyz(np_jzazbz_to_lms(jab)))

def np_jzazbz_to_unit_rgb(jab: NDArray) -> NDArray:
    """
    Vectorized JzAzBz to sRGB (0..1).

    Args:
        jab: array of shape (..., 3): (j, a, b)

    Returns:
        array of shape (..., 3), gamma-encoded, unclamped
    """
    return np_linear_rgb_to_unit_rgb(np_jzazbz_to_linear_rgb(jab))
