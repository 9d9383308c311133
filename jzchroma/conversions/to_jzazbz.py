"""
Forward pipeline: gamma-encoded sRGB -> linear RGB -> CIE XYZ -> LMS -> JzAzBz.

Every stage has a scalar form taking three floats and returning a tuple, and a
vectorized ``np_`` form taking an array shaped ``(..., 3)``.
"""
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from .gamma import srgb_to_linear, np_srgb_to_linear
from .pq import pq, np_pq
from .matrices import (
    LINEAR_RGB_TO_XYZ,
    XYZ_TO_LMS,
    LMS_PRIME_TO_AB,
    D0,
    mul3,
    np_mul3,
)

_RGB_XYZ_ROWS = LINEAR_RGB_TO_XYZ.tolist()
_XYZ_LMS_ROWS = XYZ_TO_LMS.tolist()
(_A_L, _A_M, _A_S), (_B_L, _B_M, _B_S) = LMS_PRIME_TO_AB.tolist()


def unit_rgb_to_linear(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)

def linear_rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return mul3(_RGB_XYZ_ROWS, r, g, b)

def xyz_to_lms(x: float, y: float, z: float) -> Tuple[float, float, float]:
    return mul3(_XYZ_LMS_ROWS, x, y, z)

def lms_to_jzazbz(l: float, m: float, s: float) -> Tuple[float, float, float]:
    """
    Apply the PQ gamma to LMS and combine into (j, a, b).

    ``j`` is offset by ``D0`` so that black lands on 0.
    """
    lp, mp, sp = pq(l), pq(m), pq(s)
    iz = 0.5 * (lp + mp)
    return (
        (0.44 * iz) / (1 - 0.56 * iz) - D0,
        _A_L * lp + _A_M * mp + _A_S * sp,
        _B_L * lp + _B_M * mp + _B_S * sp,
    )

def unit_rgb_to_jzazbz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert gamma-encoded sRGB (0..1) to JzAzBz.

    Out of range input is not clamped; it runs through the formulas as is.
    """
    lr, lg, lb = unit_rgb_to_linear(r, g, b)
    x, y, z = linear_rgb_to_xyz(lr, lg, lb)
    l, m, s = xyz_to_lms(x, y, z)
    return lms_to_jzazbz(l, m, s)


def np_unit_rgb_to_linear(rgb: NDArray) -> NDArray:
    return np_srgb_to_linear(rgb)

def np_linear_rgb_to_xyz(rgb: NDArray) -> NDArray:
    return np_mul3(LINEAR_RGB_TO_XYZ, np.asarray(rgb, dtype=float))

def np_xyz_to_lms(xyz: NDArray) -> NDArray:
    return np_mul3(XYZ_TO_LMS, np.asarray(xyz, dtype=float))

def np_lms_to_jzazbz(lms: NDArray) -> NDArray:
    lms_p = np_pq(lms)
    iz = 0.5 * (lms_p[..., 0] + lms_p[..., 1])
    j = (0.44 * iz) / (1 - 0.56 * iz) - D0
    ab = np_mul3(LMS_PRIME_TO_AB, lms_p)
    return np.concatenate([j[..., None], ab], axis=-1)

def np_unit_rgb_to_jzazbz(rgb: NDArray) -> NDArray:
    """
    Vectorized sRGB (0..1) to JzAzBz.

    Args:
        rgb: array of shape (..., 3), gamma-encoded channels

    Returns:
        array of shape (..., 3): (j, a, b)
    """
    linear = np_unit_rgb_to_linear(rgb)
    return np_lms_to_jzazbz(np_xyz_to_lms(np_linear_rgb_to_xyz(linear)))
