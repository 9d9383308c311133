"""
JzAzBz Color Conversions
========================

Scalar and vectorized (numpy) conversions along the pipeline

    sRGB  ⇄  linear RGB  ⇄  CIE XYZ  ⇄  LMS  ⇄  JzAzBz

named "rgb", "lrgb", "xyz", "lms" and "jzazbz". "rgb" is gamma-encoded sRGB
with channels in [0, 1]; "lms" is the linear cone response, before the
perceptual quantizer is applied.

Features
--------
- Composed conversions: ``unit_rgb_to_jzazbz`` / ``jzazbz_to_unit_rgb``
- Every intermediate stage exposed on its own
- ``np_`` variants operating on arrays shaped (..., 3)
- ``convert`` / ``np_convert`` walking the pipeline between any two spaces
- Hex parsing and formatting helpers

Examples
--------
>>> from jzchroma.conversions import unit_rgb_to_jzazbz, jzazbz_to_unit_rgb
>>> j, a, b = unit_rgb_to_jzazbz(1.0, 0.5, 0.0)
>>> r, g, b = jzazbz_to_unit_rgb(j, a, b)
>>>
>>> from jzchroma.conversions import convert
>>> xyz = convert((1.0, 0.5, 0.0), "rgb", "xyz")
"""

from .gamma import srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb
from .pq import pq, pq_inverse, np_pq, np_pq_inverse

# Forward
from .to_jzazbz import (
    unit_rgb_to_linear,
    linear_rgb_to_xyz,
    xyz_to_lms,
    lms_to_jzazbz,
    unit_rgb_to_jzazbz,
    np_unit_rgb_to_linear,
    np_linear_rgb_to_xyz,
    np_xyz_to_lms,
    np_lms_to_jzazbz,
    np_unit_rgb_to_jzazbz,
)

# Inverse
from .to_rgb import (
    jzazbz_to_lms,
    lms_to_xyz,
    xyz_to_linear_rgb,
    linear_rgb_to_unit_rgb,
    jzazbz_to_linear_rgb,
    jzazbz_to_unit_rgb,
    np_jzazbz_to_lms,
    np_lms_to_xyz,
    np_xyz_to_linear_rgb,
    np_linear_rgb_to_unit_rgb,
    np_jzazbz_to_linear_rgb,
    np_jzazbz_to_unit_rgb,
)

from .hex import parse_hex, format_hex, scale_channel, np_scale_channel

# High-level API
from .wrapper import convert, np_convert, conversion_path

__all__ = [
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'pq',
    'pq_inverse',
    'np_pq',
    'np_pq_inverse',

    # Forward
    'unit_rgb_to_linear',
    'linear_rgb_to_xyz',
    'xyz_to_lms',
    'lms_to_jzazbz',
    'unit_rgb_to_jzazbz',
    'np_unit_rgb_to_linear',
    'np_linear_rgb_to_xyz',
    'np_xyz_to_lms',
    'np_lms_to_jzazbz',
    'np_unit_rgb_to_jzazbz',

    # Inverse
    'jzazbz_to_lms',
    'lms_to_xyz',
    'xyz_to_linear_rgb',
    'linear_rgb_to_unit_rgb',
    'jzazbz_to_linear_rgb',
    'jzazbz_to_unit_rgb',
    'np_jzazbz_to_lms',
    'np_lms_to_xyz',
    'np_xyz_to_linear_rgb',
    'np_linear_rgb_to_unit_rgb',
    'np_jzazbz_to_linear_rgb',
    'np_jzazbz_to_unit_rgb',

    # Hex
    'parse_hex',
    'format_hex',
    'scale_channel',
    'np_scale_channel',

    # High-level API
    'convert',
    'np_convert',
    'conversion_path',
]
