import numpy as np
from typing import Callable, Dict, Tuple, cast

from ..types.color_types import ColorSpace, PIPELINE_SPACES, ScalarTriple, element_to_array

from .to_jzazbz import (
    unit_rgb_to_linear,
    linear_rgb_to_xyz,
    xyz_to_lms,
    lms_to_jzazbz,
    np_unit_rgb_to_linear,
    np_linear_rgb_to_xyz,
    np_xyz_to_lms,
    np_lms_to_jzazbz,
)
from .to_rgb import (
    jzazbz_to_lms,
    lms_to_xyz,
    xyz_to_linear_rgb,
    linear_rgb_to_unit_rgb,
    np_jzazbz_to_lms,
    np_lms_to_xyz,
    np_xyz_to_linear_rgb,
    np_linear_rgb_to_unit_rgb,
)

# One entry per adjacent pair of PIPELINE_SPACES, in both directions
CONVERT_SCALAR: Dict[Tuple[str, str], Callable[[float, float, float], ScalarTriple]] = {
    ("rgb", "lrgb"): unit_rgb_to_linear,
    ("lrgb", "xyz"): linear_rgb_to_xyz,
    ("xyz", "lms"): xyz_to_lms,
    ("lms", "jzazbz"): lms_to_jzazbz,
    ("jzazbz", "lms"): jzazbz_to_lms,
    ("lms", "xyz"): lms_to_xyz,
    ("xyz", "lrgb"): xyz_to_linear_rgb,
    ("lrgb", "rgb"): linear_rgb_to_unit_rgb,
}

CONVERT_NUMPY: Dict[Tuple[str, str], Callable[[np.ndarray], np.ndarray]] = {
    ("rgb", "lrgb"): np_unit_rgb_to_linear,
    ("lrgb", "xyz"): np_linear_rgb_to_xyz,
    ("xyz", "lms"): np_xyz_to_lms,
    ("lms", "jzazbz"): np_lms_to_jzazbz,
    ("jzazbz", "lms"): np_jzazbz_to_lms,
    ("lms", "xyz"): np_lms_to_xyz,
    ("xyz", "lrgb"): np_xyz_to_linear_rgb,
    ("lrgb", "rgb"): np_linear_rgb_to_unit_rgb,
}


def conversion_path(from_space: str, to_space: str) -> list[tuple[str, str]]:
    """
    List the adjacent stage pairs leading from ``from_space`` to ``to_space``.

    Raises:
        ValueError: if either space is not part of the pipeline
    """
    for space in (from_space, to_space):
        if space not in PIPELINE_SPACES:
            raise ValueError(f"Unknown space: {space}")
    start = PIPELINE_SPACES.index(cast(ColorSpace, from_space))
    end = PIPELINE_SPACES.index(cast(ColorSpace, to_space))
    if start <= end:
        chain = PIPELINE_SPACES[start:end + 1]
    else:
        chain = PIPELINE_SPACES[end:start + 1][::-1]
    return list(zip(chain, chain[1:]))

def convert(color: ScalarTriple, from_space: ColorSpace, to_space: ColorSpace) -> ScalarTriple:
    """
    Convert one color triple between any two spaces of the pipeline.

    Args:
        color: three channels in ``from_space``
        from_space: one of "rgb", "lrgb", "xyz", "lms", "jzazbz"
        to_space: target space, same choices

    Returns:
        Tuple of three floats in ``to_space``
    """
    path = conversion_path(from_space.lower(), to_space.lower())
    result = tuple(float(c) for c in color)
    for key in path:
        result = CONVERT_SCALAR[key](*result)
    return cast(ScalarTriple, result)

def np_convert(color: np.ndarray, from_space: ColorSpace, to_space: ColorSpace) -> np.ndarray:
    """Vectorized ``convert`` over an array shaped (..., 3)."""
    path = conversion_path(from_space.lower(), to_space.lower())
    result = element_to_array(color)
    for key in path:
        result = CONVERT_NUMPY[key](result)
    return result
