from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

ScalarTriple = Tuple[float, float, float]
ColorSpace = Literal["rgb", "lrgb", "xyz", "lms", "jzazbz"]

# Order of the conversion pipeline, display space first.
PIPELINE_SPACES: Tuple[ColorSpace, ...] = ("rgb", "lrgb", "xyz", "lms", "jzazbz")


def element_to_array(element: Union[ScalarTriple, ndarray]) -> np.ndarray:
    """
    Convert a color triple to a float numpy array.

    Args:
        element: Tuple of three channels or an already built ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.asarray(element, dtype=float)
