"""
sRGB transfer curve: gamma-encoded channels <-> linear-light channels.

Both directions use the piecewise IEC 61966-2-1 definition, with a linear
segment near black. Inputs are not clamped; the numpy versions leave NaN
where a negative value hits the power segment.
"""
import numpy as np
from numpy import ndarray as NDArray

# Breakpoints of the linear segment, on the encoded and the linear side
ENCODED_KNEE = 0.04045
LINEAR_KNEE = 0.0031308


def srgb_to_linear(value: float) -> float:
    if value <= ENCODED_KNEE:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4

def linear_to_srgb(value: float) -> float:
    if value <= LINEAR_KNEE:
        return value * 12.92
    return 1.055 * value ** (1 / 2.4) - 0.055

def np_srgb_to_linear(values: NDArray) -> NDArray:
    """Vectorized ``srgb_to_linear``."""
    values = np.asarray(values, dtype=float)
    with np.errstate(invalid="ignore"):
        curve = ((values + 0.055) / 1.055) ** 2.4
    return np.where(values <= ENCODED_KNEE, values / 12.92, curve)

def np_linear_to_srgb(values: NDArray) -> NDArray:
    """Vectorized ``linear_to_srgb``."""
    values = np.asarray(values, dtype=float)
    with np.errstate(invalid="ignore"):
        curve = 1.055 * values ** (1 / 2.4) - 0.055
    return np.where(values <= LINEAR_KNEE, values * 12.92, curve)
