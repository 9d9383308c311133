"""
Perceptual quantizer (PQ) transfer pair used by JzAzBz.

The forward curve maps absolute cone response (scaled so that 1e4 is the
reference peak) to a perceptually spaced code value; the inverse maps it back.
Exponents are the JzAzBz variant of SMPTE ST 2084, with ``P`` replacing the
usual 78.84375.
"""
import math
import numpy as np
from numpy import ndarray as NDArray

C1 = 0.8359375
C2 = 18.8515625
C3 = 18.6875
N = 0.1593017578125
P = 134.034375
PEAK = 1e4

N_INV = 6.277394636015326
P_INV = 7.460772656268214e-03


def pq(x: float) -> float:
    """Forward PQ gamma. A negative input has no real result and yields NaN."""
    try:
        xp = math.pow(x / PEAK, N)
        return math.pow((C1 + C2 * xp) / (1 + C3 * xp), P)
    except ValueError:
        return math.nan

def pq_inverse(x: float) -> float:
    """
    Inverse PQ gamma.

    Any input without a real result (negative base, NaN) maps to 0 instead
    of NaN. A zero denominator or overflow saturates to infinity.
    """
    try:
        xp = math.pow(x, P_INV)
        v = PEAK * math.pow((C1 - xp) / (C3 * xp - C2), N_INV)
    except ValueError:
        return 0.0
    except (ZeroDivisionError, OverflowError):
        return math.inf
    if math.isnan(v):
        return 0.0
    return v

def np_pq(x: NDArray) -> NDArray:
    """Vectorized forward PQ gamma."""
    x = np.asarray(x, dtype=float)
    with np.errstate(invalid="ignore", over="ignore"):
        xp = np.power(x / PEAK, N)
        return np.power((C1 + C2 * xp) / (1 + C3 * xp), P)

def np_pq_inverse(x: NDArray) -> NDArray:
    """Vectorized inverse PQ gamma, NaN results replaced by 0."""
    x = np.asarray(x, dtype=float)
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        xp = np.power(x, P_INV)
        v = PEAK * np.power((C1 - xp) / (C3 * xp - C2), N_INV)
    return np.where(np.isnan(v), 0.0, v)
