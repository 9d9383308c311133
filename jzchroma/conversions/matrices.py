"""Fixed coefficients of the sRGB ⇄ JzAzBz pipeline (illuminant D65)."""
import numpy as np

# linear sRGB -> CIE XYZ
LINEAR_RGB_TO_XYZ = np.array([
    [0.41239079926595948, 0.35758433938387796, 0.18048078840183429],
    [0.21263900587151036, 0.71516867876775593, 0.072192315360733715],
    [0.019330818715591851, 0.11919477979462599, 0.95053215224966058],
])

# CIE XYZ -> linear sRGB
XYZ_TO_LINEAR_RGB = np.array([
    [3.2409699419045214, -1.5373831775700935, -0.49861076029300328],
    [-0.96924363628087983, 1.8759675015077207, 0.041555057407175613],
    [0.055630079696993609, -0.20397695888897657, 1.0569715142428786],
])

# CIE XYZ -> LMS cone response (https://observablehq.com/@jrus/jzazbz)
XYZ_TO_LMS = np.array([
    [0.674207838, 0.382799340, -0.047570458],
    [0.149284160, 0.739628340, 0.083327300],
    [0.070941080, 0.174768000, 0.670970020],
])

# LMS -> CIE XYZ
LMS_TO_XYZ = np.array([
    [1.661373055774069e+00, -9.145230923250668e-01, 2.313620767186147e-01],
    [-3.250758740427037e-01, 1.571847038366936e+00, -2.182538318672940e-01],
    [-9.098281098284756e-02, -3.127282905230740e-01, 1.522766561305260e+00],
])

# L'M'S' -> (az, bz)
LMS_PRIME_TO_AB = np.array([
    [3.524000, -4.066708, 0.542708],
    [0.199076, 1.096799, -1.295875],
])

# (iz, az, bz) -> L'M'S'
IAB_TO_LMS_PRIME = np.array([
    [1.0, 1.386050432715393e-1, 5.804731615611869e-2],
    [1.0, -1.386050432715393e-1, -5.804731615611891e-2],
    [1.0, -9.601924202631895e-2, -8.118918960560390e-1],
])

# Lightness offset that maps black to j == 0
D0 = 1.6295499532821566e-11


def mul3(rows, x: float, y: float, z: float):
    """Multiply a 3-column matrix (as nested lists) by the vector ``(x, y, z)``."""
    return tuple(r0 * x + r1 * y + r2 * z for r0, r1, r2 in rows)

def np_mul3(matrix: np.ndarray, color: np.ndarray) -> np.ndarray:
    """Vectorized ``mul3`` over the last axis of ``color``."""
    return color @ matrix.T
