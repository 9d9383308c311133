"""jzchroma: perceptually uniform colors and gradients in the JzAzBz space."""
import logging

from .colors import JzazbzColor, Color, BLACK
from .gradients import (
    Gradient,
    GradientColor,
    GradientError,
    GradientStop,
    InvalidGradient,
    build_gradient,
)
from .conversions import (
    unit_rgb_to_jzazbz,
    jzazbz_to_unit_rgb,
    jzazbz_to_linear_rgb,
    np_unit_rgb_to_jzazbz,
    np_jzazbz_to_unit_rgb,
    parse_hex,
    format_hex,
    convert,
    np_convert,
)
from .types import FormatType

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # colors
    "JzazbzColor",
    "Color",
    "BLACK",
    # gradients
    "Gradient",
    "GradientColor",
    "GradientError",
    "GradientStop",
    "InvalidGradient",
    "build_gradient",
    # conversions
    "unit_rgb_to_jzazbz",
    "jzazbz_to_unit_rgb",
    "jzazbz_to_linear_rgb",
    "np_unit_rgb_to_jzazbz",
    "np_jzazbz_to_unit_rgb",
    "parse_hex",
    "format_hex",
    "convert",
    "np_convert",
    "FormatType",
    "__version__",
]
