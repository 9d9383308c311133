"""
Perceptual Gradients
====================

Multi-stop gradients whose stops are blended in JzAzBz, giving smooth
transitions without the muddy midpoints of sRGB interpolation.

>>> from jzchroma.gradients import build_gradient
>>> gradient = build_gradient(["#ff0000", "#00ff00", "#0000ff"], [0.0, 0.3, 1.0])
>>> gradient.color_at(5, 10).hex()
>>> gradient.sample_hex(8)

Construction failures return an :class:`InvalidGradient` (check
``gradient.is_valid``); queries on it return black. Pass ``strict=True`` to
get a :class:`GradientError` instead.
"""
from .errors import GradientError
from .stop import GradientStop
from .offsets import even_offsets, validate_offsets
from .gradient import Gradient, InvalidGradient, build_gradient
from .gradient_color import GradientColor

__all__ = [
    "GradientError",
    "GradientStop",
    "even_offsets",
    "validate_offsets",
    "Gradient",
    "InvalidGradient",
    "build_gradient",
    "GradientColor",
]
