"""
JzAzBz Color Values
===================

An immutable color value in the JzAzBz perceptual space, built from hex
strings or sRGB channels and decoded back to hex, 16-bit RGBA or any
intermediate stage of the pipeline.

Usage
-----
>>> from jzchroma.colors import Color
>>> red = Color.from_hex("#ff0000")
>>> blue = Color.from_hex("#00f")
>>> red.blend(blue, 0.5).hex()
>>> red.rgba()          # linear channels, 16-bit
>>> red.to_rgb()        # gamma-encoded channels, 0-255

Malformed hex input never raises; it yields black.
"""
from .color import JzazbzColor, Color, BLACK, lerp

__all__ = [
    "JzazbzColor",
    "Color",
    "BLACK",
    "lerp",
]
