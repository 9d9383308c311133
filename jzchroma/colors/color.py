from __future__ import annotations
from typing import Iterator, Tuple

from ..conversions import (
    unit_rgb_to_jzazbz,
    jzazbz_to_lms,
    jzazbz_to_linear_rgb,
    jzazbz_to_unit_rgb,
    lms_to_xyz,
    parse_hex,
    format_hex,
    scale_channel,
)
from ..types.color_types import ScalarTriple
from ..types.format_type import FormatType, channel_maxima


def lerp(a: float, b: float, frac: float) -> float:
    """Linear interpolation that returns ``a`` untouched when both ends are equal."""
    if a == b:
        return a
    return a * (1.0 - frac) + b * frac


class JzazbzColor:
    """
    A color in the JzAzBz perceptual color space (illuminant D65).

    +-----------+-------------+---------+
    | Component | Description |  Range  |
    +-----------+-------------+---------+
    | j         | lightness   | [ 0, 1] |
    | a         | green-red   | [-1, 1] |
    | b         | blue-yellow | [-1, 1] |
    +-----------+-------------+---------+

    Instances are immutable; conversions and blending return new colors.
    """
    __slots__ = ('_j', '_a', '_b', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, j: float = 0.0, a: float = 0.0, b: float = 0.0) -> None:
        self._j = float(j)
        self._a = float(a)
        self._b = float(b)
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_hex(cls, text: str) -> JzazbzColor:
        """
        Build a color from ``#rrggbb`` or ``#rgb``.

        Anything that does not parse yields black.
        """
        rgb = parse_hex(text)
        if rgb is None:
            return cls(0.0, 0.0, 0.0)
        return cls(*unit_rgb_to_jzazbz(*rgb))

    @classmethod
    def from_rgb(cls, rgb: Tuple[float, float, float], format_type: FormatType = FormatType.FLOAT) -> JzazbzColor:
        """Build a color from gamma-encoded sRGB channels expressed in ``format_type``."""
        maximum = channel_maxima[FormatType(format_type)]
        r, g, b = (float(c) / maximum for c in rgb)
        return cls(*unit_rgb_to_jzazbz(r, g, b))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def j(self) -> float:
        return self._j

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    @property
    def value(self) -> ScalarTriple:
        return self._j, self._a, self._b

    # ------------------ DECODING ------------------
    def lms(self) -> ScalarTriple:
        """Linear LMS cone response."""
        return jzazbz_to_lms(*self.value)

    def xyz(self) -> ScalarTriple:
        return lms_to_xyz(*self.lms())

    def linear_rgb(self) -> ScalarTriple:
        return jzazbz_to_linear_rgb(*self.value)

    def rgb(self) -> ScalarTriple:
        """Gamma-encoded sRGB, unclamped."""
        return jzazbz_to_unit_rgb(*self.value)

    def to_rgb(self, format_type: FormatType = FormatType.INT) -> Tuple[float, float, float]:
        """
        Gamma-encoded sRGB scaled to ``format_type``.

        Integer formats are rounded half up and saturate at the format range.
        """
        format_type = FormatType(format_type)
        maximum = channel_maxima[format_type]
        if format_type in (FormatType.INT, FormatType.INT16):
            return tuple(scale_channel(c, maximum) for c in self.rgb())  # type: ignore[return-value]
        return tuple(c * maximum for c in self.rgb())  # type: ignore[return-value]

    def hex(self) -> str:
        """Lowercase ``#rrggbb`` of the gamma-encoded color."""
        return format_hex(*self.rgb())

    def rgba(self) -> Tuple[int, int, int, int]:
        """
        16-bit RGBA of this color, alpha always 0xFFFF.

        Unlike :meth:`hex`, the channels are *linear* RGB, not gamma-encoded.
        """
        r, g, b = (scale_channel(c, 0xFFFF) for c in self.linear_rgb())
        return r, g, b, 0xFFFF

    # ------------------ BLENDING ------------------
    def blend(self, other: JzazbzColor, frac: float) -> JzazbzColor:
        """
        Interpolate component-wise towards ``other``.

        ``frac`` 0 gives this color, 1 gives ``other``. Components that are
        equal on both sides are carried over exactly, whatever ``frac`` is.
        """
        return self.__class__(
            lerp(self._j, other._j, frac),
            lerp(self._a, other._a, frac),
            lerp(self._b, other._b, frac),
        )

    # ------------------ DUNDER ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JzazbzColor):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(j={self._j!r}, a={self._a!r}, b={self._b!r})"


Color = JzazbzColor

BLACK = JzazbzColor(0.0, 0.0, 0.0)
