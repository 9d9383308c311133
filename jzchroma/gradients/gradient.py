from __future__ import annotations

import logging
import math
from bisect import bisect_right
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..colors.color import JzazbzColor, BLACK
from ..conversions import np_jzazbz_to_unit_rgb, np_scale_channel
from ..types.format_type import FormatType, channel_maxima
from .errors import GradientError
from .offsets import even_offsets, is_non_decreasing, validate_offsets
from .stop import GradientStop

logger = logging.getLogger(__name__)


class Gradient:
    """
    A perceptually smooth multi-stop gradient, blended in JzAzBz.

    Stops are ordered by non-decreasing offset. A gradient without stops is
    allowed; every query on it returns black.
    """
    __slots__ = ('_stops', '_offsets')

    def __init__(self, stops: Iterable[GradientStop] = ()) -> None:
        self._stops: Tuple[GradientStop, ...] = tuple(stops)
        self._offsets: Tuple[float, ...] = tuple(stop.offset for stop in self._stops)
        if not is_non_decreasing(self._offsets):
            raise GradientError(f"Offsets must be non-decreasing, got {list(self._offsets)}")

    @classmethod
    def from_hex(
        cls,
        stops: Sequence[str],
        offsets: Optional[Sequence[float]] = None,
        *,
        strict: bool = False,
    ) -> Gradient:
        """See :func:`build_gradient`."""
        return build_gradient(stops, offsets, strict=strict)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def stops(self) -> Tuple[GradientStop, ...]:
        return self._stops

    @property
    def offsets(self) -> Tuple[float, ...]:
        return self._offsets

    @property
    def colors(self) -> Tuple[JzazbzColor, ...]:
        return tuple(stop.color for stop in self._stops)

    @property
    def is_valid(self) -> bool:
        return len(self._stops) > 0

    # ------------------ LOOKUP ------------------
    def stop_color(self, index: int) -> JzazbzColor:
        """Color of stop ``index``, or black when there is no such stop."""
        if 0 <= index < len(self._stops):
            return self._stops[index].color
        return BLACK

    def color_at(self, position: float, maximum: float) -> JzazbzColor:
        """
        Sample the gradient at ``position`` along an axis running from 0 to ``maximum``.

        The ends return the first and last stop colors exactly. Between them the
        bracketing stops are found (the upper one being the first whose offset
        is strictly greater than ``position / maximum``) and blended. Positions
        outside the offsets clamp to the nearest end stop.
        """
        count = len(self._stops)
        if count == 0:
            return BLACK
        if count == 1:
            return self._stops[0].color

        if position == 0:
            return self._stops[0].color
        if position == maximum:
            return self._stops[-1].color

        if maximum == 0:
            f = math.copysign(math.inf, position)
        else:
            f = position / maximum

        upper = bisect_right(self._offsets, f)
        if upper == 0:
            return self._stops[0].color
        if upper == count:
            return self._stops[-1].color

        lo, hi = self._stops[upper - 1], self._stops[upper]
        # normalize 0..1 between the bracketing stops
        frac = (f - lo.offset) / (hi.offset - lo.offset)
        return lo.color.blend(hi.color, frac)

    # ------------------ SAMPLING ------------------
    def sample(self, steps: int) -> List[JzazbzColor]:
        """``steps`` colors evenly spread from the first to the last end of the axis."""
        if steps <= 0:
            return []
        if steps == 1:
            return [self.color_at(0, 0)]
        return [self.color_at(i, steps - 1) for i in range(steps)]

    def sample_hex(self, steps: int) -> List[str]:
        return [color.hex() for color in self.sample(steps)]

    def sample_rgb(self, steps: int, format_type: FormatType = FormatType.FLOAT) -> NDArray:
        """
        Sample ``steps`` colors and decode them to gamma-encoded sRGB in one pass.

        Returns:
            array of shape (steps, 3); integer dtype for integer formats
        """
        format_type = FormatType(format_type)
        jab = np.array([color.value for color in self.sample(steps)], dtype=float).reshape(-1, 3)
        rgb = np_jzazbz_to_unit_rgb(jab)
        maximum = channel_maxima[format_type]
        if format_type in (FormatType.INT, FormatType.INT16):
            return np_scale_channel(rgb, maximum)
        return rgb * maximum

    # ------------------ DUNDER ------------------
    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[GradientStop]:
        return iter(self._stops)

    def __repr__(self) -> str:
        inner = ", ".join(f"{stop.color.hex()}@{stop.offset:g}" for stop in self._stops)
        return f"{self.__class__.__name__}([{inner}])"


class InvalidGradient(Gradient):
    """
    The failed outcome of :func:`build_gradient`.

    Carries the reason in ``error`` and has no stops, so every query on it
    degrades to black.
    """
    __slots__ = ('error',)

    def __init__(self, error: GradientError) -> None:
        super().__init__(())
        self.error = error

    @property
    def is_valid(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self.error)!r})"


def build_gradient(
    stops: Sequence[str],
    offsets: Optional[Sequence[float]] = None,
    *,
    strict: bool = False,
) -> Gradient:
    """
    Build a gradient from hex color stops and optional offsets.

    Args:
        stops: hex colors (``#rrggbb`` or ``#rgb``); unparseable ones become black
        offsets: one offset in [0, 1] per stop, non-decreasing. When empty or
            None they are synthesized by :func:`even_offsets`.
        strict: raise instead of returning an :class:`InvalidGradient`

    Returns:
        A :class:`Gradient`, or an :class:`InvalidGradient` when there are no
        stops or the offsets do not fit them.

    Raises:
        GradientError: only when ``strict`` is set
    """
    try:
        if len(stops) == 0:
            raise GradientError("A gradient needs at least one stop")
        if offsets is not None and len(offsets) > 0:
            validate_offsets(offsets, len(stops))
            positions = [float(o) for o in offsets]
        else:
            positions = even_offsets(len(stops))
    except GradientError as e:
        if strict:
            raise
        logger.debug("Invalid gradient %r / %r: %s", stops, offsets, e)
        return InvalidGradient(e)

    return Gradient(
        GradientStop(JzazbzColor.from_hex(text), offset)
        for text, offset in zip(stops, positions)
    )
