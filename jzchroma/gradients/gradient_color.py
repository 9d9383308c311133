from __future__ import annotations

import logging
import threading
from typing import Optional, Sequence, Tuple

from ..colors.color import JzazbzColor
from .gradient import Gradient, build_gradient

logger = logging.getLogger(__name__)


class GradientColor:
    """
    A color that varies with horizontal position, described by raw hex stops.

    The underlying :class:`Gradient` is built once, on first use, and shared by
    every later call. Concurrent first calls block on a lock and all see the
    same instance. Invalid stops or offsets give a black gradient.

    Example:
        >>> color = GradientColor(["#ff0000", "#0000ff"])
        >>> color.hex_at(5, 10)
    """

    def __init__(self, stops: Sequence[str], offsets: Sequence[float] = ()) -> None:
        self._stops: Tuple[str, ...] = tuple(stops)
        self._offsets: Tuple[float, ...] = tuple(offsets)
        self._gradient: Optional[Gradient] = None
        self._lock = threading.Lock()

    @property
    def stops(self) -> Tuple[str, ...]:
        return self._stops

    @property
    def offsets(self) -> Tuple[float, ...]:
        return self._offsets

    @property
    def gradient(self) -> Gradient:
        gradient = self._gradient
        if gradient is None:
            with self._lock:
                if self._gradient is None:
                    self._gradient = build_gradient(self._stops, self._offsets)
                    logger.debug("Built %r", self._gradient)
                gradient = self._gradient
        return gradient

    def color(self) -> JzazbzColor:
        """The static color of this gradient: its first stop."""
        return self.gradient.stop_color(0)

    def rgba(self) -> Tuple[int, int, int, int]:
        return self.color().rgba()

    def hex(self) -> str:
        return self.color().hex()

    def color_at(self, x: float, x_max: float) -> JzazbzColor:
        return self.gradient.color_at(x, x_max)

    def hex_at(self, x: float, x_max: float) -> str:
        """Hex color at column ``x`` of a span ``x_max`` wide."""
        return self.color_at(x, x_max).hex()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(stops={list(self._stops)!r}, offsets={list(self._offsets)!r})"
