from typing import NamedTuple

from ..colors.color import JzazbzColor


class GradientStop(NamedTuple):
    """A color anchored at ``offset`` (0..1) along the gradient axis."""
    color: JzazbzColor
    offset: float
