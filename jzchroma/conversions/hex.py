"""Hex color strings and integer channel scaling."""
from __future__ import annotations
import logging
import math
import re
from typing import Optional, Tuple

import numpy as np
from boundednumbers import clamp

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def parse_hex(text: str) -> Optional[Tuple[float, float, float]]:
    """
    Parse ``#rrggbb`` or ``#rgb`` (leading ``#`` optional) into sRGB (0..1).

    Short form digits are scaled by 1/15, long form pairs by 1/255.
    Returns None when the string is not a hex color.
    """
    match = _HEX_RE.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        logger.debug("Not a hex color: %r", text)
        return None
    digits = match.group(1)
    if len(digits) == 3:
        return tuple(int(d, 16) / 15.0 for d in digits)  # type: ignore[return-value]
    return tuple(int(digits[i:i + 2], 16) / 255.0 for i in (0, 2, 4))  # type: ignore[return-value]

def scale_channel(value: float, maximum: int) -> int:
    """
    Scale a unit channel to ``[0, maximum]``, rounding half up.

    NaN maps to 0 and values outside the range saturate at the bounds.
    """
    if math.isnan(value):
        return 0
    return int(clamp(value * maximum + 0.5, 0, maximum))

def format_hex(r: float, g: float, b: float) -> str:
    """Format unit sRGB channels as lowercase ``#rrggbb``."""
    return "#{:02x}{:02x}{:02x}".format(
        scale_channel(r, 255), scale_channel(g, 255), scale_channel(b, 255)
    )

def np_scale_channel(values: np.ndarray, maximum: int) -> np.ndarray:
    """Vectorized ``scale_channel``; returns an integer array."""
    values = np.asarray(values, dtype=float)
    scaled = np.clip(np.floor(values * maximum + 0.5), 0, maximum)
    return np.where(np.isnan(scaled), 0, scaled).astype(np.int64)
