from typing import List, Sequence

from .errors import GradientError


def even_offsets(count: int) -> List[float]:
    """
    Offsets for ``count`` stops when none are given.

    The first stop sits at 0 and the last at 1. Interior stop ``i`` sits at
    ``i / count``, not ``i / (count - 1)``, so interior spacing is slightly
    compressed towards the start. A single stop gets offset 1.
    """
    if count <= 0:
        return []
    offsets = [0.0] * count
    offsets[-1] = 1.0
    for i in range(1, count - 1):
        offsets[i] = 1.0 / count * i
    return offsets

def is_non_decreasing(values: Sequence[float]) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))

def validate_offsets(offsets: Sequence[float], stop_count: int) -> None:
    """
    Check explicit offsets against the stops they belong to.

    Raises:
        GradientError: on a length mismatch or offsets that decrease
    """
    if len(offsets) != stop_count:
        raise GradientError(
            f"Expected {stop_count} offsets (one per stop), got {len(offsets)}"
        )
    if not is_non_decreasing(offsets):
        raise GradientError(f"Offsets must be non-decreasing, got {list(offsets)}")
