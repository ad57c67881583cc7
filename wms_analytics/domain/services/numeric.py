"""Numeric helpers shared by the heuristic predictors."""

import math
from typing import Optional, Sequence


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up.

    Matches the rounding used by the upstream order and inventory tooling
    (``2.5 -> 3``, ``-2.5 -> -2``), unlike Python's banker's ``round``.
    """
    return int(math.floor(value + 0.5))


def to_quantity(value: float) -> int:
    """Non-negative rounded quantity; non-finite values degrade to 0."""
    if not math.isfinite(value):
        return 0
    return max(0, round_half_up(value))


def finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence."""
    if not values:
        return 0.0
    count = len(values)
    try:
        return math.fsum(values) / count
    except OverflowError:
        # Sum exceeds the float range; average pre-scaled terms instead.
        return math.fsum(value / count for value in values)
