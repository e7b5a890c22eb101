"""Decimal rounding for reported amounts and yields."""

from __future__ import annotations

import math
import sys

__all__ = [
    "round_half_away",
    "round_money",
    "round_pct",
]

_EPSILON = sys.float_info.epsilon


def round_half_away(value: float, decimals: int = 0) -> float:
    """Round half away from zero, biased by machine epsilon.

    The bias pushes values such as ``1.005`` (stored as ``1.00499...``)
    over the half-way mark before scaling.

    Args:
        value: Number to round.
        decimals: Number of decimal places to keep.

    Returns:
        The rounded value. Non-finite inputs are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    factor = 10.0 ** decimals
    magnitude = math.floor((abs(value) + _EPSILON) * factor + 0.5) / factor
    return math.copysign(magnitude, value) if magnitude else 0.0


def round_money(value: float, decimals: int = 2) -> float:
    """Round a monetary amount (2 dp by default)."""
    return round_half_away(value, decimals)


def round_pct(value: float, decimals: int = 6) -> float:
    """Round a yield percentage (6 dp by default)."""
    return round_half_away(value, decimals)
