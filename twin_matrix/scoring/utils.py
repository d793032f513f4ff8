"""
Decimal Utilities
twin_matrix/scoring/utils.py

Precision-safe rounding for score arithmetic. Python's round() is
banker's rounding; display values here round half up.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

Number = Union[int, float, Decimal]


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, halves away from zero (2.5 → 3)."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def clamp(value: Number, min_val: Number = 0, max_val: Number = 255) -> Number:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def mean_half_up(values: Iterable[int]) -> int:
    """
    Integer mean rounded half up.

    Raises ValueError on empty input rather than dividing by zero.
    """
    values = list(values)
    if not values:
        raise ValueError("mean of empty sequence")
    return round_half_up(Decimal(sum(values)) / Decimal(len(values)))
