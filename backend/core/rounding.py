"""Rounding helpers shared by the metric calculators.

Python's built-in round() rounds half to even; stored aggregates and displayed
metrics round half up (104.5 -> 105), so everything here goes through
``round_half_up``.
"""
import math
from typing import Union

Number = Union[int, float]


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


def round_one_decimal(value: Number) -> float:
    """Round to one decimal place, halves going up."""
    return math.floor(value * 10 + 0.5) / 10


def display_number(value: Number) -> Number:
    """Drop a redundant fractional part so 520.0 displays as 520."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
