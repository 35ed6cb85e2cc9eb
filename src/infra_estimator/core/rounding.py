"""
Half-up rounding for every figure the estimator reports.

Python's round() sends exact halves to the nearest even number, so
round(0.5) == 0 and a one-user app would project zero daily users.
These helpers always round halves up.
"""

import math


def round_half_up(value: float) -> int:
    """Nearest integer, halves rounded up (0.5 -> 1, 4.5 -> 5)."""
    return math.floor(value + 0.5)


def round2(value: float) -> float:
    """Two decimal places, halves rounded up (0.125 -> 0.13)."""
    return math.floor(value * 100 + 0.5) / 100
