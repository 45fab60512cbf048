"""
Rounding modes and value-level rounded division.

These helpers work on plain numbers and numpy arrays alike; the quantity
layer strips dimensions before calling them.
"""

from enum import Enum

import numpy as np


class RoundingMode(Enum):
    """How a quotient or value is rounded to an integer."""
    TO_ZERO = "to_zero"
    DOWN = "down"
    UP = "up"
    NEAREST = "nearest"
    NEAREST_TIES_AWAY = "nearest_ties_away"


def divide_rounded(x, y, mode: RoundingMode = RoundingMode.TO_ZERO):
    """
    Integer quotient of ``x / y`` rounded according to ``mode``.

    Built on floor division so integer inputs stay integers.
    """
    quotient = x // y
    if mode is RoundingMode.DOWN:
        return quotient
    remainder = x - quotient * y  # same sign as y, |remainder| < |y|
    inexact = remainder != 0
    if mode is RoundingMode.UP:
        return quotient + inexact
    if mode is RoundingMode.TO_ZERO:
        return quotient + (inexact & ((x < 0) != (y < 0)))
    twice = abs(2 * remainder)
    above_half = twice > abs(y)
    tie = twice == abs(y)
    if mode is RoundingMode.NEAREST:
        return quotient + (above_half | (tie & (quotient % 2 == 1)))
    if mode is RoundingMode.NEAREST_TIES_AWAY:
        return quotient + (above_half | (tie & ((x < 0) == (y < 0))))
    raise ValueError(f"Unknown rounding mode: {mode}")


def round_value(x, mode: RoundingMode = RoundingMode.NEAREST):
    """Round ``x`` to an integral value according to ``mode``."""
    if mode is RoundingMode.NEAREST:
        return np.rint(x)
    if mode is RoundingMode.TO_ZERO:
        return np.trunc(x)
    if mode is RoundingMode.DOWN:
        return np.floor(x)
    if mode is RoundingMode.UP:
        return np.ceil(x)
    if mode is RoundingMode.NEAREST_TIES_AWAY:
        return np.copysign(np.floor(np.abs(x) + 0.5), x)
    raise ValueError(f"Unknown rounding mode: {mode}")
