"""
Exponent representations for Dimensions.

A Dimensions object stores its seven exponents in one representation ``R``.
Three representations are supported:

- ``int``: integers only
- ``FixedRational`` (and any ``fixed_rational_type(d)``): multiples of ``1/d``
- ``fractions.Fraction``: unbounded exact rationals

This module converts arbitrary exponent requests into a representation
(exactly, or by rationalizing a float), describes each representation's
limits, and picks the common representation of two Dimensions.
"""

import math
import numbers
import warnings
from fractions import Fraction
from typing import Optional

from ..config import MAX_DENOMINATOR, RATIONALIZE_TOLERANCE
from .errors import RationalizeError, RationalizeWarning
from .fixed_rational import FixedRational


def _is_fixed_rational_type(exponent_type: type) -> bool:
    return isinstance(exponent_type, type) and issubclass(exponent_type, FixedRational)


def check_exponent_type(exponent_type: type) -> type:
    """Validate that ``exponent_type`` is a supported representation."""
    if exponent_type is int or exponent_type is Fraction or _is_fixed_rational_type(exponent_type):
        return exponent_type
    raise TypeError(
        f"Unsupported exponent type {exponent_type!r}; "
        "expected int, fractions.Fraction or a FixedRational type"
    )


def exponent_limits(exponent_type: type, max_denominator: Optional[int] = None) -> str:
    """Human-readable description of what ``exponent_type`` can represent."""
    if exponent_type is int:
        return "integers only"
    if exponent_type is Fraction:
        return (
            f"rationals, floats matched with denominator <= {max_denominator or MAX_DENOMINATOR}"
            " or stored exactly"
        )
    return exponent_type.limits()


def convert_exponent(exponent_type: type, value):
    """Convert ``value`` to ``exponent_type`` exactly, or raise RationalizeError."""
    if type(value) is exponent_type:
        return value

    if exponent_type is int:
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, (FixedRational, numbers.Rational)):
            if value.denominator == 1:
                return int(value.numerator)
        elif isinstance(value, numbers.Real) and math.isfinite(value) and float(value).is_integer():
            return int(value)
        raise RationalizeError(value, int, exponent_limits(int))

    if exponent_type is Fraction:
        if isinstance(value, FixedRational):
            return value.to_fraction()
        if isinstance(value, numbers.Rational):
            return Fraction(value.numerator, value.denominator)
        if isinstance(value, numbers.Real) and math.isfinite(value):
            return Fraction(float(value))
        raise RationalizeError(value, Fraction, exponent_limits(Fraction))

    return check_exponent_type(exponent_type)(value)


def rationalize(exponent_type: type, value, max_denominator: Optional[int] = None,
                tolerance: Optional[float] = None):
    """
    Turn an exponent request into the exact value ``exponent_type`` can hold.

    Parameters
    ----------
    exponent_type : type
        Target representation (int, Fraction or a FixedRational type)
    value : real number
        Requested exponent. Integers and exact rationals are converted exactly;
        floats are rationalized.
    max_denominator : int, optional
        Largest denominator tried for floats when the target is Fraction. Floats
        with no such fraction within ``tolerance`` are stored exactly instead.
    tolerance : float, optional
        Largest accepted distance between ``value`` and its rational stand-in

    Returns
    -------
    exponent_type
        The representable exponent

    Raises
    ------
    RationalizeError
        If the exponent cannot be represented
    """
    check_exponent_type(exponent_type)
    if type(value) is exponent_type:
        return value
    if isinstance(value, (numbers.Rational, FixedRational)):
        return convert_exponent(exponent_type, value)
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Exponent must be a real number, got {type(value).__name__}")

    max_denominator = max_denominator or MAX_DENOMINATOR
    tolerance = RATIONALIZE_TOLERANCE if tolerance is None else tolerance
    limits = exponent_limits(exponent_type, max_denominator)
    x = float(value)
    if not math.isfinite(x):
        raise RationalizeError(value, exponent_type, limits, "not a finite number")

    if exponent_type is int:
        if x.is_integer():
            return int(x)
        raise RationalizeError(value, int, limits)

    if exponent_type is Fraction:
        if x.is_integer():
            return Fraction(int(x))
        candidate = Fraction(x).limit_denominator(max_denominator)
        if abs(float(candidate) - x) > tolerance:
            # No short fraction is close enough; the float itself is an exact rational
            return Fraction(x)
        return candidate

    rounded = exponent_type.round_from(x)
    if abs(float(rounded) - x) > tolerance:
        warnings.warn(
            f"Exponent {value!r} rounded to {rounded} ({limits})",
            RationalizeWarning,
            stacklevel=3,
        )
    return rounded


_RANKS = {int: 0, Fraction: 2}


def promote_exponent_type(left: type, right: type) -> type:
    """Common representation able to hold exponents of both ``left`` and ``right``."""
    if left is right:
        return left
    left_rank = 1 if _is_fixed_rational_type(left) else _RANKS[check_exponent_type(left)]
    right_rank = 1 if _is_fixed_rational_type(right) else _RANKS[check_exponent_type(right)]
    if left_rank == right_rank:
        # Two fixed grids with different denominators
        return Fraction
    return left if left_rank > right_rank else right
