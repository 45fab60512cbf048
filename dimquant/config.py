"""
Package-wide defaults.

Every value here can be overridden per call through the matching keyword
argument (``exponent_type=``, ``max_denominator=``, ``tolerance=``).
"""

# 2^4 * 3^2 * 5^2 * 7, so every unit fraction 1/2 ... 1/10 lies on the grid
DEFAULT_DENOMINATOR = 25200

# Largest denominator tried when a float exponent is turned into a Fraction
MAX_DENOMINATOR = 10000

# Largest accepted distance between a requested exponent and its rational stand-in
RATIONALIZE_TOLERANCE = 1e-9


def default_exponent_type() -> type:
    """Exponent representation used when a Dimensions is built without one."""
    from .core.fixed_rational import FixedRational
    return FixedRational
