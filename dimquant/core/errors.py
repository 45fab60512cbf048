"""
Exceptions and warning categories raised by the dimension algebra.
"""

from typing import Any, Optional


class DimensionalError(Exception):
    """Raised when dimensional analysis fails."""
    pass


def _dimensions_of(x: Any):
    from .quantity import dimension
    return dimension(x)


class DimensionMismatch(DimensionalError):
    """Raised when two operands that must share a dimension do not."""

    def __init__(self, left: Any, right: Any):
        self.left = left
        self.right = right
        self.left_dimensions = _dimensions_of(left)
        self.right_dimensions = _dimensions_of(right)
        super().__init__(
            f"{left} and {right} have incompatible dimensions "
            f"({self.left_dimensions!r} vs {self.right_dimensions!r})"
        )


class DimensionError(DimensionalError):
    """Raised when a dimensionless-only operation receives a dimensioned input."""

    def __init__(self, quantity: Any):
        self.quantity = quantity
        super().__init__(f"{quantity} is not dimensionless")


class RationalizeError(DimensionalError):
    """Raised when an exponent cannot be represented by an exponent type."""

    def __init__(self, exponent: Any, exponent_type: type, limits: str,
                 detail: Optional[str] = None):
        self.exponent = exponent
        self.exponent_type = exponent_type
        self.limits = limits
        message = (
            f"Cannot represent exponent {exponent!r} as "
            f"{getattr(exponent_type, '__name__', exponent_type)} ({limits})"
        )
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidAssignment(DimensionalError):
    """Raised when a dimensioned value is written into a QuantityArray slot."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Cannot set {value} into a QuantityArray; strip it with `ustrip` first. "
            "Use `dimension(array) == dimension(value)` to verify that the dimensions "
            "match. This is not done automatically as it would be slow."
        )


class RationalizeWarning(UserWarning):
    """An exponent was rounded onto the grid of a fixed-denominator type."""
    pass


class DimensionStrippedWarning(UserWarning):
    """Dimensions were discarded while converting to a plain array."""
    pass
