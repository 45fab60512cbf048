"""
Fixed-denominator rational numbers used as dimension exponents.

A ``FixedRational`` stores a single integer numerator over a denominator that
belongs to the class, so arithmetic between two values of the same class is
plain integer arithmetic. The default class uses ``DEFAULT_DENOMINATOR``;
``fixed_rational_type(d)`` builds the class for any other denominator.
"""

import math
import numbers
from fractions import Fraction
from functools import lru_cache, total_ordering
from typing import Union

from ..config import DEFAULT_DENOMINATOR
from .errors import RationalizeError


@total_ordering
class FixedRational:
    """Rational number ``numerator / DENOMINATOR`` with a class-wide denominator.

    Construction is exact: values that do not fall on the grid raise
    ``RationalizeError``. Use ``round_from`` to snap an arbitrary real onto it.
    """

    __slots__ = ("_scaled",)
    DENOMINATOR = DEFAULT_DENOMINATOR

    def __init__(self, value: Union[numbers.Real, "FixedRational"] = 0):
        self._scaled = self._scaled_from(value)

    @classmethod
    def _from_scaled(cls, scaled: int) -> "FixedRational":
        obj = object.__new__(cls)
        obj._scaled = scaled
        return obj

    @classmethod
    def limits(cls) -> str:
        return f"multiples of 1/{cls.DENOMINATOR}"

    @classmethod
    def _scaled_from(cls, value) -> int:
        if isinstance(value, FixedRational):
            exact = value.to_fraction() * cls.DENOMINATOR
        elif isinstance(value, numbers.Integral):
            return int(value) * cls.DENOMINATOR
        elif isinstance(value, numbers.Rational):
            exact = Fraction(value.numerator, value.denominator) * cls.DENOMINATOR
        elif isinstance(value, numbers.Real):
            if not math.isfinite(value):
                raise RationalizeError(value, cls, cls.limits(), "not a finite number")
            exact = Fraction(float(value)) * cls.DENOMINATOR
        else:
            raise TypeError(f"Cannot build {cls.__name__} from {type(value).__name__}")
        if exact.denominator != 1:
            raise RationalizeError(value, cls, cls.limits())
        return exact.numerator

    @classmethod
    def round_from(cls, value: numbers.Real) -> "FixedRational":
        """Nearest grid point to ``value`` (ties to even)."""
        if isinstance(value, FixedRational) or isinstance(value, numbers.Rational):
            exact = Fraction(value.numerator, value.denominator) * cls.DENOMINATOR
        else:
            if not math.isfinite(value):
                raise RationalizeError(value, cls, cls.limits(), "not a finite number")
            exact = Fraction(float(value)) * cls.DENOMINATOR
        return cls._from_scaled(round(exact))

    # Rational interface

    @property
    def numerator(self) -> int:
        return self.to_fraction().numerator

    @property
    def denominator(self) -> int:
        return self.to_fraction().denominator

    def to_fraction(self) -> Fraction:
        return Fraction(self._scaled, self.DENOMINATOR)

    def is_integer(self) -> bool:
        return self._scaled % self.DENOMINATOR == 0

    def _same_grid(self, other) -> bool:
        return type(other) is type(self)

    # Arithmetic

    def __add__(self, other):
        if self._same_grid(other):
            return self._from_scaled(self._scaled + other._scaled)
        if isinstance(other, numbers.Integral):
            return self._from_scaled(self._scaled + int(other) * self.DENOMINATOR)
        if isinstance(other, (FixedRational, numbers.Rational)):
            return self.to_fraction() + _as_fraction(other)
        if isinstance(other, numbers.Real):
            return float(self) + other
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if self._same_grid(other):
            return self._from_scaled(self._scaled - other._scaled)
        if isinstance(other, numbers.Integral):
            return self._from_scaled(self._scaled - int(other) * self.DENOMINATOR)
        if isinstance(other, (FixedRational, numbers.Rational)):
            return self.to_fraction() - _as_fraction(other)
        if isinstance(other, numbers.Real):
            return float(self) - other
        return NotImplemented

    def __rsub__(self, other):
        return (-self).__add__(other)

    def __neg__(self) -> "FixedRational":
        return self._from_scaled(-self._scaled)

    def __pos__(self) -> "FixedRational":
        return self

    def __abs__(self) -> "FixedRational":
        return self._from_scaled(abs(self._scaled))

    def __mul__(self, other):
        if self._same_grid(other):
            product = Fraction(self._scaled * other._scaled, self.DENOMINATOR)
            if product.denominator != 1:
                raise RationalizeError(
                    self.to_fraction() * other.to_fraction(), type(self), self.limits(),
                    f"product of {self} and {other} is off the grid",
                )
            return self._from_scaled(product.numerator)
        if isinstance(other, numbers.Integral):
            return self._from_scaled(self._scaled * int(other))
        if isinstance(other, (FixedRational, numbers.Rational)):
            return self.to_fraction() * _as_fraction(other)
        if isinstance(other, numbers.Real):
            return float(self) * other
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, (FixedRational, numbers.Rational)):
            quotient = self.to_fraction() / _as_fraction(other)
            return type(self)(quotient)
        if isinstance(other, numbers.Real):
            return float(self) / other
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, numbers.Rational):
            return type(self)(_as_fraction(other) / self.to_fraction())
        if isinstance(other, numbers.Real):
            return other / float(self)
        return NotImplemented

    # Comparison

    def __eq__(self, other) -> bool:
        if self._same_grid(other):
            return self._scaled == other._scaled
        if isinstance(other, numbers.Integral):
            return self._scaled == int(other) * self.DENOMINATOR
        if isinstance(other, (FixedRational, numbers.Rational)):
            return self.to_fraction() == _as_fraction(other)
        if isinstance(other, numbers.Real):
            return float(self) == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        if self._same_grid(other):
            return self._scaled < other._scaled
        if isinstance(other, (FixedRational, numbers.Rational)):
            return self.to_fraction() < _as_fraction(other)
        if isinstance(other, numbers.Real):
            return float(self) < other
        return NotImplemented

    def __hash__(self) -> int:
        # Agrees with hash() of the equal int / Fraction
        return hash(self.to_fraction())

    def __bool__(self) -> bool:
        return self._scaled != 0

    def __float__(self) -> float:
        return self._scaled / self.DENOMINATOR

    def __int__(self) -> int:
        return int(self.to_fraction())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

    def __str__(self) -> str:
        return str(self.to_fraction())


def _as_fraction(value) -> Fraction:
    if isinstance(value, FixedRational):
        return value.to_fraction()
    return Fraction(value.numerator, value.denominator)


@lru_cache(maxsize=None)
def fixed_rational_type(denominator: int) -> type:
    """Return the FixedRational class with the given denominator."""
    if not isinstance(denominator, numbers.Integral) or denominator <= 0:
        raise ValueError(f"denominator must be a positive integer, got {denominator!r}")
    if denominator == FixedRational.DENOMINATOR:
        return FixedRational
    return type(
        f"FixedRational{denominator}",
        (FixedRational,),
        {"__slots__": (), "DENOMINATOR": int(denominator)},
    )
