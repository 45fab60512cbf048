"""
Quantities: numeric values carrying physical dimensions.

All arithmetic between quantities, bare numbers and Dimensions objects goes
through ``AbstractQuantity``; concrete kinds only declare which bare values
they hold and where they sit in the promotion order:

- ``RealQuantity``: real numbers
- ``Quantity``: any ``numbers.Number`` (the default kind)
- ``GenericQuantity``: any object, e.g. numpy arrays

Combining two kinds (or two exponent representations) first promotes both
operands to the common representation, then retries the operation once.
"""

import math
import numbers
import operator
from typing import Any, Callable, Optional, Tuple, Type

from .dimensions import Dimensions
from .errors import DimensionError, DimensionMismatch
from .exponents import promote_exponent_type, rationalize
from .rounding import RoundingMode, divide_rounded


class Dimensioned:
    """Base for every object carrying a single shared Dimensions value."""
    __slots__ = ()


def ustrip(x):
    """Return the raw numeric value (or array) of ``x``, discarding its dimensions."""
    if isinstance(x, Dimensioned):
        return x.value
    return x


def dimension(x) -> Dimensions:
    """Return the Dimensions of ``x``; bare numbers are dimensionless."""
    if isinstance(x, Dimensioned):
        return x.dimensions
    return Dimensions()


class AbstractQuantity(Dimensioned):
    """
    A physical quantity with value and dimensions.

    Parameters
    ----------
    value : number or object
        Numeric value; must be an instance of the kind's ``value_types``
    dimensions : Dimensions or quantity, optional
        Dimensions of the value. A quantity contributes its dimensions only.
    **exponents
        Alternatively, exponent keywords passed to ``Dimensions``
        (``length=1, time=-1``, ``exponent_type=...``)
    """

    __slots__ = ("_value", "_dimensions")
    value_types: Tuple[type, ...] = (object,)
    kind_rank = 0

    # Make numpy defer to our reflected operators instead of broadcasting over us
    __array_ufunc__ = None

    def __init__(self, value, dimensions=None, **exponents):
        if isinstance(value, Dimensioned):
            raise TypeError(f"Cannot wrap {type(value).__name__} in {type(self).__name__}")
        if not isinstance(value, self.value_types):
            expected = " or ".join(t.__name__ for t in self.value_types)
            raise TypeError(
                f"{type(self).__name__} requires a value of type {expected}, "
                f"got {type(value).__name__}"
            )
        if dimensions is not None and exponents:
            raise TypeError("Pass either dimensions or exponent keywords, not both")
        if isinstance(dimensions, Dimensioned):
            dimensions = dimensions.dimensions
        elif dimensions is None:
            dimensions = Dimensions(**exponents)
        elif not isinstance(dimensions, Dimensions):
            raise TypeError(f"Expected Dimensions, got {type(dimensions).__name__}")
        self._value = value
        self._dimensions = dimensions

    @classmethod
    def _new(cls, value, dimensions: Dimensions) -> "AbstractQuantity":
        quantity = object.__new__(cls)
        quantity._value = value
        quantity._dimensions = dimensions
        return quantity

    @property
    def value(self):
        return self._value

    @property
    def dimensions(self) -> Dimensions:
        return self._dimensions

    @property
    def magnitude(self):
        """Return the numerical value without dimensions."""
        return self._value

    def is_dimensionless(self) -> bool:
        return self._dimensions.is_dimensionless()

    def check_dimensions(self, expected: Dimensions) -> bool:
        """Check if quantity has expected dimensions."""
        return self._dimensions == expected

    @classmethod
    def _is_bare(cls, other) -> bool:
        return not isinstance(other, (Dimensioned, Dimensions)) and isinstance(other, cls.value_types)

    # Multiplicative operators: always succeed, dimensions combine

    def __mul__(self, other):
        if isinstance(other, AbstractQuantity):
            if _needs_promotion(self, other):
                return operator.mul(*promote(self, other))
            return new_quantity(type(self), self._value * other._value, self._dimensions * other._dimensions)
        if isinstance(other, Dimensions):
            return new_quantity(type(self), self._value, self._dimensions * other)
        if self._is_bare(other):
            return new_quantity(type(self), self._value * other, self._dimensions)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Dimensions):
            return new_quantity(type(self), self._value, other * self._dimensions)
        if self._is_bare(other):
            return new_quantity(type(self), other * self._value, self._dimensions)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, AbstractQuantity):
            if _needs_promotion(self, other):
                return operator.truediv(*promote(self, other))
            return new_quantity(type(self), self._value / other._value, self._dimensions / other._dimensions)
        if isinstance(other, Dimensions):
            return new_quantity(type(self), self._value, self._dimensions / other)
        if self._is_bare(other):
            return new_quantity(type(self), self._value / other, self._dimensions)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, Dimensions):
            return new_quantity(type(self), 1 / self._value, other / self._dimensions)
        if self._is_bare(other):
            return new_quantity(type(self), other / self._value, self._dimensions.negate())
        return NotImplemented

    # Additive operators: dimensions must agree

    def _additive(self, other, op: Callable, reflected: bool = False):
        if isinstance(other, AbstractQuantity):
            if _needs_promotion(self, other):
                return op(*promote(self, other))
            if self._dimensions != other._dimensions:
                raise DimensionMismatch(self, other)
            return new_quantity(type(self), op(self._value, other._value), self._dimensions)
        if self._is_bare(other):
            if not self._dimensions.is_dimensionless():
                raise DimensionMismatch(other, self) if reflected else DimensionMismatch(self, other)
            value = op(other, self._value) if reflected else op(self._value, other)
            return new_quantity(type(self), value, self._dimensions)
        return NotImplemented

    def __add__(self, other):
        return self._additive(other, operator.add)

    def __radd__(self, other):
        return self._additive(other, operator.add, reflected=True)

    def __sub__(self, other):
        return self._additive(other, operator.sub)

    def __rsub__(self, other):
        return self._additive(other, operator.sub, reflected=True)

    def __neg__(self):
        return new_quantity(type(self), -self._value, self._dimensions)

    def __pos__(self):
        return new_quantity(type(self), +self._value, self._dimensions)

    def __abs__(self):
        return new_quantity(type(self), abs(self._value), self._dimensions)

    # Integer division and remainder

    def __floordiv__(self, other):
        if isinstance(other, AbstractQuantity) or self._is_bare(other):
            return div(self, other, RoundingMode.DOWN)
        return NotImplemented

    def __rfloordiv__(self, other):
        if self._is_bare(other):
            return div(other, self, RoundingMode.DOWN)
        return NotImplemented

    def __mod__(self, other):
        if isinstance(other, AbstractQuantity) or self._is_bare(other):
            return apply_first_operand(operator.mod, self, other)
        return NotImplemented

    def __rmod__(self, other):
        if self._is_bare(other):
            return apply_first_operand(operator.mod, other, self)
        return NotImplemented

    def __divmod__(self, other):
        if isinstance(other, AbstractQuantity) or self._is_bare(other):
            return self // other, self % other
        return NotImplemented

    def __rdivmod__(self, other):
        if self._is_bare(other):
            return other // self, other % self
        return NotImplemented

    # Powers

    def __pow__(self, exponent, modulo=None):
        if modulo is not None:
            return NotImplemented
        if isinstance(exponent, AbstractQuantity):
            if not exponent.is_dimensionless():
                raise DimensionError(exponent)
            exponent = exponent.value
        if isinstance(exponent, numbers.Integral):
            return _pow_int(self, exponent)
        if isinstance(exponent, numbers.Real) or hasattr(exponent, "to_fraction"):
            return _pow(self, exponent)
        return NotImplemented

    def __rpow__(self, base):
        if not self._is_bare(base):
            return NotImplemented
        if not self.is_dimensionless():
            raise DimensionError(self)
        return base ** self._value

    # Rounding protocol (round(), math.floor(), math.ceil(), math.trunc())

    def __round__(self, ndigits: Optional[int] = None):
        value = round(self._value) if ndigits is None else round(self._value, ndigits)
        return new_quantity(type(self), value, self._dimensions)

    def __floor__(self):
        return new_quantity(type(self), math.floor(self._value), self._dimensions)

    def __ceil__(self):
        return new_quantity(type(self), math.ceil(self._value), self._dimensions)

    def __trunc__(self):
        return new_quantity(type(self), math.trunc(self._value), self._dimensions)

    # Comparison

    def __eq__(self, other):
        if isinstance(other, AbstractQuantity):
            return self._dimensions == other._dimensions and self._value == other._value
        if self._is_bare(other):
            return self._dimensions.is_dimensionless() and self._value == other
        return NotImplemented

    def __ne__(self, other):
        if isinstance(other, AbstractQuantity):
            return self._dimensions != other._dimensions or self._value != other._value
        if self._is_bare(other):
            return not self._dimensions.is_dimensionless() or self._value != other
        return NotImplemented

    def _ordered(self, other, op: Callable):
        if isinstance(other, AbstractQuantity):
            if self._dimensions != other._dimensions:
                raise DimensionMismatch(self, other)
            return op(self._value, other._value)
        if self._is_bare(other):
            if not self._dimensions.is_dimensionless():
                raise DimensionMismatch(self, other)
            return op(self._value, other)
        return NotImplemented

    def __lt__(self, other):
        return self._ordered(other, operator.lt)

    def __le__(self, other):
        return self._ordered(other, operator.le)

    def __gt__(self, other):
        return self._ordered(other, operator.gt)

    def __ge__(self, other):
        return self._ordered(other, operator.ge)

    def __hash__(self) -> int:
        if self._dimensions.is_dimensionless():
            return hash(self._value)
        return hash((self._value, self._dimensions))

    # Conversion to bare numbers is only allowed when dimensionless

    def _dimensionless_value(self):
        if not self._dimensions.is_dimensionless():
            raise DimensionError(self)
        return self._value

    def __float__(self) -> float:
        return float(self._dimensionless_value())

    def __int__(self) -> int:
        return int(self._dimensionless_value())

    def __complex__(self) -> complex:
        return complex(self._dimensionless_value())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r}, {self._dimensions!r})"

    def __str__(self) -> str:
        return f"{self._value} {self._dimensions}".rstrip()


class RealQuantity(AbstractQuantity):
    """Quantity restricted to real values."""
    __slots__ = ()
    value_types = (numbers.Real,)
    kind_rank = 0


class Quantity(AbstractQuantity):
    """Quantity holding any scalar number (int, float, complex, Fraction, numpy scalars)."""
    __slots__ = ()
    value_types = (numbers.Number,)
    kind_rank = 1


class GenericQuantity(AbstractQuantity):
    """Quantity holding any value type, e.g. numpy arrays or user-defined numbers."""
    __slots__ = ()
    value_types = (object,)
    kind_rank = 2


def new_quantity(kind: Type[AbstractQuantity], value, dimensions: Dimensions) -> AbstractQuantity:
    """Build a quantity of ``kind`` without validating the value type."""
    return kind._new(value, dimensions)


def promote_kind(left: Type[AbstractQuantity], right: Type[AbstractQuantity]) -> Type[AbstractQuantity]:
    """Common quantity kind of ``left`` and ``right``."""
    if left is right:
        return left
    if left.kind_rank == right.kind_rank:
        raise TypeError(f"No promotion rule between {left.__name__} and {right.__name__}")
    return left if left.kind_rank > right.kind_rank else right


def promote(left: AbstractQuantity, right: AbstractQuantity) -> Tuple[AbstractQuantity, AbstractQuantity]:
    """Convert two quantities to their common kind and exponent representation."""
    kind = promote_kind(type(left), type(right))
    exponent_type = promote_exponent_type(left._dimensions.exponent_type, right._dimensions.exponent_type)
    return (
        new_quantity(kind, left._value, left._dimensions.convert(exponent_type)),
        new_quantity(kind, right._value, right._dimensions.convert(exponent_type)),
    )


def _needs_promotion(left: AbstractQuantity, right: AbstractQuantity) -> bool:
    return (
        type(left) is not type(right)
        or left._dimensions.exponent_type is not right._dimensions.exponent_type
    )


def _as_value_exponent(exponent):
    """Exponent applied to the numeric value, matching the rationalized dimension exponent."""
    if isinstance(exponent, int):
        return exponent
    if exponent.denominator == 1:
        return int(exponent.numerator)
    return float(exponent)


def _pow_int(q: AbstractQuantity, n: numbers.Integral) -> AbstractQuantity:
    n = int(n)
    return new_quantity(type(q), q.value ** n, q.dimensions ** n)


def _pow(q: AbstractQuantity, exponent) -> AbstractQuantity:
    dimension_exponent = rationalize(q.dimensions.exponent_type, exponent)
    value_exponent = _as_value_exponent(dimension_exponent)
    value = q.value ** value_exponent
    if not isinstance(value, type(q).value_types):
        # e.g. a negative real base with a fractional exponent turns complex
        raise ValueError(
            f"{q.value!r} ** {value_exponent} = {value!r} cannot be held by {type(q).__name__}"
        )
    return new_quantity(type(q), value, q.dimensions.scale(dimension_exponent))


def div(x, y, mode: RoundingMode = RoundingMode.TO_ZERO):
    """
    Integer division with dimensions.

    Parameters
    ----------
    x, y : quantity or number
        Dividend and divisor. The result dimension follows ``/``.
    mode : RoundingMode
        Rounding applied to the stripped quotient (default: toward zero)
    """
    if isinstance(x, AbstractQuantity) and isinstance(y, AbstractQuantity):
        x, y = promote(x, y) if _needs_promotion(x, y) else (x, y)
        return new_quantity(type(x), divide_rounded(x.value, y.value, mode), x.dimensions / y.dimensions)
    if isinstance(x, AbstractQuantity):
        return new_quantity(type(x), divide_rounded(x.value, y, mode), x.dimensions)
    if isinstance(y, AbstractQuantity):
        return new_quantity(type(y), divide_rounded(x, y.value, mode), y.dimensions.negate())
    return divide_rounded(x, y, mode)


def apply_first_operand(func: Callable, x, y):
    """
    Apply a binary value function keeping only the first operand's dimensions.

    The second operand's dimensions are ignored, not checked: ``func`` treats
    ``x`` as the magnitude and only reads the sign or period from ``y``.
    With a bare ``x`` the result is a bare number.
    """
    if isinstance(x, AbstractQuantity) and isinstance(y, AbstractQuantity):
        x, y = promote(x, y) if _needs_promotion(x, y) else (x, y)
        return new_quantity(type(x), func(x.value, y.value), x.dimensions)
    if isinstance(x, AbstractQuantity):
        return new_quantity(type(x), func(x.value, y), x.dimensions)
    if isinstance(y, AbstractQuantity):
        return func(x, y.value)
    return func(x, y)
