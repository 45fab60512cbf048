"""
Elementary functions on quantities.

Each family applies one fixed rule to the dimensions:

| Family | Dimensions |
|---|---|
| abs, real, imag, conj, round, floor, ceil, trunc, ... | unchanged |
| sqrt / cbrt | scaled by 1/2 / 1/3 (rationalized) |
| inv | negated |
| abs2 | doubled |
| trigonometric, logarithmic, exponential | must be dimensionless, bare result |
| copysign, flipsign, mod | first operand's, second ignored |
| ldexp(q, n) | unchanged |

Every function also accepts bare numbers and ``QuantityArray`` inputs.
"""

import numbers
import operator
from fractions import Fraction
from functools import wraps
from typing import Callable, Optional

import numpy as np
from scipy import special

from ..arrays.quantity_array import lift, lower
from ..core.dimensions import Dimensions
from ..core.errors import DimensionError, DimensionMismatch
from ..core.quantity import (
    AbstractQuantity,
    apply_first_operand,
    div as _div,
    new_quantity,
    promote,
)
from ..core.rounding import RoundingMode, round_value


def _array_aware(func: Callable) -> Callable:
    """Let ``func`` take QuantityArray arguments by viewing them as quantities."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        return lower(func(*(lift(a) for a in args), **kwargs))
    return wrapper


def _same_dimensions(name: str, func: Callable) -> Callable:
    def apply(q, *args, **kwargs):
        if isinstance(q, AbstractQuantity):
            return new_quantity(type(q), func(q.value, *args, **kwargs), q.dimensions)
        return func(q, *args, **kwargs)
    apply.__name__ = apply.__qualname__ = name
    apply.__doc__ = f"``{name}`` of the value; dimensions are unchanged."
    return _array_aware(apply)


def _dimensionless_only(name: str, func: Callable) -> Callable:
    def apply(q):
        if isinstance(q, AbstractQuantity):
            if not q.dimensions.is_dimensionless():
                raise DimensionError(q)
            return func(q.value)
        return func(q)
    apply.__name__ = apply.__qualname__ = name
    apply.__doc__ = f"``{name}`` of a dimensionless quantity, returned as a bare number."
    return _array_aware(apply)


def _in_degrees(func: Callable) -> Callable:
    return lambda x: np.degrees(func(x))


# Require dimensionless input

sin = _dimensionless_only("sin", np.sin)
cos = _dimensionless_only("cos", np.cos)
tan = _dimensionless_only("tan", np.tan)
sinh = _dimensionless_only("sinh", np.sinh)
cosh = _dimensionless_only("cosh", np.cosh)
tanh = _dimensionless_only("tanh", np.tanh)
asin = _dimensionless_only("asin", np.arcsin)
acos = _dimensionless_only("acos", np.arccos)
asinh = _dimensionless_only("asinh", np.arcsinh)
acosh = _dimensionless_only("acosh", np.arccosh)
atanh = _dimensionless_only("atanh", np.arctanh)
sec = _dimensionless_only("sec", lambda x: 1 / np.cos(x))
csc = _dimensionless_only("csc", lambda x: 1 / np.sin(x))
cot = _dimensionless_only("cot", lambda x: 1 / np.tan(x))
asec = _dimensionless_only("asec", lambda x: np.arccos(1 / x))
acsc = _dimensionless_only("acsc", lambda x: np.arcsin(1 / x))
acot = _dimensionless_only("acot", lambda x: np.arctan(1 / x))
sech = _dimensionless_only("sech", lambda x: 1 / np.cosh(x))
csch = _dimensionless_only("csch", lambda x: 1 / np.sinh(x))
coth = _dimensionless_only("coth", lambda x: 1 / np.tanh(x))
asech = _dimensionless_only("asech", lambda x: np.arccosh(1 / x))
acsch = _dimensionless_only("acsch", lambda x: np.arcsinh(1 / x))
acoth = _dimensionless_only("acoth", lambda x: np.arctanh(1 / x))
sinc = _dimensionless_only("sinc", np.sinc)

sind = _dimensionless_only("sind", special.sindg)
cosd = _dimensionless_only("cosd", special.cosdg)
tand = _dimensionless_only("tand", special.tandg)
cotd = _dimensionless_only("cotd", special.cotdg)
secd = _dimensionless_only("secd", lambda x: 1 / special.cosdg(x))
cscd = _dimensionless_only("cscd", lambda x: 1 / special.sindg(x))
asind = _dimensionless_only("asind", _in_degrees(np.arcsin))
acosd = _dimensionless_only("acosd", _in_degrees(np.arccos))
asecd = _dimensionless_only("asecd", _in_degrees(lambda x: np.arccos(1 / x)))
acscd = _dimensionless_only("acscd", _in_degrees(lambda x: np.arcsin(1 / x)))
acotd = _dimensionless_only("acotd", _in_degrees(lambda x: np.arctan(1 / x)))
rad2deg = _dimensionless_only("rad2deg", np.rad2deg)
deg2rad = _dimensionless_only("deg2rad", np.deg2rad)

log = _dimensionless_only("log", np.log)
log2 = _dimensionless_only("log2", np.log2)
log10 = _dimensionless_only("log10", np.log10)
log1p = _dimensionless_only("log1p", np.log1p)
exp = _dimensionless_only("exp", np.exp)
exp2 = _dimensionless_only("exp2", np.exp2)
expm1 = _dimensionless_only("expm1", np.expm1)
exp10 = _dimensionless_only("exp10", special.exp10)
frexp = _dimensionless_only("frexp", np.frexp)
exponent = _dimensionless_only("exponent", lambda x: np.frexp(x)[1] - 1)

_atan = _dimensionless_only("atan", np.arctan)
_atand = _dimensionless_only("atand", _in_degrees(np.arctan))


def _two_argument(func: Callable, y, x):
    if isinstance(y, AbstractQuantity) and isinstance(x, AbstractQuantity):
        if y.dimensions != x.dimensions:
            raise DimensionMismatch(y, x)
        y, x = promote(y, x) if type(y) is not type(x) else (y, x)
        return func(y.value, x.value)
    if isinstance(y, AbstractQuantity):
        if not y.dimensions.is_dimensionless():
            raise DimensionError(y)
        return func(y.value, x)
    if isinstance(x, AbstractQuantity):
        if not x.dimensions.is_dimensionless():
            raise DimensionError(x)
        return func(y, x.value)
    return func(y, x)


@_array_aware
def atan(y, x=None):
    """
    Arc tangent.

    With one argument the input must be dimensionless. With two, ``y`` and
    ``x`` must share dimensions (or both be dimensionless when mixed with a
    bare number) and the quadrant-aware ``arctan2(y, x)`` is returned.
    """
    if x is None:
        return _atan(y)
    return _two_argument(np.arctan2, y, x)


@_array_aware
def atand(y, x=None):
    """Arc tangent in degrees; see ``atan``."""
    if x is None:
        return _atand(y)
    return np.degrees(_two_argument(np.arctan2, y, x))


@_array_aware
def atan2(y, x):
    """Quadrant-aware arc tangent of ``y / x``; both share dimensions."""
    return _two_argument(np.arctan2, y, x)


# Same dimensions as input

abs = _same_dimensions("abs", operator.abs)
real = _same_dimensions("real", np.real)
imag = _same_dimensions("imag", np.imag)
conj = _same_dimensions("conj", np.conj)
adjoint = _same_dimensions("adjoint", lambda x: np.conj(x).T if np.ndim(x) > 1 else np.conj(x))
identity = _same_dimensions("identity", lambda x: x)
positive = _same_dimensions("positive", operator.pos)
nextfloat = _same_dimensions("nextfloat", lambda x: np.nextafter(x, np.inf))
prevfloat = _same_dimensions("prevfloat", lambda x: np.nextafter(x, -np.inf))
significand = _same_dimensions("significand", lambda x: 2 * np.frexp(x)[0])


def _to_dtype(value, dtype):
    if dtype is None:
        return value
    if np.ndim(value) == 0:
        return dtype(value)
    return np.asarray(value).astype(dtype)


@_array_aware
def round(q, mode: RoundingMode = RoundingMode.NEAREST, dtype: Optional[type] = None):
    """
    Round the value of ``q`` to an integral value, keeping its dimensions.

    Parameters
    ----------
    q : quantity or number
    mode : RoundingMode
        Rounding rule (default: nearest, ties to even)
    dtype : type, optional
        Integer type of the result, e.g. ``int`` or ``np.int64``
    """
    if isinstance(q, AbstractQuantity):
        return new_quantity(type(q), _to_dtype(round_value(q.value, mode), dtype), q.dimensions)
    return _to_dtype(round_value(q, mode), dtype)


@_array_aware
def floor(q, dtype: Optional[type] = None):
    return round(q, RoundingMode.DOWN, dtype)


@_array_aware
def ceil(q, dtype: Optional[type] = None):
    return round(q, RoundingMode.UP, dtype)


@_array_aware
def trunc(q, dtype: Optional[type] = None):
    return round(q, RoundingMode.TO_ZERO, dtype)


@_array_aware
def modf(q):
    """Fractional and integral parts of ``q``, both with its dimensions."""
    if isinstance(q, AbstractQuantity):
        fractional, integral = np.modf(q.value)
        return (
            new_quantity(type(q), fractional, q.dimensions),
            new_quantity(type(q), integral, q.dimensions),
        )
    return np.modf(q)


# Fixed dimension transforms

@_array_aware
def inv(q):
    """Reciprocal; dimensions are negated."""
    if isinstance(q, AbstractQuantity):
        return new_quantity(type(q), 1 / q.value, q.dimensions.negate())
    if isinstance(q, Dimensions):
        return q.negate()
    return 1 / q


@_array_aware
def sqrt(q):
    """Square root; dimensions are halved, which must be representable."""
    if isinstance(q, AbstractQuantity):
        return new_quantity(type(q), np.sqrt(q.value), sqrt(q.dimensions))
    if isinstance(q, Dimensions):
        return q ** Fraction(1, 2)
    return np.sqrt(q)


@_array_aware
def cbrt(q):
    """Cube root; dimensions are divided by three, which must be representable."""
    if isinstance(q, AbstractQuantity):
        return new_quantity(type(q), np.cbrt(q.value), cbrt(q.dimensions))
    if isinstance(q, Dimensions):
        return q ** Fraction(1, 3)
    return np.cbrt(q)


@_array_aware
def abs2(q):
    """Squared magnitude; dimensions are doubled."""
    if isinstance(q, AbstractQuantity):
        return new_quantity(type(q), _abs2(q.value), q.dimensions ** 2)
    return _abs2(q)


def _abs2(x):
    return np.real(x * np.conj(x))


@_array_aware
def angle(q):
    """Phase angle of a (complex) quantity as a bare number."""
    return np.angle(q.value if isinstance(q, AbstractQuantity) else q)


@_array_aware
def copysign(x, y):
    """Magnitude of ``x`` with the sign of ``y``; dimensions of ``x`` only."""
    return apply_first_operand(np.copysign, x, y)


@_array_aware
def flipsign(x, y):
    """``x`` negated where ``y`` is negative; dimensions of ``x`` only."""
    return apply_first_operand(_flipsign, x, y)


def _flipsign(a, b):
    if np.ndim(a) == 0 and np.ndim(b) == 0:
        return -a if np.signbit(b) else a
    return np.where(np.signbit(b), -a, a)


@_array_aware
def mod(x, y):
    """Remainder of ``x`` modulo ``y`` (sign of ``y``); dimensions of ``x`` only."""
    return apply_first_operand(operator.mod, x, y)


@_array_aware
def ldexp(q, n):
    """``q * 2**n`` for an integral ``n``; dimensions are unchanged."""
    if not isinstance(n, numbers.Integral):
        raise TypeError(f"ldexp exponent must be an integer, got {type(n).__name__}")
    if isinstance(q, AbstractQuantity):
        return new_quantity(type(q), np.ldexp(q.value, n), q.dimensions)
    return np.ldexp(q, n)


div = _array_aware(_div)
