"""
Physical dimensions as vectors of SI base-dimension exponents.
"""

import numbers
import operator
from dataclasses import dataclass, field
from fractions import Fraction
from functools import reduce
from typing import Any, Callable, Dict, Tuple

from ..config import default_exponent_type
from .exponents import check_exponent_type, convert_exponent, promote_exponent_type, rationalize

DIMENSION_NAMES = ("length", "mass", "time", "current", "temperature", "luminosity", "amount")

SI_SYMBOLS = {
    "length": "m",
    "mass": "kg",
    "time": "s",
    "current": "A",
    "temperature": "K",
    "luminosity": "cd",
    "amount": "mol",
}

_SUPERSCRIPTS = str.maketrans("-0123456789", "⁻⁰¹²³⁴⁵⁶⁷⁸⁹")


@dataclass(frozen=True, eq=False, repr=False)
class Dimensions:
    """
    Represents physical dimensions using the SI base units.

    Each field holds the power of one base dimension, e.g. velocity is
    ``Dimensions(length=1, time=-1)``. All seven exponents share one
    representation ``exponent_type`` (int, Fraction or a FixedRational type,
    ``FixedRational`` by default). Inputs are rationalized into that
    representation on construction.
    """
    length: Any = 0
    mass: Any = 0
    time: Any = 0
    current: Any = 0
    temperature: Any = 0
    luminosity: Any = 0
    amount: Any = 0
    exponent_type: type = field(default=None)

    def __post_init__(self):
        exponent_type = check_exponent_type(self.exponent_type or default_exponent_type())
        object.__setattr__(self, "exponent_type", exponent_type)
        for name in DIMENSION_NAMES:
            object.__setattr__(self, name, rationalize(exponent_type, getattr(self, name)))

    @classmethod
    def _from_exponents(cls, exponent_type: type, exponents) -> "Dimensions":
        """Unchecked constructor: exponents must already be of ``exponent_type``."""
        dims = object.__new__(cls)
        object.__setattr__(dims, "exponent_type", exponent_type)
        for name, value in zip(DIMENSION_NAMES, exponents):
            object.__setattr__(dims, name, value)
        return dims

    def to_tuple(self) -> Tuple:
        return tuple(getattr(self, name) for name in DIMENSION_NAMES)

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in DIMENSION_NAMES}

    def convert(self, exponent_type: type) -> "Dimensions":
        """Same dimensions stored in another exponent representation (exact)."""
        if exponent_type is self.exponent_type:
            return self
        check_exponent_type(exponent_type)
        return Dimensions._from_exponents(
            exponent_type, (convert_exponent(exponent_type, e) for e in self.to_tuple())
        )

    def one(self) -> "Dimensions":
        """The dimensionless value in this exponent representation."""
        zero = convert_exponent(self.exponent_type, 0)
        return Dimensions._from_exponents(self.exponent_type, (zero,) * len(DIMENSION_NAMES))

    # Algebra

    def map(self, f: Callable, *others: "Dimensions") -> "Dimensions":
        return map_dimensions(f, self, *others)

    def add(self, other: "Dimensions") -> "Dimensions":
        return map_dimensions(operator.add, self, other)

    def sub(self, other: "Dimensions") -> "Dimensions":
        return map_dimensions(operator.sub, self, other)

    def negate(self) -> "Dimensions":
        return map_dimensions(operator.neg, self)

    def scale(self, k) -> "Dimensions":
        """Multiply every exponent by ``k`` (general power path)."""
        if isinstance(k, numbers.Integral):
            k = int(k)
        else:
            k = rationalize(self.exponent_type, k)
        return map_dimensions(lambda e: e * k, self)

    def is_dimensionless(self) -> bool:
        return all(getattr(self, name) == 0 for name in DIMENSION_NAMES)

    is_zero = is_dimensionless

    def equals(self, other: "Dimensions") -> bool:
        return all(getattr(self, name) == getattr(other, name) for name in DIMENSION_NAMES)

    def __mul__(self, other):
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self.add(other)

    def __truediv__(self, other):
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self.sub(other)

    def __pow__(self, power, modulo=None):
        if modulo is not None:
            return NotImplemented
        if isinstance(power, numbers.Integral):
            small = _SMALL_INTEGER_POWERS.get(int(power))
            if small is not None:
                return small(self)
            return self.scale(power)
        if isinstance(power, numbers.Real) or hasattr(power, "to_fraction"):
            return self.scale(power)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        if not isinstance(other, Dimensions):
            return NotImplemented
        return not self.equals(other)

    def __hash__(self) -> int:
        # Exponent hashes agree across representations, so equal dimensions hash equal
        return hash(self.to_tuple())

    def __repr__(self) -> str:
        parts = [f"{name}={getattr(self, name)}" for name in DIMENSION_NAMES if getattr(self, name) != 0]
        return f"Dimensions({', '.join(parts)})"

    def __str__(self) -> str:
        parts = []
        for name in DIMENSION_NAMES:
            exponent = getattr(self, name)
            if exponent == 0:
                continue
            symbol = SI_SYMBOLS[name]
            if exponent == 1:
                parts.append(symbol)
            elif Fraction(str(exponent)).denominator == 1:
                parts.append(symbol + str(int(exponent)).translate(_SUPERSCRIPTS))
            else:
                parts.append(f"{symbol}^({exponent})")
        return " ".join(parts)


def map_dimensions(f: Callable, *dims: Dimensions) -> Dimensions:
    """
    Apply ``f`` field by field across one or more Dimensions.

    The arguments are first brought to their common exponent representation;
    ``f`` receives the matching exponent of every argument and its result is
    stored in that representation.
    """
    exponent_type = reduce(promote_exponent_type, (d.exponent_type for d in dims))
    dims = [d.convert(exponent_type) for d in dims]
    exponents = []
    for name in DIMENSION_NAMES:
        result = f(*(getattr(d, name) for d in dims))
        if type(result) is not exponent_type:
            result = convert_exponent(exponent_type, result)
        exponents.append(result)
    return Dimensions._from_exponents(exponent_type, exponents)


def _inverse_squared(d: Dimensions) -> Dimensions:
    i = d.negate()
    return i * i


# Powers expanded into repeated add/negate; must agree with Dimensions.scale
_SMALL_INTEGER_POWERS = {
    0: lambda d: d.one(),
    1: lambda d: d,
    2: lambda d: d * d,
    3: lambda d: d * d * d,
    -1: lambda d: d.negate(),
    -2: _inverse_squared,
}
