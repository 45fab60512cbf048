"""
Arrays of values sharing a single Dimensions.

A ``QuantityArray`` stores a plain numpy array plus one Dimensions instead
of one quantity object per element. Reads return quantities; writes take
bare values only.
"""

import numbers
import warnings
from functools import lru_cache
from typing import Any, Dict, Optional, Tuple

import numpy as np

from ..core.dimensions import Dimensions
from ..core.errors import DimensionStrippedWarning, InvalidAssignment
from ..core.quantity import (
    AbstractQuantity,
    Dimensioned,
    GenericQuantity,
    Quantity,
    new_quantity,
    ustrip,
)


class QuantityArray(Dimensioned):
    """
    An array of quantities sharing one set of dimensions.

    ``array[i]`` returns a ``Quantity`` while ``array[i] = v`` expects a bare
    value: writing a dimensioned value raises ``InvalidAssignment`` instead of
    checking dimensions on every write.

    Parameters
    ----------
    value : array_like
        Values, or a sequence of quantities (dimensions taken from the first
        element; the others are not checked)
    dimensions : Dimensions or quantity, optional
        Shared dimensions. A reference quantity also scales the values by its
        own value, so ``QuantityArray(x, uparse("km"))`` stores meters.
    **exponents
        Alternatively, exponent keywords passed to ``Dimensions``
    """

    __slots__ = ("_value", "_dimensions")

    def __init__(self, value, dimensions=None, **exponents):
        if dimensions is not None and exponents:
            raise TypeError("Pass either dimensions or exponent keywords, not both")
        if isinstance(dimensions, AbstractQuantity):
            value = np.asarray(value) * dimensions.value
            dimensions = dimensions.dimensions
        elif dimensions is None and not exponents and _holds_quantities(value):
            value, dimensions = _strip_elements(value)
        elif dimensions is None:
            dimensions = Dimensions(**exponents)
        elif not isinstance(dimensions, Dimensions):
            raise TypeError(f"Expected Dimensions or a quantity, got {type(dimensions).__name__}")
        self._value = np.asarray(value)
        self._dimensions = dimensions

    @classmethod
    def _new(cls, value: np.ndarray, dimensions: Dimensions) -> "QuantityArray":
        array = object.__new__(cls)
        array._value = value
        array._dimensions = dimensions
        return array

    @property
    def value(self) -> np.ndarray:
        return self._value

    @property
    def dimensions(self) -> Dimensions:
        return self._dimensions

    # Shape queries delegate to the underlying array

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._value.shape

    @property
    def ndim(self) -> int:
        return self._value.ndim

    @property
    def size(self) -> int:
        return self._value.size

    @property
    def dtype(self):
        return self._value.dtype

    @property
    def axes(self) -> Tuple[range, ...]:
        return tuple(range(n) for n in self._value.shape)

    def __len__(self) -> int:
        return len(self._value)

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    # Element access

    def __getitem__(self, key):
        element = self._value[key]
        if np.ndim(element) == 0:
            kind = Quantity if isinstance(element, numbers.Number) else GenericQuantity
            return new_quantity(kind, element, self._dimensions)
        return QuantityArray._new(element, self._dimensions)

    def __setitem__(self, key, value):
        if isinstance(value, Dimensioned) or _holds_dimensioned(value):
            raise InvalidAssignment(value)
        self._value[key] = value

    def similar(self, dtype=None, shape=None) -> "QuantityArray":
        """New array with the same dimensions and independent, uninitialized storage."""
        return QuantityArray._new(np.empty_like(self._value, dtype=dtype, shape=shape), self._dimensions)

    def copy(self) -> "QuantityArray":
        return QuantityArray._new(self._value.copy(), self._dimensions)

    def __array__(self, dtype=None, copy=None):
        warnings.warn(
            f"Discarding dimensions {self._dimensions!r} while converting to ndarray",
            DimensionStrippedWarning,
            stacklevel=2,
        )
        if copy:
            return np.array(self._value, dtype=dtype, copy=True)
        return np.asarray(self._value, dtype=dtype)

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        implementation = _ufunc_implementations().get(ufunc)
        if method != "__call__" or kwargs or implementation is None:
            return NotImplemented
        return lower(implementation(*(lift(x) for x in inputs)))

    # Arithmetic reuses the quantity dispatch layer

    def __neg__(self):
        return lower(-lift(self))

    def __pos__(self):
        return lower(+lift(self))

    def __abs__(self):
        return lower(abs(lift(self)))

    def __eq__(self, other):
        return lower(lift(self) == lift(other))

    def __ne__(self, other):
        return lower(lift(self) != lift(other))

    __hash__ = None

    def __repr__(self) -> str:
        return f"QuantityArray({self._value!r}, {self._dimensions!r})"

    def __str__(self) -> str:
        return f"{self._value} {self._dimensions}".rstrip()


def _forward(op):
    def method(self, other):
        return lower(op(lift(self), lift(other)))
    return method


def _reflected(op):
    def method(self, other):
        return lower(op(lift(other), lift(self)))
    return method


for _name, _op in [
    ("add", lambda a, b: a + b),
    ("sub", lambda a, b: a - b),
    ("mul", lambda a, b: a * b),
    ("truediv", lambda a, b: a / b),
    ("floordiv", lambda a, b: a // b),
    ("mod", lambda a, b: a % b),
    ("pow", lambda a, b: a ** b),
]:
    setattr(QuantityArray, f"__{_name}__", _forward(_op))
    setattr(QuantityArray, f"__r{_name}__", _reflected(_op))

for _name, _op in [
    ("lt", lambda a, b: a < b),
    ("le", lambda a, b: a <= b),
    ("gt", lambda a, b: a > b),
    ("ge", lambda a, b: a >= b),
]:
    setattr(QuantityArray, f"__{_name}__", _forward(_op))

del _name, _op


def lift(x):
    """View a QuantityArray as a GenericQuantity so quantity rules apply to it."""
    if isinstance(x, QuantityArray):
        return new_quantity(GenericQuantity, x.value, x.dimensions)
    return x


def lower(result):
    """Turn array-valued quantities (and tuples of them) back into QuantityArrays."""
    if isinstance(result, tuple):
        return tuple(lower(r) for r in result)
    if isinstance(result, AbstractQuantity) and isinstance(result.value, np.ndarray):
        return QuantityArray._new(result.value, result.dimensions)
    return result


def _holds_quantities(value) -> bool:
    if isinstance(value, np.ndarray):
        return value.dtype == object and value.size > 0 and isinstance(value.flat[0], AbstractQuantity)
    if isinstance(value, (list, tuple)):
        return len(value) == 0 or isinstance(np.asarray(value, dtype=object).flat[0], AbstractQuantity)
    return False


def _holds_dimensioned(value) -> bool:
    """Whether a sequence or object array written into a slice contains any quantity."""
    if isinstance(value, (list, tuple)):
        return any(isinstance(v, Dimensioned) or _holds_dimensioned(v) for v in value)
    if isinstance(value, np.ndarray) and value.dtype == object:
        return any(isinstance(v, Dimensioned) for v in value.flat)
    return False


def _strip_elements(value) -> Tuple[np.ndarray, Dimensions]:
    elements = np.asarray(value, dtype=object)
    if elements.size == 0:
        raise ValueError("Cannot infer dimensions from an empty sequence of quantities")
    # TODO: verify every element shares the first element's dimensions (opt-in, it costs a pass)
    stripped = np.array([ustrip(q) for q in elements.flat]).reshape(elements.shape)
    return stripped, elements.flat[0].dimensions


@lru_cache(maxsize=None)
def _ufunc_implementations() -> Dict[Any, Any]:
    from ..functions import elementary as ef

    return {
        np.add: lambda a, b: a + b,
        np.subtract: lambda a, b: a - b,
        np.multiply: lambda a, b: a * b,
        np.true_divide: lambda a, b: a / b,
        np.floor_divide: lambda a, b: a // b,
        np.remainder: lambda a, b: a % b,
        np.power: lambda a, b: a ** b,
        np.negative: lambda a: -a,
        np.positive: lambda a: +a,
        np.absolute: ef.abs,
        np.square: lambda a: a ** 2,
        np.sqrt: ef.sqrt,
        np.cbrt: ef.cbrt,
        np.reciprocal: ef.inv,
        np.floor: ef.floor,
        np.ceil: ef.ceil,
        np.trunc: ef.trunc,
        np.rint: ef.round,
        np.conjugate: ef.conj,
        np.copysign: ef.copysign,
        np.ldexp: ef.ldexp,
        np.modf: ef.modf,
        np.frexp: ef.frexp,
        np.sin: ef.sin,
        np.cos: ef.cos,
        np.tan: ef.tan,
        np.arcsin: ef.asin,
        np.arccos: ef.acos,
        np.arctan: ef.atan,
        np.arctan2: ef.atan2,
        np.sinh: ef.sinh,
        np.cosh: ef.cosh,
        np.tanh: ef.tanh,
        np.arcsinh: ef.asinh,
        np.arccosh: ef.acosh,
        np.arctanh: ef.atanh,
        np.rad2deg: ef.rad2deg,
        np.deg2rad: ef.deg2rad,
        np.exp: ef.exp,
        np.exp2: ef.exp2,
        np.expm1: ef.expm1,
        np.log: ef.log,
        np.log2: ef.log2,
        np.log10: ef.log10,
        np.log1p: ef.log1p,
        np.equal: lambda a, b: a == b,
        np.not_equal: lambda a, b: a != b,
        np.less: lambda a, b: a < b,
        np.less_equal: lambda a, b: a <= b,
        np.greater: lambda a, b: a > b,
        np.greater_equal: lambda a, b: a >= b,
    }
