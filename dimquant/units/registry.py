"""
Unit strings in, quantities out.

Parsing and scale factors are delegated to pint: an expression is reduced to
SI base units, its magnitude becomes the quantity's value and its
dimensionality becomes the quantity's Dimensions.
"""

import numbers
from typing import Optional, Type, Union

import pint

from ..core.dimensions import DIMENSION_NAMES, Dimensions
from ..core.quantity import AbstractQuantity, Dimensioned, GenericQuantity, Quantity, dimension, ustrip


# Initialize unit registry
ureg = pint.UnitRegistry()
Q_ = ureg.Quantity

_PINT_DIMENSIONS = {
    "[length]": "length",
    "[mass]": "mass",
    "[time]": "time",
    "[current]": "current",
    "[temperature]": "temperature",
    "[luminosity]": "luminosity",
    "[substance]": "amount",
}

_SI_BASE_UNITS = {
    "length": "meter",
    "mass": "kilogram",
    "time": "second",
    "current": "ampere",
    "temperature": "kelvin",
    "luminosity": "candela",
    "amount": "mole",
}


def from_pint(
    quantity: Union[pint.Quantity, numbers.Number],
    quantity_type: Optional[Type[AbstractQuantity]] = None,
    exponent_type: Optional[type] = None,
) -> AbstractQuantity:
    """
    Convert a pint quantity to a dimquant quantity in SI base units.

    Parameters
    ----------
    quantity : pint.Quantity or number
        Source quantity; bare numbers are treated as dimensionless
    quantity_type : type, optional
        Kind of the result. Defaults to ``Quantity`` for scalar magnitudes
        and ``GenericQuantity`` otherwise (e.g. arrays).
    exponent_type : type, optional
        Exponent representation of the resulting Dimensions

    Returns
    -------
    AbstractQuantity
        Quantity whose value is the SI magnitude
    """
    if not isinstance(quantity, pint.Quantity):
        quantity = Q_(quantity, "dimensionless")
    base = quantity.to_base_units()

    exponents = {}
    for name, power in base.dimensionality.items():
        if name not in _PINT_DIMENSIONS:
            raise ValueError(f"Unsupported base dimension {name} in {quantity.units}")
        exponents[_PINT_DIMENSIONS[name]] = power
    dimensions = Dimensions(exponent_type=exponent_type, **exponents)

    magnitude = base.magnitude
    if quantity_type is None:
        quantity_type = Quantity if isinstance(magnitude, numbers.Number) else GenericQuantity
    return quantity_type(magnitude, dimensions)


def uparse(
    expression: str,
    quantity_type: Optional[Type[AbstractQuantity]] = None,
    exponent_type: Optional[type] = None,
) -> AbstractQuantity:
    """
    Parse a unit expression such as ``"km/s"`` or ``"9.81 m/s^2"``.

    Parameters
    ----------
    expression : str
        Any expression pint understands
    quantity_type : type, optional
        Kind of the result (default ``Quantity``)
    exponent_type : type, optional
        Exponent representation of the resulting Dimensions

    Returns
    -------
    AbstractQuantity
        Quantity holding the SI value of the expression

    Examples
    --------
    >>> uparse("km/s")
    Quantity(1000.0, Dimensions(length=1, time=-1))
    """
    parsed = ureg.parse_expression(expression)
    return from_pint(parsed, quantity_type=quantity_type, exponent_type=exponent_type)


def to_pint(quantity) -> pint.Quantity:
    """Convert a quantity (or QuantityArray) to a pint quantity in SI base units."""
    if not isinstance(quantity, Dimensioned):
        return Q_(quantity, "dimensionless")
    dims = dimension(quantity)
    units = ureg.dimensionless
    for name in DIMENSION_NAMES:
        power = getattr(dims, name)
        if power != 0:
            units = units * ureg(_SI_BASE_UNITS[name]).units ** _pint_power(power)
    return Q_(ustrip(quantity), units)


def _pint_power(power) -> Union[int, float]:
    if isinstance(power, int):
        return power
    if power.denominator == 1:
        return int(power.numerator)
    return float(power)
