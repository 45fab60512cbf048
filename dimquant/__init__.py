"""
dimquant - Dimensional analysis for Python numbers and arrays
=============================================================

Every quantity carries the exponents of the seven SI base dimensions
(length, mass, time, current, temperature, luminosity, amount). Arithmetic
propagates them and refuses dimensionally invalid combinations.

Main Features:
- Dimensions algebra over int, Fraction or fixed-denominator exponents
- Quantity kinds (Quantity, RealQuantity, GenericQuantity) with promotion
- Exact rationalization of fractional powers and roots
- Dimension-aware elementary functions (dimensionless-only trig/log/exp)
- QuantityArray: numpy arrays sharing one set of dimensions
- Unit-string parsing through pint

>>> from dimquant import uparse
>>> v = uparse("km") / uparse("s")
>>> str(v)
'1000.0 m s⁻¹'
"""

__version__ = "0.1.0"

from .core import (
    Dimensions, FixedRational, fixed_rational_type, map_dimensions, rationalize, RoundingMode,
    AbstractQuantity, Quantity, RealQuantity, GenericQuantity,
    new_quantity, promote, promote_kind, ustrip, dimension,
    DimensionalError, DimensionMismatch, DimensionError, RationalizeError, InvalidAssignment,
    RationalizeWarning, DimensionStrippedWarning,
)
from .arrays import QuantityArray
from .functions import elementary
from .functions.elementary import (
    sqrt, cbrt, inv, abs2, angle, div, copysign, flipsign, mod, ldexp,
    round, floor, ceil, trunc, modf,
    sin, cos, tan, atan, atan2, log, exp,
)
from .units import ureg, uparse, from_pint, to_pint

__all__ = [
    # Core
    'Dimensions', 'FixedRational', 'fixed_rational_type', 'map_dimensions', 'rationalize',
    'RoundingMode', 'AbstractQuantity', 'Quantity', 'RealQuantity', 'GenericQuantity',
    'new_quantity', 'promote', 'promote_kind', 'ustrip', 'dimension',

    # Errors
    'DimensionalError', 'DimensionMismatch', 'DimensionError', 'RationalizeError',
    'InvalidAssignment', 'RationalizeWarning', 'DimensionStrippedWarning',

    # Arrays
    'QuantityArray',

    # Functions
    'elementary', 'sqrt', 'cbrt', 'inv', 'abs2', 'angle', 'div', 'copysign', 'flipsign',
    'mod', 'ldexp', 'round', 'floor', 'ceil', 'trunc', 'modf',
    'sin', 'cos', 'tan', 'atan', 'atan2', 'log', 'exp',

    # Units
    'ureg', 'uparse', 'from_pint', 'to_pint',
]
