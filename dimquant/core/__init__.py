from .errors import (
    DimensionalError, DimensionMismatch, DimensionError, RationalizeError, InvalidAssignment,
    RationalizeWarning, DimensionStrippedWarning,
)
from .fixed_rational import FixedRational, fixed_rational_type
from .exponents import convert_exponent, rationalize, exponent_limits, promote_exponent_type
from .dimensions import Dimensions, DIMENSION_NAMES, map_dimensions
from .rounding import RoundingMode
from .quantity import (
    AbstractQuantity, Quantity, RealQuantity, GenericQuantity,
    new_quantity, promote, promote_kind, ustrip, dimension, div,
)

__all__ = ['DimensionalError', 'DimensionMismatch', 'DimensionError', 'RationalizeError',
           'InvalidAssignment', 'RationalizeWarning', 'DimensionStrippedWarning',
           'FixedRational', 'fixed_rational_type',
           'convert_exponent', 'rationalize', 'exponent_limits', 'promote_exponent_type',
           'Dimensions', 'DIMENSION_NAMES', 'map_dimensions', 'RoundingMode',
           'AbstractQuantity', 'Quantity', 'RealQuantity', 'GenericQuantity',
           'new_quantity', 'promote', 'promote_kind', 'ustrip', 'dimension', 'div']
