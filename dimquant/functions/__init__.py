from . import elementary
from .elementary import (
    sqrt, cbrt, inv, abs2, angle, div, copysign, flipsign, mod, ldexp,
    round, floor, ceil, trunc, modf, atan, atand, atan2,
)

__all__ = ['elementary', 'sqrt', 'cbrt', 'inv', 'abs2', 'angle', 'div', 'copysign',
           'flipsign', 'mod', 'ldexp', 'round', 'floor', 'ceil', 'trunc', 'modf',
           'atan', 'atand', 'atan2']
