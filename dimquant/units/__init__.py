from .registry import ureg, Q_, uparse, from_pint, to_pint

__all__ = ['ureg', 'Q_', 'uparse', 'from_pint', 'to_pint']
