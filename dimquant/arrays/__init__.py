from .quantity_array import QuantityArray

__all__ = ['QuantityArray']
