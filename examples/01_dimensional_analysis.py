"""
Example: Dimensional Analysis with Quantities
=============================================

This example shows how dimensions flow through arithmetic, how invalid
combinations are caught, and how fractional powers stay exact.
"""

import numpy as np
from fractions import Fraction
from dimquant import (
    Dimensions, DimensionError, DimensionMismatch, Quantity, RationalizeError,
    RealQuantity, sqrt, sin, uparse,
)

print("Dimensional Analysis Examples")
print("=" * 50)

# Example 1: Kinematics
print("\nExample 1: Free Fall")
print("-" * 40)

g = uparse("9.81 m/s^2")
height = uparse("20 m")

fall_time = sqrt(2 * height / g)
impact_speed = g * fall_time

print(f"g = {g}")
print(f"Fall time: {fall_time}")
print(f"Impact speed: {impact_speed}")
print(f"Speed dimensions: {impact_speed.dimensions!r}")

# Example 2: Catching mistakes
print("\n\nExample 2: Invalid Operations")
print("-" * 40)

try:
    height + fall_time
except DimensionMismatch as e:
    print(f"DimensionMismatch: {e}")

try:
    sin(height)
except DimensionError as e:
    print(f"DimensionError: {e}")

print(f"sin(30 deg) = {sin(uparse('30 deg')):.3f}")

# Example 3: Fractional exponents
print("\n\nExample 3: Exponent Representations")
print("-" * 40)

noise_density = Quantity(4e-9, Dimensions(current=1) / Dimensions(time=-1) ** Fraction(1, 2))
print(f"Noise density: {noise_density}")
print(f"Squared: {noise_density ** 2}")

for exponent_type in (int, Fraction):
    area = Quantity(9.0, Dimensions(length=2, exponent_type=exponent_type))
    try:
        print(f"sqrt(area) with {exponent_type.__name__} exponents: {sqrt(area)}")
    except RationalizeError as e:
        print(f"{exponent_type.__name__} exponents: {e}")

# Example 4: Kinds
print("\n\nExample 4: Quantity Kinds")
print("-" * 40)

resistance = RealQuantity(50.0, uparse("ohm"))
impedance = Quantity(50.0 + 30.0j, uparse("ohm"))
total = resistance + impedance

print(f"{type(resistance).__name__} + {type(impedance).__name__} -> {type(total).__name__}")
print(f"Total impedance magnitude: {np.abs(total.value):.1f} {total.dimensions}")
