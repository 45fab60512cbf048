"""
Example: Arrays of Quantities
=============================

QuantityArray stores one numpy array and one set of dimensions, so
vectorized numpy code keeps working while dimensions are still tracked.
"""

import warnings
import numpy as np
from dimquant import DimensionStrippedWarning, InvalidAssignment, QuantityArray, ustrip, uparse

print("QuantityArray Examples")
print("=" * 50)

# Example 1: Trajectory sampled on a grid
print("\nExample 1: Projectile Trajectory")
print("-" * 40)

t = QuantityArray(np.linspace(0.0, 2.0, 5), uparse("s"))
v0 = uparse("15 m/s")
g = uparse("9.81 m/s^2")

y = v0 * t - 0.5 * g * t ** 2
print(f"Heights: {y}")
print(f"Max height sample: {max(y, key=ustrip)}")

# Example 2: numpy functions keep dimensions
print("\n\nExample 2: numpy ufuncs")
print("-" * 40)

areas = QuantityArray([4.0, 9.0, 16.0], uparse("m^2"))
print(f"np.sqrt(areas) = {np.sqrt(areas)}")
print(f"areas > 5 m^2: {areas > uparse('5 m^2')}")

# Example 3: Writing into an array
print("\n\nExample 3: Assignment")
print("-" * 40)

try:
    areas[0] = uparse("1 m^2")
except InvalidAssignment as e:
    print(f"InvalidAssignment: {e}")

areas[0] = ustrip(uparse("1 m^2"))
print(f"After writing a bare value: {areas}")

with warnings.catch_warnings(record=True) as caught:
    warnings.simplefilter("always")
    plain = np.asarray(areas)
print(f"np.asarray -> {plain} ({caught[0].category.__name__})")
