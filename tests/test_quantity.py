import math
import pytest
import numpy as np
from fractions import Fraction
from dimquant.core.dimensions import Dimensions
from dimquant.core.quantity import (
    GenericQuantity, Quantity, RealQuantity, div, dimension, new_quantity, ustrip,
)
from dimquant.core.rounding import RoundingMode
from dimquant.core.errors import (
    DimensionError, DimensionMismatch, RationalizeError, RationalizeWarning,
)


METER = Dimensions(length=1)
SECOND = Dimensions(time=1)


class TestQuantityConstruction:

    def test_value_and_dimensions(self):
        """Test the basic constructor forms"""
        q = Quantity(2.0, METER)

        assert q.value == 2.0
        assert q.magnitude == 2.0
        assert q.dimensions == METER
        assert Quantity(3.0, q).dimensions == METER
        assert Quantity(1.0, length=1, time=-1).dimensions == Dimensions(length=1, time=-1)
        assert Quantity(1.0).is_dimensionless()
        assert q.check_dimensions(METER)

    def test_rejected_values(self):
        """Test value type checks of each kind"""
        with pytest.raises(TypeError):
            Quantity(np.array([1.0]), METER)
        with pytest.raises(TypeError):
            RealQuantity(1j, METER)
        with pytest.raises(TypeError):
            Quantity(Quantity(1.0))
        with pytest.raises(TypeError):
            Quantity(1.0, "m")
        with pytest.raises(TypeError):
            Quantity(1.0, METER, length=1)

        arr = GenericQuantity(np.array([1.0, 2.0]), METER)
        assert arr.dimensions == METER

    def test_strip_and_dimension(self):
        """Test ustrip and dimension on quantities and bare numbers"""
        q = Quantity(2.0, METER)

        assert ustrip(q) == 2.0
        assert dimension(q) == METER
        assert ustrip(3.0) == 3.0
        assert dimension(3.0).is_dimensionless()

    def test_unchecked_construction(self):
        """Test that new_quantity skips value checks"""
        q = new_quantity(Quantity, np.array([1.0]), METER)
        assert isinstance(q, Quantity)


class TestArithmetic:

    def test_multiplication_combines_dimensions(self):
        """Test physics calculations with dimensions"""
        mass = Quantity(2.0, mass=1)
        velocity = Quantity(10.0, length=1, time=-1)

        kinetic_energy = 0.5 * mass * velocity ** 2

        assert kinetic_energy.value == 100.0
        assert kinetic_energy.dimensions == Dimensions(length=2, mass=1, time=-2)

    def test_bare_numbers(self):
        """Test mixing quantities and bare numbers"""
        q = Quantity(4.0, METER)

        assert (q * 2).value == 8.0
        assert (2 * q).dimensions == METER
        assert (q / 2).value == 2.0
        inverse = 2.0 / q
        assert inverse.value == 0.5
        assert inverse.dimensions == Dimensions(length=-1)

    def test_dimensions_operands(self):
        """Test multiplying and dividing by Dimensions objects"""
        q = Quantity(2.0, METER)

        assert (q * SECOND).dimensions == Dimensions(length=1, time=1)
        assert (SECOND * q).value == 2.0
        assert (q / SECOND).dimensions == Dimensions(length=1, time=-1)

        flipped = SECOND / q
        assert flipped.value == 0.5
        assert flipped.dimensions == Dimensions(length=-1, time=1)

    def test_addition_requires_matching_dimensions(self):
        """Test that adding incompatible dimensions raises"""
        q1 = Quantity(1.0, METER)
        q2 = Quantity(2.0, METER)

        assert (q1 + q2).value == 3.0
        assert (q2 - q1).value == 1.0

        with pytest.raises(DimensionMismatch) as excinfo:
            q1 + Quantity(1.0, SECOND)

        assert excinfo.value.left_dimensions == METER
        assert excinfo.value.right_dimensions == SECOND

    def test_addition_with_bare_numbers(self):
        """Test that only dimensionless quantities add to bare numbers"""
        ratio = Quantity(0.5)

        assert (ratio + 1).value == 1.5
        assert (1 - ratio).value == 0.5

        with pytest.raises(DimensionMismatch):
            Quantity(1.0, METER) + 1.0
        with pytest.raises(DimensionMismatch) as excinfo:
            1.0 - Quantity(1.0, METER)
        assert excinfo.value.left == 1.0

    def test_unary_operators(self):
        """Test negation and absolute value"""
        q = Quantity(-2.0, METER)

        assert (-q).value == 2.0
        assert abs(q) == Quantity(2.0, METER)
        assert (+q) == q

    def test_unsupported_operands(self):
        """Test that foreign operands are refused"""
        with pytest.raises(TypeError):
            Quantity(1.0, METER) + "x"
        with pytest.raises(TypeError):
            Quantity(1.0, METER) * np.array([1.0])


class TestAlgebraicProperties:

    def test_inverse_of_inverse(self):
        """Test inv(inv(q)) == q"""
        q = Quantity(4.0, Dimensions(length=1, time=-2))
        assert 1 / (1 / q) == q

    def test_self_division_is_dimensionless(self):
        """Test q / q == 1"""
        q = Quantity(3.0, Dimensions(mass=1, time=-1))
        ratio = q / q

        assert ratio.is_dimensionless()
        assert ratio == 1

    def test_add_then_subtract(self):
        """Test (q + r) - r == q"""
        q = Quantity(1.5, METER)
        r = Quantity(2.25, METER)
        assert (q + r) - r == q

    def test_integer_power_paths_agree(self):
        """Test that expanded small powers match the general power path"""
        q = Quantity(2.0, Dimensions(length=1, time=-1))
        for n in (-2, -1, 0, 1, 2, 3, 5):
            assert q ** n == q ** Fraction(n)
            assert (q ** n).dimensions == q.dimensions.scale(n)


class TestPowers:

    def test_fractional_power(self):
        """Test square root through a float power"""
        root = Quantity(9.0, Dimensions(length=2)) ** 0.5

        assert root.value == 3.0
        assert root.dimensions == METER

    def test_value_uses_rationalized_exponent(self):
        """Test that value and dimensions are raised to the same exponent"""
        q = Quantity(2.0, METER)
        with pytest.warns(RationalizeWarning):
            powered = q ** math.pi

        expected = Fraction(round(math.pi * 25200), 25200)
        assert powered.dimensions.length == expected
        assert powered.value == 2.0 ** float(expected)

    def test_dimensionless_power_stays_dimensionless(self):
        """Test real powers of dimensionless quantities"""
        with pytest.warns(RationalizeWarning):
            powered = Quantity(2.0) ** math.e
        assert powered.is_dimensionless()

    def test_dimensionless_power_with_fraction_exponents(self):
        """Test that Fraction exponents accept any finite real power"""
        base = Quantity(2.0, Dimensions(exponent_type=Fraction))
        powered = base ** math.pi

        assert powered.is_dimensionless()
        assert powered.dimensions.exponent_type is Fraction
        assert powered.value == 2.0 ** math.pi

        area_power = Quantity(2.0, Dimensions(length=2, exponent_type=Fraction)) ** math.pi
        assert area_power.dimensions.length == 2 * Fraction(math.pi)

    def test_quantity_exponent(self):
        """Test exponents given as quantities"""
        assert (Quantity(3.0, METER) ** Quantity(2)).value == 9.0

        with pytest.raises(DimensionError):
            Quantity(3.0, METER) ** Quantity(2, METER)

    def test_number_to_quantity_power(self):
        """Test bare bases raised to dimensionless quantities"""
        assert 2 ** Quantity(3.0) == 8.0

        with pytest.raises(DimensionError):
            2 ** Quantity(3.0, METER)

    def test_exponent_representations(self):
        """Test roots under int and Fraction exponents"""
        with pytest.raises(RationalizeError):
            Quantity(4.0, Dimensions(length=1, exponent_type=int)) ** 0.5

        root = Quantity(4.0, Dimensions(length=1, exponent_type=Fraction)) ** 0.5
        assert root.value == 2.0
        assert root.dimensions.length == Fraction(1, 2)

    def test_real_kind_rejects_complex_results(self):
        """Test that a real quantity cannot silently hold a complex root"""
        with pytest.raises(ValueError):
            RealQuantity(-8.0, length=3) ** Fraction(1, 3)

        root = Quantity(-8.0, length=3) ** Fraction(1, 3)
        assert isinstance(root.value, complex)
        assert root.value == pytest.approx(1 + math.sqrt(3) * 1j)
        assert root.dimensions == METER

        real_root = RealQuantity(8.0, length=3) ** Fraction(1, 3)
        assert type(real_root) is RealQuantity
        assert real_root.value == pytest.approx(2.0)


class TestDivision:

    def test_div_dimensions(self):
        """Test that integer division follows the dimensions of /"""
        result = div(Quantity(7.0, METER), Quantity(2.0, SECOND))

        assert result.value == 3.0
        assert result.dimensions == Dimensions(length=1, time=-1)
        assert div(7, Quantity(2, SECOND)).dimensions == Dimensions(time=-1)

    def test_rounding_modes(self):
        """Test each rounding mode on a negative quotient"""
        q = Quantity(-7, METER)

        assert div(q, 2).value == -3
        assert div(q, 2, RoundingMode.DOWN).value == -4
        assert div(q, 2, RoundingMode.UP).value == -3
        assert div(q, 2, RoundingMode.NEAREST).value == -4
        assert div(q, 2, RoundingMode.NEAREST_TIES_AWAY).value == -4
        assert div(Quantity(5, METER), 2, RoundingMode.NEAREST).value == 2

    def test_floor_division_operator(self):
        """Test that // rounds down and divmod pairs with %"""
        assert (Quantity(-7, METER) // 2).value == -4

        quotient, remainder = divmod(Quantity(7, METER), 2)
        assert quotient == Quantity(3, METER)
        assert remainder == Quantity(1, METER)

    def test_mod_keeps_first_operand_dimensions(self):
        """Test that % ignores the divisor's dimensions"""
        result = Quantity(7.0, METER) % Quantity(3.0, SECOND)

        assert result.value == 1.0
        assert result.dimensions == METER
        assert 7.0 % Quantity(3.0, SECOND) == 1.0


class TestComparison:

    def test_equality(self):
        """Test that equality never raises"""
        assert Quantity(1.0, METER) == Quantity(1.0, METER)
        assert not (Quantity(1.0, METER) == Quantity(1.0, SECOND))
        assert Quantity(1.0, METER) != Quantity(1.0, SECOND)
        assert Quantity(1.0) == 1.0
        assert Quantity(1.0, METER) != 1.0

    def test_ordering(self):
        """Test ordering comparisons and their dimension checks"""
        assert Quantity(1.0, METER) < Quantity(2.0, METER)
        assert Quantity(0.5) < 1

        with pytest.raises(DimensionMismatch):
            Quantity(1.0, METER) < Quantity(2.0, SECOND)
        with pytest.raises(DimensionMismatch):
            Quantity(0.5, METER) < 1

    def test_hash(self):
        """Test hashing consistent with equality"""
        assert {Quantity(1.0, METER): "a"}[Quantity(1.0, METER)] == "a"
        assert hash(Quantity(2.0)) == hash(2.0)

    def test_conversion_to_numbers(self):
        """Test float() on dimensionless and dimensioned quantities"""
        assert float(Quantity(2.5)) == 2.5
        assert int(Quantity(3)) == 3

        with pytest.raises(DimensionError):
            float(Quantity(2.5, METER))

    def test_rounding_protocol(self):
        """Test round() and math.floor() keep dimensions"""
        assert round(Quantity(2.6, METER)) == Quantity(3, METER)
        assert math.floor(Quantity(2.6, METER)) == Quantity(2, METER)
        assert math.ceil(Quantity(2.1, METER)) == Quantity(3, METER)

    def test_display(self):
        """Test str and repr"""
        assert str(Quantity(9.81, Dimensions(length=1, time=-2))) == "9.81 m s⁻²"
        assert str(Quantity(2.0)) == "2.0"
        assert repr(Quantity(2.0, METER)) == "Quantity(2.0, Dimensions(length=1))"
