import math
import pytest
import numpy as np
from fractions import Fraction
from dimquant.core.dimensions import Dimensions
from dimquant.core.quantity import GenericQuantity, Quantity, RealQuantity
from dimquant.core.errors import DimensionError, DimensionMismatch
from dimquant.functions import elementary as ef
from dimquant.units import Q_, from_pint, to_pint, uparse


class TestUparse:

    def test_compound_units(self):
        """Test parsing scaled compound units into SI values"""
        speed = uparse("km/s")

        assert isinstance(speed, Quantity)
        assert speed.value == pytest.approx(1000.0)
        assert speed.dimensions == Dimensions(length=1, time=-1)

    def test_derived_units(self):
        """Test that derived units expand to base dimensions"""
        force = uparse("N")

        assert force.value == pytest.approx(1.0)
        assert force.dimensions == Dimensions(length=1, mass=1, time=-2)
        assert uparse("9.81 m/s^2").value == pytest.approx(9.81)

    def test_base_dimensions(self):
        """Test all seven base units"""
        assert uparse("m").dimensions == Dimensions(length=1)
        assert uparse("kg").dimensions == Dimensions(mass=1)
        assert uparse("s").dimensions == Dimensions(time=1)
        assert uparse("A").dimensions == Dimensions(current=1)
        assert uparse("K").dimensions == Dimensions(temperature=1)
        assert uparse("cd").dimensions == Dimensions(luminosity=1)
        assert uparse("mol").dimensions == Dimensions(amount=1)

    def test_options(self):
        """Test choosing the kind and exponent representation"""
        assert uparse("m", exponent_type=int).dimensions.exponent_type is int
        assert uparse("m", exponent_type=Fraction).dimensions.exponent_type is Fraction
        assert type(uparse("m", quantity_type=RealQuantity)) is RealQuantity

    def test_parsed_quantities_follow_dimension_rules(self):
        """Test that 1 m + 1 s and sin(1 m) fail"""
        with pytest.raises(DimensionMismatch):
            uparse("m") + uparse("s")
        with pytest.raises(DimensionError):
            ef.sin(uparse("m"))

        assert ef.sin(uparse("rad")) == pytest.approx(math.sin(1.0))


class TestPintConversion:

    def test_from_pint_arrays(self):
        """Test array magnitudes give GenericQuantity"""
        q = from_pint(Q_(np.array([1.0, 2.0]), "km"))

        assert isinstance(q, GenericQuantity)
        np.testing.assert_allclose(q.value, [1000.0, 2000.0])
        assert q.dimensions == Dimensions(length=1)

    def test_from_pint_bare_number(self):
        """Test that numbers are dimensionless"""
        q = from_pint(3.0)

        assert q.value == 3.0
        assert q.is_dimensionless()

    def test_to_pint(self):
        """Test export to pint units"""
        speed = to_pint(Quantity(2.0, Dimensions(length=1, time=-1)))
        assert speed.to("km/h").magnitude == pytest.approx(7.2)

        assert to_pint(5.0).dimensionless

    def test_round_trip(self):
        """Test that SI quantities survive a trip through pint"""
        energy = Quantity(3.0, Dimensions(mass=1, length=2, time=-2))
        assert from_pint(to_pint(energy)) == energy

        root = Quantity(4.0, Dimensions(length=Fraction(1, 2)))
        back = from_pint(to_pint(root))
        assert back.dimensions == root.dimensions
        assert back.value == pytest.approx(4.0)
