import operator
import pytest
import numpy as np
from fractions import Fraction
from dimquant.core.dimensions import Dimensions
from dimquant.core.fixed_rational import FixedRational
from dimquant.core.quantity import (
    AbstractQuantity, GenericQuantity, Quantity, RealQuantity, promote, promote_kind,
)


METER = Dimensions(length=1)


class TestKindPromotion:

    def test_promotion_order(self):
        """Test RealQuantity < Quantity < GenericQuantity"""
        assert promote_kind(RealQuantity, RealQuantity) is RealQuantity
        assert promote_kind(RealQuantity, Quantity) is Quantity
        assert promote_kind(Quantity, RealQuantity) is Quantity
        assert promote_kind(Quantity, GenericQuantity) is GenericQuantity

    def test_no_rule_between_equal_ranks(self):
        """Test that unrelated kinds of equal rank refuse to combine"""
        class OtherQuantity(AbstractQuantity):
            __slots__ = ()
            kind_rank = 1

        with pytest.raises(TypeError):
            promote_kind(Quantity, OtherQuantity)

    def test_mixed_kind_arithmetic(self):
        """Test that results take the common kind"""
        real = RealQuantity(2.0, METER)
        scalar = Quantity(3.0, time=1)

        product = real * scalar
        assert type(product) is Quantity
        assert product.value == 6.0
        assert product.dimensions == Dimensions(length=1, time=1)
        assert type(scalar * real) is Quantity

    def test_operators_equal_prepromoted_operands(self):
        """Test that combining kinds is the same as promoting first"""
        a = RealQuantity(2.0, METER)
        b = Quantity(0.5 + 0j, METER)
        for op in (operator.add, operator.sub, operator.mul, operator.truediv):
            left, right = promote(a, b)
            direct = op(a, b)
            assert type(direct) is type(op(left, right))
            assert direct == op(left, right)

    def test_promote_keeps_values(self):
        """Test that promotion converts kinds without touching values"""
        left, right = promote(RealQuantity(2.0, METER), Quantity(1j, METER))

        assert type(left) is Quantity and type(right) is Quantity
        assert left.value == 2.0
        assert right.value == 1j

    def test_generic_absorbs_scalars(self):
        """Test array-valued quantities combined with scalar quantities"""
        arr = GenericQuantity(np.array([1.0, 2.0]), METER)
        total = arr + Quantity(1.0, METER)

        assert type(total) is GenericQuantity
        np.testing.assert_array_equal(total.value, [2.0, 3.0])


class TestExponentTypePromotion:

    def test_mixed_exponent_types(self):
        """Test products across exponent representations"""
        a = Quantity(2.0, Dimensions(length=1, exponent_type=int))
        b = Quantity(3.0, Dimensions(length=Fraction(1, 2), exponent_type=Fraction))

        c = a * b
        assert c.dimensions.exponent_type is Fraction
        assert c.dimensions.length == Fraction(3, 2)
        assert c.value == 6.0

    def test_addition_across_exponent_types(self):
        """Test that equal dimensions in different representations add"""
        a = Quantity(1.0, Dimensions(length=1, exponent_type=int))
        b = Quantity(2.0, Dimensions(length=1))

        total = a + b
        assert total.value == 3.0
        assert total.dimensions.exponent_type is FixedRational

    def test_promote_converts_exponents(self):
        """Test that promote brings both operands to one representation"""
        left, right = promote(
            Quantity(1.0, Dimensions(length=1, exponent_type=int)),
            RealQuantity(1.0, Dimensions(time=1, exponent_type=Fraction)),
        )

        assert left.dimensions.exponent_type is Fraction
        assert right.dimensions.exponent_type is Fraction
        assert type(right) is Quantity
