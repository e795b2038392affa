"""Tests for Rational construction, predicates and arithmetic."""

import math
import sys
from fractions import Fraction

import pytest
from calcurus import Rational, I64_MAX, I64_MIN


def r(num, den=1):
    return Rational.from_signed_pair(num, den)


class TestConstruction:
    """Tests for the constructors."""

    def test_from_int(self):
        """Integers construct integral rationals."""
        assert Rational(5).numerator == 5
        assert Rational(5).denominator == 1
        assert Rational.from_int(-7) == -7

    def test_default_is_zero(self):
        """No argument gives zero."""
        assert Rational().is_zero()

    def test_from_pair_reduces(self):
        """Unsigned pairs are reduced to lowest terms."""
        x = Rational.from_pair(6, 4)
        assert (x.numerator, x.denominator) == (3, 2)

    def test_from_pair_rejects_negative(self):
        """Unsigned constructor refuses signed input."""
        with pytest.raises(ValueError):
            Rational.from_pair(-1, 2)
        with pytest.raises(ValueError):
            Rational.from_pair(1, -2)

    def test_zero_denominator(self):
        """A zero denominator is a caller error."""
        with pytest.raises(ZeroDivisionError):
            Rational.from_pair(1, 0)
        with pytest.raises(ZeroDivisionError):
            Rational.from_signed_pair(-1, 0)

    def test_signed_pair_sign_from_product(self):
        """Sign is negative iff exactly one input is negative."""
        assert r(-6, 4) == r(6, -4)
        assert r(-6, 4).numerator == -3
        assert r(-6, 4).denominator == 2
        assert r(-6, -4) == Rational.from_pair(3, 2)

    def test_signed_pair_zero(self):
        """Zero over a negative denominator is plain zero."""
        z = r(0, -5)
        assert z.is_zero()
        assert (z.numerator, z.denominator) == (0, 1)
        assert z == Rational.zero()

    def test_rejects_float(self):
        """Floats are not exact and are refused."""
        with pytest.raises(TypeError):
            Rational(0.5)

    def test_from_fraction(self):
        """An exact Fraction is accepted as-is."""
        assert Rational(Fraction(2, 4)) == Rational.from_pair(1, 2)

    def test_constants(self):
        """Canonical constants have the expected values."""
        assert Rational.zero() == 0
        assert Rational.one() == 1
        assert Rational.minus_one() == -1


class TestPredicates:
    """Tests for sign and integrality predicates."""

    def test_sign_predicates(self):
        """Exactly one sign predicate holds."""
        for value in [r(-3, 2), Rational.zero(), r(1, 7)]:
            signs = [value.is_zero(), value.is_positive(), value.is_negative()]
            assert signs.count(True) == 1

    def test_is_integer(self):
        """Integral values are integers; proper fractions are not."""
        assert r(4, 2).is_integer()
        assert not r(1, 2).is_integer()
        assert Rational.zero().is_integer()

    def test_is_one(self):
        """Only one is one."""
        assert Rational.one().is_one()
        assert r(3, 3).is_one()
        assert not Rational.minus_one().is_one()

    def test_bool(self):
        """Zero is falsy, everything else truthy."""
        assert not Rational.zero()
        assert r(-1, 9)


class TestTryAsInteger:
    """Tests for narrowing to a 64-bit int."""

    def test_integral(self):
        """Integral values narrow to int."""
        assert r(-12, 3).try_as_integer() == -4

    def test_fraction(self):
        """Non-integers don't narrow."""
        assert r(1, 2).try_as_integer() is None

    def test_bounds(self):
        """Values at the 64-bit bounds narrow; values past them don't."""
        assert Rational(I64_MAX).try_as_integer() == I64_MAX
        assert Rational(I64_MIN).try_as_integer() == I64_MIN
        assert Rational(I64_MAX + 1).try_as_integer() is None
        assert Rational(I64_MIN - 1).try_as_integer() is None


class TestInvertAbs:
    """Tests for invert and abs."""

    def test_invert(self):
        """Inversion swaps the parts and keeps the sign."""
        assert r(2, 3).invert() == r(3, 2)
        assert r(-2, 3).invert() == r(-3, 2)
        assert Rational(-5).invert() == r(-1, 5)

    def test_invert_zero(self):
        """Zero has no inverse."""
        assert Rational.zero().invert() is None

    def test_abs(self):
        """abs clears the sign."""
        assert r(-3, 4).abs() == r(3, 4)
        assert abs(r(-3, 4)) == r(3, 4)

    def test_abs_non_negative_is_same_object(self):
        """abs of a non-negative value returns it unchanged."""
        x = r(3, 4)
        assert x.abs() is x
        z = Rational.zero()
        assert abs(z) is z


class TestArithmetic:
    """Tests for add, sub, mul and divide."""

    def test_add(self):
        assert r(1, 2).add(r(1, 3)) == r(5, 6)
        assert r(1, 2) + r(1, 2) == 1

    def test_sub(self):
        assert r(1, 2).sub(r(1, 3)) == r(1, 6)
        assert r(1, 3) - r(1, 2) == r(-1, 6)

    def test_mul(self):
        assert r(2, 3).mul(r(9, 4)) == r(3, 2)
        assert r(-2, 3) * r(3, 2) == -1

    def test_divide(self):
        assert r(1, 2).divide(r(1, 4)) == 2
        assert r(1, 2).divide(r(-3, 1)) == r(-1, 6)

    def test_divide_by_zero(self):
        """divide yields None for a zero divisor."""
        assert r(1, 2).divide(Rational.zero()) is None

    def test_truediv_operator(self):
        """The / operator raises where divide yields None."""
        assert r(1, 2) / 2 == r(1, 4)
        assert 1 / r(1, 2) == 2
        with pytest.raises(ZeroDivisionError):
            r(1, 2) / 0

    def test_int_coercion(self):
        """ints mix with rationals on either side."""
        assert 1 + r(1, 2) == r(3, 2)
        assert r(1, 2) + 1 == r(3, 2)
        assert 1 - r(1, 2) == r(1, 2)
        assert 3 * r(1, 3) == 1

    def test_negation(self):
        assert -r(1, 2) == r(-1, 2)
        assert -Rational.zero() == Rational.zero()

    def test_results_in_lowest_terms(self):
        """Results are reduced with a positive denominator."""
        x = r(1, 6) + r(1, 3)
        assert (x.numerator, x.denominator) == (1, 2)
        y = r(1, 2) - r(1, 2)
        assert (y.numerator, y.denominator) == (0, 1)

    def test_unsupported_operand(self):
        """Floats don't mix with exact rationals."""
        with pytest.raises(TypeError):
            r(1, 2) + 0.5


class TestComparison:
    """Tests for ordering, equality and hashing."""

    def test_ordering(self):
        assert r(1, 3) < r(1, 2)
        assert r(-1, 2) < Rational.zero()
        assert r(3, 2) >= r(6, 4)
        assert sorted([r(1, 2), r(-1, 1), r(1, 3)]) == [r(-1, 1), r(1, 3), r(1, 2)]

    def test_compare_with_int(self):
        assert r(3, 2) > 1
        assert r(3, 2) < 2
        assert r(4, 2) == 2

    def test_hash_agrees_with_eq(self):
        """Equal values hash equally and work as keys."""
        assert hash(r(2, 4)) == hash(r(1, 2))
        assert hash(Rational(2)) == hash(2)
        table = {r(1, 2): "half"}
        assert table[Rational.from_pair(3, 6)] == "half"
        assert len({r(1, 2), r(2, 4), r(-1, 2)}) == 2

    def test_not_equal_to_other_types(self):
        assert r(1, 2) != "1/2"
        assert r(1, 2) != 0.5


class TestDisplay:
    """Tests for the textual forms."""

    def test_str(self):
        assert str(r(-6, 4)) == "-3/2"
        assert str(Rational(7)) == "7"
        assert str(Rational.zero()) == "0"

    def test_repr(self):
        assert repr(r(1, 2)) == "Rational(1/2)"


class TestApproximateFloat:
    """Tests for the lossy float projection."""

    def test_simple(self):
        assert r(1, 2).to_approximate_float() == 0.5
        assert r(-3, 4).to_approximate_float() == -0.75

    def test_rounds_numerator_toward_zero(self):
        """Parts too wide for a float mantissa are truncated, not rounded up."""
        n = 2 ** 53 + 1
        assert Rational(n).to_approximate_float() == float(2 ** 53)
        # 2^54 - 1 rounds to nearest as 2^54; toward zero it stays below
        m = 2 ** 54 - 1
        assert Rational(m).to_approximate_float() < float(2 ** 54)
        assert Rational(-m).to_approximate_float() > -float(2 ** 54)

    def test_saturates(self):
        """Parts beyond the float range saturate at the largest float."""
        huge = Rational(10 ** 400)
        assert huge.to_approximate_float() == sys.float_info.max
        assert (-huge).to_approximate_float() == -sys.float_info.max
        ratio = Rational.from_pair(10 ** 400 + 1, 10 ** 400)
        assert math.isfinite(ratio.to_approximate_float())
