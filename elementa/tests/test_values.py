"""Tests for the value algebra."""

import logging
import math
from fractions import Fraction

import pytest
from elementa.values import (
    Number, Approximation, Double,
    PositiveInfinity, NegativeInfinity, ComplexInfinity, Undefined,
    ZERO, ONE, MINUS_ONE,
    double, approx, value,
    is_zero, is_one, is_minus_one, is_positive, is_negative,
    is_integer, is_infinity,
    negate, absolute, invert, add, subtract, multiply, divide, power,
    maximum, minimum,
    approx_add, approx_multiply, approx_power,
)


def q(n, d=1):
    return Number(Fraction(n, d))


# Representative members of the whole domain
DOMAIN = [
    Number(3), Number(-2), ZERO, ONE, MINUS_ONE, q(1, 2),
    double(2.5), double(-0.5), double(0.0),
    PositiveInfinity, NegativeInfinity, ComplexInfinity, Undefined,
]

FINITE_NONZERO = [Number(3), Number(-2), q(1, 2), double(2.5), double(-0.5)]


class TestConstruction:
    """Tests for value constructors and normalization."""

    def test_double_finite(self):
        """double() wraps finite floats."""
        assert double(0.5) == Approximation(Double(0.5))

    def test_double_positive_infinity(self):
        """+inf normalizes to PositiveInfinity."""
        assert double(math.inf) is PositiveInfinity

    def test_double_negative_infinity(self):
        """-inf normalizes to NegativeInfinity."""
        assert double(-math.inf) is NegativeInfinity

    def test_double_nan(self):
        """NaN normalizes to Undefined."""
        assert double(math.nan) is Undefined

    def test_approx_lifts_through_double(self):
        """approx() normalizes non-finite variants."""
        assert approx(Double(math.inf)) is PositiveInfinity
        assert approx(Double(1.0)) == double(1.0)

    def test_approximation_rejects_non_finite(self):
        """Approximation never holds a non-finite float."""
        with pytest.raises(ValueError):
            Approximation(Double(math.inf))
        with pytest.raises(ValueError):
            Approximation(Double(math.nan))

    def test_number_rejects_float(self):
        """Number is exact only."""
        with pytest.raises(TypeError):
            Number(0.5)

    @pytest.mark.parametrize("raw", ["1/2", True, None, 1j])
    def test_number_rejects_non_rationals(self, raw):
        """Number takes only ints and Fractions."""
        with pytest.raises(TypeError):
            Number(raw)

    def test_value_coercion(self):
        """value() coerces Python numbers."""
        assert value(3) == Number(3)
        assert value(Fraction(1, 3)) == q(1, 3)
        assert value(0.25) == double(0.25)
        assert value(float('-inf')) is NegativeInfinity
        assert value(Undefined) is Undefined

    def test_value_rejects_other_types(self):
        """value() rejects non-numbers."""
        with pytest.raises(TypeError):
            value("x")
        with pytest.raises(TypeError):
            value(True)

    def test_singletons(self):
        """Special values are process-wide singletons."""
        assert type(PositiveInfinity)() is PositiveInfinity
        assert type(Undefined)() is Undefined
        assert PositiveInfinity is not NegativeInfinity

    def test_repr(self):
        """Values have readable reprs."""
        assert repr(PositiveInfinity) == "PositiveInfinity"
        assert repr(ComplexInfinity) == "ComplexInfinity"
        assert repr(q(1, 2)) == "Number(1/2)"
        assert repr(double(0.5)) == "Approximation(Double(0.5))"

    def test_structural_equality_and_hash(self):
        """Equal values are interchangeable as set members."""
        assert Number(1) == q(2, 2)
        assert len({Number(1), q(2, 2), ONE}) == 1
        assert Number(1) != double(1.0)


class TestPredicates:
    """Tests for the sign classification partition."""

    @pytest.mark.parametrize("v, expected", [
        # (zero, one, minus_one, positive, negative)
        (Number(3), (False, False, False, True, False)),
        (Number(-2), (False, False, False, False, True)),
        (ZERO, (True, False, False, False, False)),
        (ONE, (False, True, False, True, False)),
        (MINUS_ONE, (False, False, True, False, True)),
        (double(2.5), (False, False, False, True, False)),
        (double(-0.5), (False, False, False, False, True)),
        (double(0.0), (True, False, False, False, False)),
        (double(1.0), (False, True, False, True, False)),
        (double(-1.0), (False, False, True, False, True)),
        (PositiveInfinity, (False, False, False, True, False)),
        (NegativeInfinity, (False, False, False, False, True)),
        (ComplexInfinity, (False, False, False, False, False)),
        (Undefined, (False, False, False, False, False)),
    ])
    def test_partition(self, v, expected):
        """Exactly the expected predicates hold."""
        actual = (is_zero(v), is_one(v), is_minus_one(v), is_positive(v), is_negative(v))
        assert actual == expected

    def test_is_integer(self):
        """Only exact integral numbers are integers."""
        assert is_integer(Number(-4))
        assert not is_integer(q(1, 2))
        assert not is_integer(double(2.0))
        assert not is_integer(PositiveInfinity)

    def test_is_infinity(self):
        """The three infinities are infinite."""
        assert is_infinity(PositiveInfinity)
        assert is_infinity(NegativeInfinity)
        assert is_infinity(ComplexInfinity)
        assert not is_infinity(Undefined)
        assert not is_infinity(Number(10 ** 100))


class TestUnary:
    """Tests for negate, absolute and invert."""

    def test_negate(self):
        """negate flips signs and swaps signed infinities."""
        assert negate(q(1, 3)) == q(-1, 3)
        assert negate(double(2.5)) == double(-2.5)
        assert negate(PositiveInfinity) is NegativeInfinity
        assert negate(NegativeInfinity) is PositiveInfinity

    def test_negate_fixed_points(self):
        """ComplexInfinity and Undefined are fixed by negate."""
        assert negate(ComplexInfinity) is ComplexInfinity
        assert negate(Undefined) is Undefined

    def test_absolute(self):
        """absolute returns magnitudes."""
        assert absolute(Number(-5)) == Number(5)
        assert absolute(q(2, 3)) == q(2, 3)
        assert absolute(double(-0.5)) == double(0.5)
        assert absolute(Undefined) is Undefined

    @pytest.mark.parametrize("v", [PositiveInfinity, NegativeInfinity, ComplexInfinity])
    def test_absolute_infinities(self, v):
        """Every infinity has magnitude PositiveInfinity."""
        assert absolute(v) is PositiveInfinity

    def test_invert_zero(self):
        """invert(0) is ComplexInfinity."""
        assert invert(ZERO) is ComplexInfinity
        assert invert(double(0.0)) is ComplexInfinity

    def test_invert_finite(self):
        """Finite values invert to their reciprocals."""
        assert invert(Number(4)) == q(1, 4)
        assert invert(q(-2, 3)) == q(-3, 2)
        assert invert(double(0.5)) == double(2.0)

    @pytest.mark.parametrize("v", [PositiveInfinity, NegativeInfinity, ComplexInfinity])
    def test_invert_infinities(self, v):
        """Infinities invert to exact zero."""
        assert invert(v) == ZERO

    def test_invert_undefined(self):
        """Undefined stays undefined."""
        assert invert(Undefined) is Undefined


class TestAdd:
    """Tests for the sum of two values."""

    def test_exact(self):
        """1/2 + 1/3 = 5/6."""
        assert add(q(1, 2), q(1, 3)) == q(5, 6)

    @pytest.mark.parametrize("v", DOMAIN)
    def test_zero_identity(self, v):
        """Zero is the identity for every value."""
        assert add(ZERO, v) == v

    @pytest.mark.parametrize("v", DOMAIN)
    def test_undefined_absorbs(self, v):
        """Undefined absorbs every value."""
        assert add(Undefined, v) is Undefined
        assert add(v, Undefined) is Undefined

    def test_mixed_coerces_to_approximation(self):
        """Exact plus approximate is approximate."""
        assert add(Number(1), double(0.5)) == double(1.5)
        assert add(double(0.5), q(1, 4)) == double(0.75)

    def test_approximation_overflow(self):
        """Overflowing approximate sums renormalize."""
        assert add(double(1e308), double(1e308)) is PositiveInfinity

    def test_complex_infinity(self):
        """ComplexInfinity plus any infinity is undefined, plus finite stays."""
        assert add(ComplexInfinity, ComplexInfinity) is Undefined
        assert add(ComplexInfinity, PositiveInfinity) is Undefined
        assert add(NegativeInfinity, ComplexInfinity) is Undefined
        assert add(ComplexInfinity, Number(5)) is ComplexInfinity
        assert add(double(-1.5), ComplexInfinity) is ComplexInfinity

    def test_signed_infinities(self):
        """inf - inf is undefined, otherwise the infinity wins."""
        assert add(PositiveInfinity, NegativeInfinity) is Undefined
        assert add(NegativeInfinity, PositiveInfinity) is Undefined
        assert add(PositiveInfinity, double(-3.0)) is PositiveInfinity
        assert add(PositiveInfinity, PositiveInfinity) is PositiveInfinity
        assert add(Number(2), NegativeInfinity) is NegativeInfinity

    def test_subtract(self):
        """subtract is add of the negation."""
        assert subtract(Number(1), q(1, 4)) == q(3, 4)
        assert subtract(PositiveInfinity, PositiveInfinity) is Undefined


class TestMultiply:
    """Tests for the product of two values."""

    def test_exact(self):
        """Exact products stay exact."""
        assert multiply(q(2, 3), q(3, 4)) == q(1, 2)

    @pytest.mark.parametrize("v", DOMAIN)
    def test_one_identity(self, v):
        """One is the identity for every value."""
        assert multiply(ONE, v) == v
        assert multiply(v, ONE) == v

    @pytest.mark.parametrize("v", DOMAIN)
    def test_undefined_absorbs(self, v):
        """Undefined absorbs every value."""
        assert multiply(Undefined, v) is Undefined
        assert multiply(v, Undefined) is Undefined

    @pytest.mark.parametrize("v", FINITE_NONZERO + [PositiveInfinity, NegativeInfinity])
    def test_complex_infinity_absorbs(self, v):
        """ComplexInfinity absorbs nonzero values."""
        assert multiply(ComplexInfinity, v) is ComplexInfinity
        assert multiply(v, ComplexInfinity) is ComplexInfinity

    def test_zero_absorbs_finite(self):
        """Zero times a finite value is exact zero."""
        assert multiply(ZERO, Number(7)) == ZERO
        assert multiply(double(0.0), Number(5)) == ZERO

    @pytest.mark.parametrize("v", [PositiveInfinity, NegativeInfinity, ComplexInfinity])
    def test_zero_absorbs_infinity(self, v):
        """Zero absorption is checked before the infinity rules."""
        assert multiply(ZERO, v) == ZERO
        assert multiply(v, double(0.0)) == ZERO

    def test_zero_absorbing_infinity_is_logged(self, caplog):
        """The zero-times-infinity choice leaves a debug record."""
        with caplog.at_level(logging.DEBUG, logger="elementa.values"):
            multiply(ZERO, PositiveInfinity)
        assert "zero absorbs infinity" in caplog.text

    def test_mixed_coerces_to_approximation(self):
        """Exact times approximate is approximate."""
        assert multiply(Number(3), double(0.5)) == double(1.5)

    def test_sign_rule(self):
        """Signed infinities take the sign of the product."""
        assert multiply(PositiveInfinity, Number(-3)) is NegativeInfinity
        assert multiply(PositiveInfinity, q(1, 2)) is PositiveInfinity
        assert multiply(double(-2.0), NegativeInfinity) is PositiveInfinity
        assert multiply(NegativeInfinity, double(2.0)) is NegativeInfinity
        assert multiply(NegativeInfinity, NegativeInfinity) is PositiveInfinity
        assert multiply(PositiveInfinity, NegativeInfinity) is NegativeInfinity

    def test_divide(self):
        """divide multiplies by the reciprocal."""
        assert divide(Number(1), Number(3)) == q(1, 3)
        assert divide(Number(1), ZERO) is ComplexInfinity
        assert divide(Number(5), PositiveInfinity) == ZERO


class TestPower:
    """Tests for exponentiation."""

    def test_zero_to_zero(self):
        """0^0 is undefined."""
        assert power(ZERO, ZERO) is Undefined
        assert power(double(0.0), ZERO) is Undefined

    def test_undefined_operand(self):
        """Undefined operands absorb, even against a zero exponent."""
        assert power(Undefined, ZERO) is Undefined
        assert power(Number(2), Undefined) is Undefined

    @pytest.mark.parametrize("v", [Number(5), double(2.5), PositiveInfinity, ComplexInfinity])
    def test_zero_exponent(self, v):
        """x^0 is one for nonzero x, including infinities."""
        assert power(v, ZERO) == ONE

    def test_one_exponent_and_base(self):
        """x^1 is x and 1^x is one."""
        assert power(double(2.5), ONE) == double(2.5)
        assert power(ComplexInfinity, ONE) is ComplexInfinity
        assert power(ONE, PositiveInfinity) == ONE
        assert power(ONE, q(1, 2)) == ONE

    def test_exact_integer_exponent(self):
        """Exact bases with integer exponents stay exact."""
        assert power(Number(2), Number(10)) == Number(1024)
        assert power(q(2, 3), Number(3)) == q(8, 27)
        assert power(Number(2), Number(-3)) == q(1, 8)
        assert power(q(-1, 2), Number(-3)) == Number(-8)

    def test_zero_negative_exponent(self):
        """0^-n is ComplexInfinity."""
        assert power(ZERO, Number(-2)) is ComplexInfinity

    def test_fractional_exponent(self):
        """Non-integer exponents fall back to floating pow."""
        assert power(Number(4), q(1, 2)) == double(2.0)
        assert power(double(9.0), q(1, 2)) == double(3.0)
        assert power(double(2.0), Number(3)) == double(8.0)

    def test_negative_base_fractional_exponent(self):
        """A real root of a negative base is undefined."""
        assert power(Number(-8), q(1, 3)) is Undefined

    def test_float_zero_negative_exponent(self):
        """Approximate zero to a negative power follows IEEE pow."""
        assert power(double(0.0), Number(-1)) is PositiveInfinity
        assert power(double(-0.0), Number(-1)) is NegativeInfinity
        assert power(double(-0.0), Number(-2)) is PositiveInfinity

    def test_float_overflow(self):
        """Overflow renormalizes to a signed infinity."""
        assert power(Number(10), double(400.0)) is PositiveInfinity
        assert power(double(-10.0), Number(401)) is NegativeInfinity
        assert power(double(-10.0), Number(400)) is PositiveInfinity

    def test_signed_infinity_base(self):
        """Signed infinities coerce to IEEE infinities."""
        assert power(PositiveInfinity, Number(2)) is PositiveInfinity
        assert power(NegativeInfinity, Number(3)) is NegativeInfinity
        assert power(NegativeInfinity, Number(2)) is PositiveInfinity
        assert is_zero(power(PositiveInfinity, Number(-1)))

    def test_signed_infinity_exponent(self):
        """Finite bases to infinite powers follow IEEE pow."""
        assert power(Number(2), PositiveInfinity) is PositiveInfinity
        assert is_zero(power(q(1, 2), PositiveInfinity))
        assert is_zero(power(Number(2), NegativeInfinity))

    def test_complex_infinity(self):
        """ComplexInfinity keeps its magnitude or vanishes."""
        assert power(ComplexInfinity, Number(2)) is ComplexInfinity
        assert power(ComplexInfinity, double(0.5)) is ComplexInfinity
        assert power(ComplexInfinity, Number(-1)) == ZERO
        assert power(ComplexInfinity, PositiveInfinity) is Undefined
        assert power(Number(2), ComplexInfinity) is Undefined


class TestApproximationVariants:
    """Tests for approximation variant checks."""

    class Other(Double):
        """A second approximation representation."""

    def test_same_variant(self):
        """Matching variants combine."""
        assert approx_add(Double(1.0), Double(2.0)) == Double(3.0)

    def test_mismatched_variants_raise(self):
        """Mismatched variants are a caller defect."""
        with pytest.raises(TypeError):
            approx_add(Double(1.0), self.Other(2.0))
        with pytest.raises(TypeError):
            approx_multiply(self.Other(1.0), Double(2.0))
        with pytest.raises(TypeError):
            approx_power(Double(1.0), self.Other(2.0))


class TestOrdering:
    """Tests for maximum and minimum."""

    def test_finite(self):
        """Finite values compare numerically."""
        assert maximum(Number(2), Number(3)) == Number(3)
        assert minimum(Number(2), Number(3)) == Number(2)
        assert maximum(q(1, 2), double(0.75)) == double(0.75)
        assert minimum(q(1, 2), double(0.75)) == q(1, 2)

    def test_infinities(self):
        """Signed infinities dominate or act as identities."""
        assert maximum(Number(2), PositiveInfinity) is PositiveInfinity
        assert maximum(NegativeInfinity, Number(2)) == Number(2)
        assert minimum(Number(2), NegativeInfinity) is NegativeInfinity
        assert minimum(PositiveInfinity, Number(2)) == Number(2)

    def test_undefined_and_complex_infinity(self):
        """Undefined absorbs and ComplexInfinity is unordered."""
        assert maximum(Undefined, PositiveInfinity) is Undefined
        assert minimum(Number(1), Undefined) is Undefined
        assert maximum(ComplexInfinity, Number(1)) is Undefined
        assert minimum(ComplexInfinity, Number(1)) is Undefined


class TestExhaustiveness:
    """Objects outside the value domain are rejected."""

    def test_rejects_foreign_objects(self):
        """Dispatchers raise TypeError for non-values."""
        with pytest.raises(TypeError):
            negate(3)
        with pytest.raises(TypeError):
            add(2, 3)
        with pytest.raises(TypeError):
            multiply(2, 3)
        with pytest.raises(TypeError):
            power(2, 3)

    @pytest.mark.parametrize("predicate", [
        is_zero, is_one, is_minus_one, is_positive, is_negative,
        is_integer, is_infinity,
    ])
    def test_predicates_reject_foreign_objects(self, predicate):
        """Predicates raise TypeError instead of answering False."""
        with pytest.raises(TypeError):
            predicate(3)
        with pytest.raises(TypeError):
            predicate(Double(1.0))


class TestImmutability:
    """Values and variants cannot be changed after construction."""

    def test_number_frozen(self):
        """Shared exact constants cannot be reassigned."""
        with pytest.raises(AttributeError):
            ZERO.value = Fraction(5)
        with pytest.raises(AttributeError):
            del ONE.value
        assert ZERO == Number(0)

    def test_approximation_frozen(self):
        """Approximations cannot be rebound to another variant."""
        a = double(1.5)
        with pytest.raises(AttributeError):
            a.approx = Double(math.inf)

    def test_double_frozen(self):
        """A Double held by an Approximation stays finite."""
        d = Double(1.0)
        a = Approximation(d)
        with pytest.raises(AttributeError):
            d.value = math.inf
        assert a == double(1.0)

    def test_singletons_frozen(self):
        """Special values accept no attributes."""
        with pytest.raises(AttributeError):
            Undefined.value = 0

    def test_hash_stable_in_set(self):
        """A value keeps its hash once stored."""
        v = Number(Fraction(1, 2))
        s = {v}
        with pytest.raises(AttributeError):
            v.value = Fraction(3)
        assert Number(Fraction(1, 2)) in s
