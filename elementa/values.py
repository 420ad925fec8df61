"""
Value algebra for symbolic computation.

ELEMENTA - Exact and Limit-Extended Math for Expression Tree Algebra

This module defines the extended value domain (exact rationals, floating
approximations, signed and complex infinities, undefined) and a total set
of arithmetic operators over it. Indeterminate forms such as 0/0 or
inf - inf are ordinary results, never exceptions:

    add(PositiveInfinity, NegativeInfinity)   # => Undefined
    invert(ZERO)                              # => ComplexInfinity
    power(Number(2), Number(-3))              # => Number(1/8)
"""

from fractions import Fraction
from typing import Union
import logging
import math

logger = logging.getLogger(__name__)

# Type aliases
RationalType = Union[int, Fraction]
NumericType = Union[int, float, Fraction]


# ============================================================
# Approximation Variants
# ============================================================

class Double:
    """
    64-bit floating point approximation variant.

    Unlike Approximation, a Double may transiently hold a non-finite float
    while an approximate operation is in flight; it is renormalized when
    lifted back into a Value with approx().
    """

    __slots__ = ('value',)

    def __init__(self, value: float):
        object.__setattr__(self, 'value', float(value))

    def __setattr__(self, name, val):
        raise AttributeError(f"Double is immutable: cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Double is immutable: cannot delete {name!r}")

    def __eq__(self, other):
        if isinstance(other, Double):
            return self.value == other.value
        return False

    def __hash__(self):
        return hash(('Double', self.value))

    def __repr__(self) -> str:
        return f"Double({self.value!r})"


ApproxType = Double


def _check_variants(op: str, a: ApproxType, b: ApproxType) -> None:
    if type(a) is not type(b):
        raise TypeError(
            f"{op}: approximation variants differ "
            f"({type(a).__name__} vs {type(b).__name__})"
        )


def _float_pow(a: float, b: float) -> float:
    """Floating exponentiation with IEEE-754 pow results instead of exceptions."""
    odd_integer = b.is_integer() and not math.isinf(b) and int(b) % 2 == 1
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and odd_integer:
            return -math.inf
        return math.inf
    except ValueError:
        if a == 0.0:
            # pow(+-0, y<0)
            return math.copysign(math.inf, a) if odd_integer else math.inf
        # negative base, non-integer exponent
        return math.nan


def approx_rational(r: RationalType) -> Double:
    """Coerce an exact rational to a Double, saturating to +-inf on overflow."""
    try:
        return Double(float(r))
    except OverflowError:
        return Double(math.inf if r > 0 else -math.inf)


def approx_negate(a: ApproxType) -> ApproxType:
    return Double(-a.value)


def approx_add(a: ApproxType, b: ApproxType) -> ApproxType:
    _check_variants("approx_add", a, b)
    return Double(a.value + b.value)


def approx_multiply(a: ApproxType, b: ApproxType) -> ApproxType:
    _check_variants("approx_multiply", a, b)
    return Double(a.value * b.value)


def approx_power(a: ApproxType, b: ApproxType) -> ApproxType:
    _check_variants("approx_power", a, b)
    return Double(_float_pow(a.value, b.value))


def approx_invert(a: ApproxType) -> ApproxType:
    if a.value == 0.0:
        return Double(math.copysign(math.inf, a.value))
    return Double(1.0 / a.value)


def approx_abs(a: ApproxType) -> ApproxType:
    return Double(abs(a.value))


def approx_is_zero(a: ApproxType) -> bool:
    return a.value == 0.0


def approx_is_one(a: ApproxType) -> bool:
    return a.value == 1.0


def approx_is_minus_one(a: ApproxType) -> bool:
    return a.value == -1.0


def approx_is_positive(a: ApproxType) -> bool:
    return a.value > 0.0


def approx_is_negative(a: ApproxType) -> bool:
    return a.value < 0.0


# ============================================================
# Value Type - closed tagged union
# ============================================================

class Value:
    """
    Base class of the extended value domain.

    The domain is closed: every value is a Number, an Approximation, or
    one of the singletons PositiveInfinity, NegativeInfinity,
    ComplexInfinity and Undefined. Values are immutable and compare
    structurally.
    """

    __slots__ = ()

    def __setattr__(self, name, val):
        raise AttributeError(f"{type(self).__name__} is immutable: cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable: cannot delete {name!r}")


class Number(Value):
    """
    Exact rational number.

    Examples:
        Number(3)                  # => Number(3)
        Number(Fraction(1, 2))     # => Number(1/2)
    """

    __slots__ = ('value',)

    def __init__(self, value: RationalType):
        if isinstance(value, float):
            raise TypeError("Number: exact value expected, use double() for floats")
        if isinstance(value, bool) or not isinstance(value, (int, Fraction)):
            raise TypeError(f"Number: int or Fraction expected, got {value!r}")
        object.__setattr__(self, 'value', Fraction(value))

    def __eq__(self, other):
        if isinstance(other, Number):
            return self.value == other.value
        return False

    def __hash__(self):
        return hash(('Number', self.value))

    def __repr__(self) -> str:
        return f"Number({self.value})"


class Approximation(Value):
    """
    Finite floating approximation.

    Non-finite floats never live here: build approximations with double()
    so that +inf, -inf and NaN map to the matching special values.
    """

    __slots__ = ('approx',)

    def __init__(self, approx: ApproxType):
        if not isinstance(approx, Double):
            raise TypeError(f"Approximation: unknown variant {approx!r}")
        if not math.isfinite(approx.value):
            raise ValueError(f"Approximation: non-finite value {approx.value!r}")
        object.__setattr__(self, 'approx', approx)

    def __eq__(self, other):
        if isinstance(other, Approximation):
            return self.approx == other.approx
        return False

    def __hash__(self):
        return hash(('Approximation', self.approx))

    def __repr__(self) -> str:
        return f"Approximation({self.approx!r})"


class _SpecialValue(Value):
    """Per-class singleton for the non-numeric members of the domain."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return type(self).__name__.lstrip('_')


class _PositiveInfinity(_SpecialValue):
    __slots__ = ()


class _NegativeInfinity(_SpecialValue):
    __slots__ = ()


class _ComplexInfinity(_SpecialValue):
    """Undirected infinity: infinite magnitude, no sign."""
    __slots__ = ()


class _Undefined(_SpecialValue):
    """Absorbing 'not a number' result."""
    __slots__ = ()


# Singleton instances
PositiveInfinity = _PositiveInfinity()
NegativeInfinity = _NegativeInfinity()
ComplexInfinity = _ComplexInfinity()
Undefined = _Undefined()

ZERO = Number(0)
ONE = Number(1)
MINUS_ONE = Number(-1)


def _unknown(op: str, v) -> TypeError:
    return TypeError(f"{op}: not a value: {v!r}")


# ============================================================
# Construction and Coercion
# ============================================================

def double(x: float) -> Value:
    """
    Build a Value from a raw float, normalizing non-finite floats.

    Examples:
        double(0.5)            # => Approximation(Double(0.5))
        double(float('inf'))   # => PositiveInfinity
        double(float('nan'))   # => Undefined
    """
    x = float(x)
    if math.isnan(x):
        return Undefined
    if math.isinf(x):
        return PositiveInfinity if x > 0 else NegativeInfinity
    return Approximation(Double(x))


def approx(a: ApproxType) -> Value:
    """Lift an approximation variant into a Value."""
    if isinstance(a, Double):
        return double(a.value)
    raise TypeError(f"approx: unknown variant {a!r}")


def rational(r: RationalType) -> ApproxType:
    """Coerce an exact rational into an approximation variant."""
    return approx_rational(r)


def value(x) -> Value:
    """
    Coerce a Python number into a Value.

    Values pass through unchanged; ints and Fractions become exact
    Numbers; floats go through double().
    """
    if isinstance(x, Value):
        return x
    if isinstance(x, bool):
        raise TypeError("value: bool is not a number")
    if isinstance(x, (int, Fraction)):
        return Number(x)
    if isinstance(x, float):
        return double(x)
    raise TypeError(f"value: cannot convert {x!r}")


# ============================================================
# Classification Predicates
# ============================================================

def is_zero(v: Value) -> bool:
    if isinstance(v, Number):
        return v.value == 0
    if isinstance(v, Approximation):
        return approx_is_zero(v.approx)
    if isinstance(v, _SpecialValue):
        return False
    raise _unknown("is_zero", v)


def is_one(v: Value) -> bool:
    if isinstance(v, Number):
        return v.value == 1
    if isinstance(v, Approximation):
        return approx_is_one(v.approx)
    if isinstance(v, _SpecialValue):
        return False
    raise _unknown("is_one", v)


def is_minus_one(v: Value) -> bool:
    if isinstance(v, Number):
        return v.value == -1
    if isinstance(v, Approximation):
        return approx_is_minus_one(v.approx)
    if isinstance(v, _SpecialValue):
        return False
    raise _unknown("is_minus_one", v)


def is_positive(v: Value) -> bool:
    """True for positive finite values and PositiveInfinity."""
    if isinstance(v, Number):
        return v.value > 0
    if isinstance(v, Approximation):
        return approx_is_positive(v.approx)
    if isinstance(v, _SpecialValue):
        return v is PositiveInfinity
    raise _unknown("is_positive", v)


def is_negative(v: Value) -> bool:
    """True for negative finite values and NegativeInfinity."""
    if isinstance(v, Number):
        return v.value < 0
    if isinstance(v, Approximation):
        return approx_is_negative(v.approx)
    if isinstance(v, _SpecialValue):
        return v is NegativeInfinity
    raise _unknown("is_negative", v)


def is_integer(v: Value) -> bool:
    if isinstance(v, Number):
        return v.value.denominator == 1
    if isinstance(v, Value):
        return False
    raise _unknown("is_integer", v)


def is_infinity(v: Value) -> bool:
    if isinstance(v, Value):
        return v is PositiveInfinity or v is NegativeInfinity or v is ComplexInfinity
    raise _unknown("is_infinity", v)


# ============================================================
# Unary Operators
# ============================================================

def negate(v: Value) -> Value:
    if isinstance(v, Number):
        return Number(-v.value)
    if isinstance(v, Approximation):
        return approx(approx_negate(v.approx))
    if v is PositiveInfinity:
        return NegativeInfinity
    if v is NegativeInfinity:
        return PositiveInfinity
    if v is ComplexInfinity or v is Undefined:
        return v
    raise _unknown("negate", v)


def absolute(v: Value) -> Value:
    """Magnitude of a value; every infinity has magnitude PositiveInfinity."""
    if isinstance(v, Number):
        return Number(-v.value) if v.value < 0 else v
    if isinstance(v, Approximation):
        return approx(approx_abs(v.approx))
    if is_infinity(v):
        return PositiveInfinity
    if v is Undefined:
        return Undefined
    raise _unknown("absolute", v)


def invert(v: Value) -> Value:
    """
    Reciprocal of a value.

    Zero inverts to ComplexInfinity and every infinity inverts to exact zero.
    """
    if is_zero(v):
        return ComplexInfinity
    if isinstance(v, Number):
        return Number(1 / v.value)
    if isinstance(v, Approximation):
        return approx(approx_invert(v.approx))
    if is_infinity(v):
        return ZERO
    if v is Undefined:
        return Undefined
    raise _unknown("invert", v)


# ============================================================
# Binary Operators
# ============================================================

def add(a: Value, b: Value) -> Value:
    """
    Sum of two values.

    Undefined absorbs, zero is the identity, finite values add with
    exact-to-approximate coercion, and infinities follow the extended
    rules (inf - inf and any sum with ComplexInfinity and another
    infinity are Undefined).
    """
    if a is Undefined or b is Undefined:
        return Undefined
    if is_zero(a):
        return b
    if is_zero(b):
        return a
    if isinstance(a, Number) and isinstance(b, Number):
        return Number(a.value + b.value)
    if isinstance(a, Approximation) and isinstance(b, Approximation):
        return approx(approx_add(a.approx, b.approx))
    if isinstance(a, Number) and isinstance(b, Approximation):
        return approx(approx_add(rational(a.value), b.approx))
    if isinstance(a, Approximation) and isinstance(b, Number):
        return approx(approx_add(a.approx, rational(b.value)))
    if a is ComplexInfinity or b is ComplexInfinity:
        if is_infinity(a) and is_infinity(b):
            return Undefined
        return ComplexInfinity
    if {a, b} == {PositiveInfinity, NegativeInfinity}:
        return Undefined
    if a is PositiveInfinity or b is PositiveInfinity:
        return PositiveInfinity
    if a is NegativeInfinity or b is NegativeInfinity:
        return NegativeInfinity
    raise _unknown("add", (a, b))


def multiply(a: Value, b: Value) -> Value:
    """
    Product of two values.

    Rules apply in order: Undefined absorbs, one is the identity, zero
    absorbs everything (including infinities), finite values multiply,
    ComplexInfinity absorbs, and signed infinities take the sign of the
    product.
    """
    if a is Undefined or b is Undefined:
        return Undefined
    if is_one(a):
        return b
    if is_one(b):
        return a
    if is_zero(a) or is_zero(b):
        if is_infinity(a) or is_infinity(b):
            logger.debug("multiply: zero absorbs infinity in %r * %r", a, b)
        return ZERO
    if isinstance(a, Number) and isinstance(b, Number):
        return Number(a.value * b.value)
    if isinstance(a, Approximation) and isinstance(b, Approximation):
        return approx(approx_multiply(a.approx, b.approx))
    if isinstance(a, Number) and isinstance(b, Approximation):
        return approx(approx_multiply(rational(a.value), b.approx))
    if isinstance(a, Approximation) and isinstance(b, Number):
        return approx(approx_multiply(a.approx, rational(b.value)))
    if a is ComplexInfinity or b is ComplexInfinity:
        return ComplexInfinity
    if not (is_infinity(a) or is_infinity(b)):
        raise _unknown("multiply", (a, b))
    # at least one signed infinity, every remaining operand carries a sign
    if is_negative(a) == is_negative(b):
        return PositiveInfinity
    return NegativeInfinity


def subtract(a: Value, b: Value) -> Value:
    return add(a, negate(b))


def divide(a: Value, b: Value) -> Value:
    return multiply(a, invert(b))


def _float_operand(v: Value) -> ApproxType:
    if isinstance(v, Number):
        return rational(v.value)
    if isinstance(v, Approximation):
        return v.approx
    if v is PositiveInfinity:
        return Double(math.inf)
    if v is NegativeInfinity:
        return Double(-math.inf)
    raise _unknown("power", v)


def power(base: Value, exponent: Value) -> Value:
    """
    Raise a value to a power, first matching rule wins.

    1. Undefined operand -> Undefined
    2. 0^0 -> Undefined
    3. x^0 -> one
    4. x^1 -> x, 1^x -> one
    5. exact base, exact integer exponent -> exact result
       (0^negative -> ComplexInfinity)
    6. otherwise -> floating pow, renormalized

    ComplexInfinity has no float rendering: raised to a positive power it
    stays ComplexInfinity, to a negative power it becomes zero, anything
    else involving it is Undefined.
    """
    if base is Undefined or exponent is Undefined:
        return Undefined
    if is_zero(base) and is_zero(exponent):
        return Undefined
    if is_zero(exponent):
        return ONE
    if is_one(exponent):
        return base
    if is_one(base):
        return ONE
    if isinstance(base, Number) and is_integer(exponent):
        n = exponent.value.numerator
        if n < 0:
            if base.value == 0:
                return ComplexInfinity
            return Number((1 / base.value) ** -n)
        return Number(base.value ** n)
    if base is ComplexInfinity:
        if exponent is not ComplexInfinity and not is_infinity(exponent):
            if is_positive(exponent):
                return ComplexInfinity
            if is_negative(exponent):
                return ZERO
        return Undefined
    if exponent is ComplexInfinity:
        return Undefined
    result = approx_power(_float_operand(base), _float_operand(exponent))
    if not math.isfinite(result.value):
        logger.debug("power: %r ^ %r is non-finite (%r)", base, exponent, result.value)
    return approx(result)


# ============================================================
# Ordering
# ============================================================

def _ordered(v: Value) -> NumericType:
    if isinstance(v, Number):
        return v.value
    return v.approx.value


def maximum(a: Value, b: Value) -> Value:
    """
    Larger of two values.

    Undefined absorbs, PositiveInfinity dominates, NegativeInfinity is the
    identity. ComplexInfinity is unordered and yields Undefined.
    """
    if a is Undefined or b is Undefined:
        return Undefined
    if a is ComplexInfinity or b is ComplexInfinity:
        return Undefined
    if a is PositiveInfinity or b is PositiveInfinity:
        return PositiveInfinity
    if a is NegativeInfinity:
        return b
    if b is NegativeInfinity:
        return a
    if isinstance(a, (Number, Approximation)) and isinstance(b, (Number, Approximation)):
        return b if _ordered(b) > _ordered(a) else a
    raise _unknown("maximum", (a, b))


def minimum(a: Value, b: Value) -> Value:
    """Smaller of two values, mirroring maximum()."""
    if a is Undefined or b is Undefined:
        return Undefined
    if a is ComplexInfinity or b is ComplexInfinity:
        return Undefined
    if a is NegativeInfinity or b is NegativeInfinity:
        return NegativeInfinity
    if a is PositiveInfinity:
        return b
    if b is PositiveInfinity:
        return a
    if isinstance(a, (Number, Approximation)) and isinstance(b, (Number, Approximation)):
        return b if _ordered(b) < _ordered(a) else a
    raise _unknown("minimum", (a, b))
