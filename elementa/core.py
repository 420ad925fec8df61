"""
Smart constructors for expression trees.

Every node kind is built here so that structural invariants hold for all
trees the library produces:

    sum_of([])           # => zero
    sum_of([x])          # => x
    product_of([])       # => one
    power(x, one)        # => x
    power(one, x)        # => one

Sums and products are flattened and their numeric leaves folded through
the value algebra into a single leading constant. Nothing else is
reordered or combined; canonical simplification belongs to the caller.

Examples:
    from elementa.core import symbol, number, add, divide

    x, y = symbol("x"), symbol("y")
    add(x, number(0))          # => x
    divide(x, y)               # => Product(factors=(x, Power(base=y, exponent=Number(-1))))
"""

from typing import Iterable, List, Sequence

from . import values
from .expression import (
    Expression, Number, Identifier, Sum, Product, Power, Function, FunctionN,
    Symbol, Constant, Func,
)


# ============================================================
# Leaves and Shared Constants
# ============================================================

def symbol(name: str) -> Identifier:
    """Create a symbol leaf: symbol("x")."""
    return Identifier(Symbol(name))


def number(x) -> Number:
    """
    Create a numeric leaf from a Python number or a Value.

    Examples:
        number(3)                # exact
        number(Fraction(1, 3))   # exact
        number(0.5)              # approximation
        number(float('inf'))     # PositiveInfinity
    """
    return Number(values.value(x))


def constant(c: Constant) -> Identifier:
    return Identifier(c)


zero = Number(values.ZERO)
one = Number(values.ONE)
two = Number(values.Number(2))
minus_one = Number(values.MINUS_ONE)

undefined = Number(values.Undefined)
infinity = Number(values.PositiveInfinity)
negative_infinity = Number(values.NegativeInfinity)
complex_infinity = Number(values.ComplexInfinity)

pi = Identifier(Constant.PI)
e = Identifier(Constant.E)
i = Identifier(Constant.I)


# ============================================================
# Sums and Products
# ============================================================

def _flatten(kind: type, xs: Iterable[Expression]) -> List[Expression]:
    flat = []
    for x in xs:
        if isinstance(x, kind):
            flat.extend(x.terms if kind is Sum else x.factors)
        else:
            flat.append(x)
    return flat


def _fold_numbers(op, identity: values.Value, xs: List[Expression]):
    """Split numeric leaves out of xs and fold them with op."""
    acc: values.Value = identity
    rest = []
    for x in xs:
        if isinstance(x, Number):
            acc = op(acc, x.value)
        else:
            rest.append(x)
    return acc, rest


def sum_of(xs: Iterable[Expression]) -> Expression:
    """
    Build a sum.

    Nested sums are flattened, numeric terms are added into one leading
    constant (dropped when zero), and an undefined constant absorbs the
    whole sum. Empty sums are zero, single-term sums are the term itself.
    """
    acc, rest = _fold_numbers(values.add, values.ZERO, _flatten(Sum, xs))
    if acc is values.Undefined:
        return undefined
    terms = rest if values.is_zero(acc) else [Number(acc)] + rest
    if not terms:
        return zero
    if len(terms) == 1:
        return terms[0]
    return Sum(terms)


def product_of(xs: Iterable[Expression]) -> Expression:
    """
    Build a product.

    Nested products are flattened and numeric factors multiplied into one
    leading constant. An undefined constant absorbs, a zero constant makes
    the product zero, a constant one is dropped. Empty products are one,
    single-factor products are the factor itself.
    """
    acc, rest = _fold_numbers(values.multiply, values.ONE, _flatten(Product, xs))
    if acc is values.Undefined:
        return undefined
    if values.is_zero(acc):
        return zero
    factors = rest if values.is_one(acc) else [Number(acc)] + rest
    if not factors:
        return one
    if len(factors) == 1:
        return factors[0]
    return Product(factors)


def add(x: Expression, y: Expression) -> Expression:
    return sum_of([x, y])


def plus(x: Expression) -> Expression:
    return x


def negate(x: Expression) -> Expression:
    return product_of([minus_one, x])


def subtract(x: Expression, y: Expression) -> Expression:
    return sum_of([x, negate(y)])


def multiply(x: Expression, y: Expression) -> Expression:
    return product_of([x, y])


# ============================================================
# Powers
# ============================================================

def power(base: Expression, exponent: Expression) -> Expression:
    """
    Build a power.

    Numeric operands fold through the value algebra, so power(zero, zero)
    is undefined. Otherwise an undefined operand absorbs, x^0 is one,
    x^1 is x and 1^x is one.
    """
    if isinstance(base, Number) and isinstance(exponent, Number):
        return Number(values.power(base.value, exponent.value))
    if base == undefined or exponent == undefined:
        return undefined
    if _is_number(values.is_zero, exponent):
        return one
    if _is_number(values.is_one, exponent):
        return base
    if _is_number(values.is_one, base):
        return one
    return Power(base, exponent)


def _is_number(predicate, x: Expression) -> bool:
    return isinstance(x, Number) and predicate(x.value)


def invert(x: Expression) -> Expression:
    return power(x, minus_one)


def divide(x: Expression, y: Expression) -> Expression:
    return multiply(x, invert(y))


# ============================================================
# Function Application
# ============================================================

def apply(f: Func, x: Expression) -> Function:
    return Function(f, x)


def apply_n(f: Func, xs: Sequence[Expression]) -> FunctionN:
    return FunctionN(f, xs)
