"""
Structural operations over expression trees.

These work on the shape of a tree only: arity and operand access,
occurs-checks, one-level mapping, substitution and the syntactic
numerator/denominator split. Nothing here evaluates or simplifies;
rebuilt nodes go through the smart constructors in elementa.core.

All traversals are recursive, so tree depth is bounded by the
interpreter's recursion limit.
"""

from typing import Callable, Container

from . import core
from .expression import (
    Expression, Number, Identifier, Sum, Product, Power, Function, FunctionN,
    is_integer_literal,
)
from . import values


def _unknown(op: str, expr) -> TypeError:
    return TypeError(f"{op}: not an expression: {expr!r}")


# ============================================================
# Arity and Operand Access
# ============================================================

def number_of_operands(expr: Expression) -> int:
    """
    Count the immediate children of an expression.

    Sum, Product and FunctionN have as many operands as children, Power
    has two, Function has one, leaves have none.
    """
    if isinstance(expr, Sum):
        return len(expr.terms)
    if isinstance(expr, Product):
        return len(expr.factors)
    if isinstance(expr, FunctionN):
        return len(expr.operands)
    if isinstance(expr, Power):
        return 2
    if isinstance(expr, Function):
        return 1
    if isinstance(expr, (Number, Identifier)):
        return 0
    raise _unknown("number_of_operands", expr)


def operand(i: int, expr: Expression) -> Expression:
    """
    Return the i-th immediate child of an expression.

    Power operand 0 is the base and operand 1 the exponent; Function
    operand 0 is its argument.

    Raises:
        TypeError: If expr is a leaf
        IndexError: If i is outside [0, number_of_operands(expr))
    """
    if isinstance(expr, (Number, Identifier)):
        raise TypeError("operand: numbers and identifiers have no operands")
    if not 0 <= i < number_of_operands(expr):
        raise IndexError(f"operand: no such operand {i} in {expr!r}")
    if isinstance(expr, Sum):
        return expr.terms[i]
    if isinstance(expr, Product):
        return expr.factors[i]
    if isinstance(expr, FunctionN):
        return expr.operands[i]
    if isinstance(expr, Power):
        return expr.base if i == 0 else expr.exponent
    if isinstance(expr, Function):
        return expr.operand
    raise _unknown("operand", expr)


# ============================================================
# Occurs Check
# ============================================================

def free_of(symbol: Expression, expr: Expression) -> bool:
    """
    Check that symbol does not occur anywhere in expr.

    Occurrence is structural equality with any subtree, so symbol may be
    any expression, not only an identifier.

    Examples:
        free_of(x, x)                  # => False
        free_of(x, y)                  # => True
        free_of(x, sin(x) + y)         # => False
    """
    if symbol == expr:
        return False
    if isinstance(expr, Sum):
        return all(free_of(symbol, t) for t in expr.terms)
    if isinstance(expr, Product):
        return all(free_of(symbol, f) for f in expr.factors)
    if isinstance(expr, FunctionN):
        return all(free_of(symbol, x) for x in expr.operands)
    if isinstance(expr, Power):
        return free_of(symbol, expr.base) and free_of(symbol, expr.exponent)
    if isinstance(expr, Function):
        return free_of(symbol, expr.operand)
    if isinstance(expr, (Number, Identifier)):
        return True
    raise _unknown("free_of", expr)


def free_of_set(symbols: Container[Expression], expr: Expression) -> bool:
    """Check that no member of symbols occurs anywhere in expr."""
    if expr in symbols:
        return False
    if isinstance(expr, Sum):
        return all(free_of_set(symbols, t) for t in expr.terms)
    if isinstance(expr, Product):
        return all(free_of_set(symbols, f) for f in expr.factors)
    if isinstance(expr, FunctionN):
        return all(free_of_set(symbols, x) for x in expr.operands)
    if isinstance(expr, Power):
        return free_of_set(symbols, expr.base) and free_of_set(symbols, expr.exponent)
    if isinstance(expr, Function):
        return free_of_set(symbols, expr.operand)
    if isinstance(expr, (Number, Identifier)):
        return True
    raise _unknown("free_of_set", expr)


# ============================================================
# Map and Substitute
# ============================================================

def map_operands(f: Callable[[Expression], Expression], expr: Expression) -> Expression:
    """
    Apply f to each immediate child and rebuild the same kind of node.

    Only one level is visited; leaves are returned unchanged. Recursive
    transforms pass a function that calls back into itself:

        def expand_all(e):
            return expand(map_operands(expand_all, e))
    """
    if isinstance(expr, Sum):
        return core.sum_of([f(t) for t in expr.terms])
    if isinstance(expr, Product):
        return core.product_of([f(x) for x in expr.factors])
    if isinstance(expr, Power):
        return core.power(f(expr.base), f(expr.exponent))
    if isinstance(expr, Function):
        return core.apply(expr.function, f(expr.operand))
    if isinstance(expr, FunctionN):
        return core.apply_n(expr.function, [f(x) for x in expr.operands])
    if isinstance(expr, (Number, Identifier)):
        return expr
    raise _unknown("map_operands", expr)


def substitute(target: Expression, replacement: Expression, expr: Expression) -> Expression:
    """
    Replace every occurrence of target in expr with replacement.

    A match is returned as replacement immediately, without looking
    inside the replacement. Rebuilt nodes go through the smart
    constructors, so substituting a number may collapse a subtree:

        substitute(y, one, x ** y)   # => x
    """
    if target == expr:
        return replacement

    def loop(x: Expression) -> Expression:
        return substitute(target, replacement, x)

    if isinstance(expr, Sum):
        return core.sum_of([loop(t) for t in expr.terms])
    if isinstance(expr, Product):
        return core.product_of([loop(x) for x in expr.factors])
    if isinstance(expr, Power):
        return core.power(loop(expr.base), loop(expr.exponent))
    if isinstance(expr, Function):
        return core.apply(expr.function, loop(expr.operand))
    if isinstance(expr, FunctionN):
        return core.apply_n(expr.function, [loop(x) for x in expr.operands])
    if isinstance(expr, (Number, Identifier)):
        return expr
    raise _unknown("substitute", expr)


# ============================================================
# Numerator and Denominator
# ============================================================

def _negative_integer_power(expr: Expression) -> bool:
    return (isinstance(expr, Power)
            and is_integer_literal(expr.exponent)
            and values.is_negative(expr.exponent.value))


def numerator(expr: Expression) -> Expression:
    """
    Syntactic numerator of a product of powers.

    Powers with a negative integer literal exponent belong to the
    denominator and contribute one here; everything else is kept.

    Examples:
        numerator(x * y ** -1)   # => x
        numerator(x + y)         # => x + y
    """
    if isinstance(expr, Product):
        return core.product_of([numerator(f) for f in expr.factors])
    if _negative_integer_power(expr):
        return core.one
    if isinstance(expr, Expression):
        return expr
    raise _unknown("numerator", expr)


def denominator(expr: Expression) -> Expression:
    """
    Syntactic denominator of a product of powers.

    Each x^(-n) with n a positive integer literal contributes x^n;
    everything else contributes one.

    Examples:
        denominator(x * y ** -2)   # => y ** 2
        denominator(x + y)         # => one
    """
    if isinstance(expr, Product):
        return core.product_of([denominator(f) for f in expr.factors])
    if _negative_integer_power(expr):
        return core.power(expr.base, Number(values.negate(expr.exponent.value)))
    if isinstance(expr, Expression):
        return core.one
    raise _unknown("denominator", expr)
