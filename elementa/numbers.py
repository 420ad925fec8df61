"""
Minimum and maximum over numeric expression leaves.

Undefined absorbs, infinity dominates max and -infinity dominates min:

    max2(number(2), infinity)          # => infinity
    minimum([number(3), number(1)])    # => number(1)
"""

from functools import reduce
from typing import Sequence

from . import values
from .expression import Expression, Number


def _numeric(op: str, x: Expression) -> values.Value:
    if not isinstance(x, Number):
        raise ValueError(f"{op}: number expected, got {x!r}")
    return x.value


def max2(a: Expression, b: Expression) -> Number:
    return Number(values.maximum(_numeric("max2", a), _numeric("max2", b)))


def min2(a: Expression, b: Expression) -> Number:
    return Number(values.minimum(_numeric("min2", a), _numeric("min2", b)))


def maximum(xs: Sequence[Expression]) -> Number:
    """
    Largest of a non-empty sequence of numeric leaves.

    Raises:
        ValueError: If xs is empty or holds a non-numeric expression
    """
    xs = list(xs)
    if not xs:
        raise ValueError("maximum: empty sequence")
    return reduce(max2, xs[1:], Number(_numeric("maximum", xs[0])))


def minimum(xs: Sequence[Expression]) -> Number:
    """Smallest of a non-empty sequence of numeric leaves."""
    xs = list(xs)
    if not xs:
        raise ValueError("minimum: empty sequence")
    return reduce(min2, xs[1:], Number(_numeric("minimum", xs[0])))
