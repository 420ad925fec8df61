"""
Elementary function shortcuts.

    from elementa import functions
    functions.sin(symbol("x"))   # => Function(function=sin, operand=x)

These only build nodes; nothing is evaluated.
"""

from .core import apply
from .expression import Expression, Func


def abs(x: Expression) -> Expression:
    return apply(Func.ABS, x)


def ln(x: Expression) -> Expression:
    return apply(Func.LN, x)


def exp(x: Expression) -> Expression:
    return apply(Func.EXP, x)


def sin(x: Expression) -> Expression:
    return apply(Func.SIN, x)


def cos(x: Expression) -> Expression:
    return apply(Func.COS, x)


def tan(x: Expression) -> Expression:
    return apply(Func.TAN, x)
