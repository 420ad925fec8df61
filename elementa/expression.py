"""
Expression tree nodes.

Leaves are Number (wrapping a Value) and Identifier (wrapping a Symbol or
a Constant). Interior nodes are Sum, Product, Power, Function and
FunctionN. All nodes are frozen dataclasses: equality and hashing are
structural, children are held in tuples, and trees are built bottom-up
only.

Build trees through elementa.core (or the operators defined here) rather
than by calling the node classes directly; the smart constructors keep
sums and products flat and collapse identities.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union

from . import values
from .values import Value


# ============================================================
# Atoms and Function Tags
# ============================================================

@dataclass(frozen=True)
class Symbol:
    """A named variable: x, y, alpha, ..."""

    name: str

    def __repr__(self) -> str:
        return self.name


class Constant(Enum):
    """Reserved mathematical constants."""

    E = "e"
    PI = "pi"
    I = "i"

    def __repr__(self) -> str:
        return self.value


class Func(Enum):
    """Elementary functions that can head a Function or FunctionN node."""

    ABS = "abs"
    LN = "ln"
    EXP = "exp"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    COSH = "cosh"
    SINH = "sinh"
    TANH = "tanh"
    ARCSIN = "arcsin"
    ARCCOS = "arccos"
    ARCTAN = "arctan"

    def __repr__(self) -> str:
        return self.value


AtomType = Union[Symbol, Constant]


# ============================================================
# Expression Nodes
# ============================================================

def _coerce(x) -> 'Expression':
    if isinstance(x, Expression):
        return x
    from .core import number
    return number(x)


class Expression:
    """
    Base class for expression nodes.

    Arithmetic operators build trees through the smart constructors in
    elementa.core; Python numbers are promoted to Number leaves:

        x = symbol("x")
        x + 1          # => Sum(terms=(Number(1), x))
        2 * x ** -1    # => Product(factors=(Number(2), Power(base=x, exponent=Number(-1))))

    Equality stays structural: x + 1 == x + 1 compares trees.
    """

    __slots__ = ()

    def __add__(self, other):
        from .core import add
        return add(self, _coerce(other))

    def __radd__(self, other):
        from .core import add
        return add(_coerce(other), self)

    def __sub__(self, other):
        from .core import subtract
        return subtract(self, _coerce(other))

    def __rsub__(self, other):
        from .core import subtract
        return subtract(_coerce(other), self)

    def __mul__(self, other):
        from .core import multiply
        return multiply(self, _coerce(other))

    def __rmul__(self, other):
        from .core import multiply
        return multiply(_coerce(other), self)

    def __truediv__(self, other):
        from .core import divide
        return divide(self, _coerce(other))

    def __rtruediv__(self, other):
        from .core import divide
        return divide(_coerce(other), self)

    def __pow__(self, other):
        from .core import power
        return power(self, _coerce(other))

    def __rpow__(self, other):
        from .core import power
        return power(_coerce(other), self)

    def __neg__(self):
        from .core import negate
        return negate(self)

    def __pos__(self):
        return self


@dataclass(frozen=True)
class Number(Expression):
    """Numeric leaf holding any Value, including infinities and Undefined."""

    value: Value

    def __post_init__(self):
        if not isinstance(self.value, Value):
            object.__setattr__(self, "value", values.value(self.value))

    def __repr__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class Identifier(Expression):
    """Symbol or constant leaf."""

    atom: AtomType

    def __repr__(self) -> str:
        return repr(self.atom)


@dataclass(frozen=True)
class Sum(Expression):
    terms: Tuple[Expression, ...]

    def __init__(self, terms: Sequence[Expression]):
        object.__setattr__(self, "terms", tuple(terms))


@dataclass(frozen=True)
class Product(Expression):
    factors: Tuple[Expression, ...]

    def __init__(self, factors: Sequence[Expression]):
        object.__setattr__(self, "factors", tuple(factors))


@dataclass(frozen=True)
class Power(Expression):
    base: Expression
    exponent: Expression


@dataclass(frozen=True)
class Function(Expression):
    """Unary function application: sin(x), ln(x), ..."""

    function: Func
    operand: Expression


@dataclass(frozen=True)
class FunctionN(Expression):
    """Function applied to an ordered list of arguments."""

    function: Func
    operands: Tuple[Expression, ...]

    def __init__(self, function: Func, operands: Sequence[Expression]):
        object.__setattr__(self, "function", function)
        object.__setattr__(self, "operands", tuple(operands))


# ============================================================
# Leaf Predicates
# ============================================================

def is_leaf(expr: Expression) -> bool:
    """Check if an expression is a leaf (Number or Identifier)."""
    return isinstance(expr, (Number, Identifier))


def is_integer_literal(expr: Expression) -> bool:
    """Check if an expression is an exact integer Number leaf."""
    return isinstance(expr, Number) and values.is_integer(expr.value)
