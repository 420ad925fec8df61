"""
ELEMENTA - Exact and Limit-Extended Math for Expression Tree Algebra

The numeric and structural core of a symbolic computation library.

Quick Start:
    from elementa import symbol, number, values
    from elementa.elementary import free_of, substitute, numerator, denominator

    x, y = symbol("x"), symbol("y")
    expr = x / y                   # Product(factors=(x, Power(base=y, exponent=Number(-1))))

    numerator(expr)                # => x
    denominator(expr)              # => y
    free_of(y, expr)               # => False
    substitute(y, number(2), expr) # => Product(factors=(Number(1/2), x))

Value Algebra:
    values.add(values.Number(1), values.PositiveInfinity)   # => PositiveInfinity
    values.power(values.ZERO, values.ZERO)                  # => Undefined
    values.invert(values.ZERO)                              # => ComplexInfinity

Mathematical edge cases (0/0, inf - inf, 0^0) are values, never
exceptions. Exceptions are raised only for broken structural invariants,
such as asking a leaf for an operand.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from . import values

# Expression nodes
from .expression import (
    Expression,
    Number,
    Identifier,
    Sum,
    Product,
    Power,
    Function,
    FunctionN,
    Symbol,
    Constant,
    Func,
)

# Smart constructors and shared constants
from .core import (
    symbol,
    number,
    constant,
    add,
    subtract,
    negate,
    plus,
    sum_of,
    multiply,
    divide,
    invert,
    product_of,
    power,
    apply,
    apply_n,
    zero,
    one,
    two,
    minus_one,
    undefined,
    infinity,
    negative_infinity,
    complex_infinity,
    pi,
    e,
    i,
)

# Structural operations
from .elementary import (
    number_of_operands,
    operand,
    free_of,
    free_of_set,
    map_operands,
    substitute,
    numerator,
    denominator,
)

from . import functions
from . import numbers

# Public API
__all__ = [
    # Version
    "__version__",
    # Modules
    "values",
    "functions",
    "numbers",
    # Nodes
    "Expression",
    "Number",
    "Identifier",
    "Sum",
    "Product",
    "Power",
    "Function",
    "FunctionN",
    "Symbol",
    "Constant",
    "Func",
    # Constructors
    "symbol",
    "number",
    "constant",
    "add",
    "subtract",
    "negate",
    "plus",
    "sum_of",
    "multiply",
    "divide",
    "invert",
    "product_of",
    "power",
    "apply",
    "apply_n",
    # Constants
    "zero",
    "one",
    "two",
    "minus_one",
    "undefined",
    "infinity",
    "negative_infinity",
    "complex_infinity",
    "pi",
    "e",
    "i",
    # Structural operations
    "number_of_operands",
    "operand",
    "free_of",
    "free_of_set",
    "map_operands",
    "substitute",
    "numerator",
    "denominator",
]
