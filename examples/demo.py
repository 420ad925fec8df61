#!/usr/bin/env python3
"""
ELEMENTA Feature Demonstration

This script walks through the value algebra and the structural
operations on expression trees.
"""

from fractions import Fraction

from elementa import (
    values, functions, numbers,
    symbol, number, infinity, undefined,
    number_of_operands, operand, free_of, map_operands,
    substitute, numerator, denominator,
)


def section(title: str):
    """Print a section header."""
    print(f"\n{'='*60}")
    print(f" {title}")
    print('='*60)


def demo_exact_arithmetic():
    """Demonstrate exact rational arithmetic."""
    section("Exact Arithmetic")

    half, third = values.Number(Fraction(1, 2)), values.Number(Fraction(1, 3))
    examples = [
        ("1/2 + 1/3", values.add(half, third)),
        ("1/2 * 1/3", values.multiply(half, third)),
        ("2 ^ -3", values.power(values.Number(2), values.Number(-3))),
        ("(1/2) ^ 10", values.power(half, values.Number(10))),
    ]

    for desc, result in examples:
        print(f"  {desc} => {result!r}")


def demo_edge_cases():
    """Demonstrate total answers for indeterminate forms."""
    section("Edge Cases")

    v = values
    examples = [
        ("0 ^ 0", v.power(v.ZERO, v.ZERO)),
        ("1 / 0", v.invert(v.ZERO)),
        ("inf - inf", v.add(v.PositiveInfinity, v.NegativeInfinity)),
        ("inf * -3", v.multiply(v.PositiveInfinity, v.Number(-3))),
        ("0 * inf", v.multiply(v.ZERO, v.PositiveInfinity)),
        ("(-8) ^ (1/3)", v.power(v.Number(-8), v.Number(Fraction(1, 3)))),
        ("10.0 ^ 400", v.power(v.double(10.0), v.Number(400))),
        ("undefined + 1", v.add(v.Undefined, v.ONE)),
    ]

    for desc, result in examples:
        print(f"  {desc} => {result!r}")


def demo_construction():
    """Demonstrate smart construction of expression trees."""
    section("Building Expressions")

    x, y = symbol("x"), symbol("y")
    examples = [
        ("x + 0", x + 0),
        ("x * 1", x * 1),
        ("2 * x * 3", 2 * x * 3),
        ("x ^ 1", x ** 1),
        ("x + undefined", x + undefined),
        ("x / y", x / y),
    ]

    for desc, result in examples:
        print(f"  {desc} => {result!r}")


def demo_structure():
    """Demonstrate operand access and occurs-checks."""
    section("Structure")

    x, y, z = symbol("x"), symbol("y"), symbol("z")
    expr = functions.sin(x) + y * z

    print(f"  expr = {expr!r}")
    print(f"  number_of_operands(expr) = {number_of_operands(expr)}")
    for i in range(number_of_operands(expr)):
        print(f"  operand({i}, expr) = {operand(i, expr)!r}")
    print(f"  free_of(x, expr) = {free_of(x, expr)}")
    print(f"  free_of(symbol('w'), expr) = {free_of(symbol('w'), expr)}")


def demo_transforms():
    """Demonstrate map, substitute and the rational split."""
    section("Transforms")

    x, y, z = symbol("x"), symbol("y"), symbol("z")

    def rename(e):
        return z if e == x else map_operands(rename, e)

    expr = functions.ln(x) * x ** 2
    print(f"  rename x->z in {expr!r}:\n    {rename(expr)!r}")

    expr = x ** 2 + y
    print(f"  substitute x=2 in {expr!r}:\n    {substitute(x, number(2), expr)!r}")

    expr = 3 * x / (y * z ** 2)
    print(f"  split {expr!r}:")
    print(f"    numerator   = {numerator(expr)!r}")
    print(f"    denominator = {denominator(expr)!r}")


def demo_extrema():
    """Demonstrate min/max over numeric leaves."""
    section("Extrema")

    leaves = [number(3), number(-1.5), number(Fraction(7, 2))]
    print(f"  maximum({leaves!r}) = {numbers.maximum(leaves)!r}")
    print(f"  minimum({leaves!r}) = {numbers.minimum(leaves)!r}")
    print(f"  maximum with infinity = {numbers.maximum(leaves + [infinity])!r}")


def main():
    """Run all demonstrations."""
    print("ELEMENTA - Exact and Limit-Extended Math for Expression Tree Algebra")
    print("Feature Demonstration")

    demo_exact_arithmetic()
    demo_edge_cases()
    demo_construction()
    demo_structure()
    demo_transforms()
    demo_extrema()

    print("\n" + "="*60)
    print(" Demo complete!")
    print("="*60)


if __name__ == "__main__":
    main()
