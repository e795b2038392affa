#!/usr/bin/env python3
"""
calcurus Feature Demonstration

This script walks through the major features of the calcurus kernel.
"""

from dataclasses import dataclass

from calcurus import (
    Rational, Item, UndefinedForm,
    Expr, Base, inherit, Symbol, Node, ZERO, ONE,
    fold_constants, FULL_PRELUDE,
)


def section(title: str):
    """Print a section header."""
    print(f"\n{'='*60}")
    print(f" {title}")
    print('='*60)


def show(expr) -> str:
    if isinstance(expr, list):
        return "(" + " ".join(show(e) for e in expr) + ")"
    return str(expr)


def demo_arithmetic():
    """Demonstrate exact arithmetic and the None-returning operations."""
    section("Exact Arithmetic")

    a = Rational.from_signed_pair(-6, 4)
    b = Rational.from_pair(1, 3)

    print(f"  a = {a}, b = {b}")
    print(f"  a + b = {a + b}")
    print(f"  a * b = {a * b}")
    print(f"  a / b = {a.divide(b)}")
    print(f"  a / 0 = {a.divide(Rational.zero())}")
    print(f"  1/a   = {a.invert()}")
    print(f"  1/0   = {Rational.zero().invert()}")
    print(f"  a as int = {a.try_as_integer()}, 12/4 as int = {Rational.from_pair(12, 4).try_as_integer()}")
    print(f"  a ~ {a.to_approximate_float()}")


def demo_power():
    """Demonstrate exponent splitting."""
    section("Exponentiation")

    examples = [
        (Rational(2), Rational(3)),
        (Rational(2), Rational(-1)),
        (Rational(2), Rational.from_pair(5, 3)),
        (Rational(4), Rational.from_pair(1, 2)),
    ]

    for base, exponent in examples:
        result = base.power(exponent)
        applied, residual = result
        print(f"  {base}^({exponent}) => {type(result).__name__}: ({applied}, {residual})")

    try:
        Rational.zero().power(Rational.zero())
    except UndefinedForm as e:
        print(f"  0^0 => UndefinedForm: {e}")


def demo_classification():
    """Demonstrate classification flags."""
    section("Classification")

    for value in [Rational(0), Rational(1), Rational(-1), Rational(7), Rational.from_pair(1, 2)]:
        flags = value.classify()
        names = [f.name for f in Item if flags.has(f)]
        print(f"  {str(value):>4} => {' | '.join(names)}")

    for node in [ZERO, ONE, Symbol("x")]:
        print(f"  node {node} => {node.classify()!r}")


def demo_composition():
    """Demonstrate a custom node kind sharing the common base."""
    section("Composition")

    @dataclass(frozen=True)
    @inherit(Base)
    class Pi(Expr):
        def classify(self) -> Item:
            return Item.POS

        def __str__(self) -> str:
            return "pi"

    pi = Pi().explain("constant pi")
    print(f"  {pi} classifies as {pi.classify()!r}")
    print(f"  embedded base: {pi.get_base()}")
    print(f"  steps: {pi.steps()}")


def demo_folding():
    """Demonstrate constant folding."""
    section("Constant Folding")

    examples = [
        ["+", 1, ["*", 2, 3]],
        ["/", 1, 0],
        ["^", 2, ["/", 5, 3]],
        ["+", "x", ["/", 1, 2], ["/", 1, 2]],
        ["positive?", ["-", 1, 2]],
    ]

    for expr in examples:
        print(f"  {show(expr)} => {show(fold_constants(expr, FULL_PRELUDE))}")

    expr = Node("*", (ONE, Symbol("x")))
    print(f"  tree node {expr}: {expr.classify()!r}")


def main():
    """Run all demonstrations."""
    print("calcurus - exact arithmetic and classification")
    print("Feature Demonstration")

    demo_arithmetic()
    demo_power()
    demo_classification()
    demo_composition()
    demo_folding()

    print("\n" + "="*60)
    print(" Demo complete!")
    print("="*60)


if __name__ == "__main__":
    main()
