"""
Example custom prelude for calcurus.

This file demonstrates how to extend the standard preludes with extra
fold handlers over exact rationals.

Usage:
    from custom_prelude import PRELUDE
    fold_constants(["min", 1, ["/", 1, 2]], PRELUDE)   # => 1/2
"""

import math
from calcurus import (
    Rational, Item, binary_only, unary_only, flag_test, RATIONAL_PRELUDE,
    PREDICATE_PRELUDE,
)


def _floor(x: Rational) -> Rational:
    return Rational(x.numerator // x.denominator)


def _gcd(a: Rational, b: Rational):
    # only defined for integers; None leaves the expression unfolded
    if not (a.is_integer() and b.is_integer()):
        return None
    return Rational(math.gcd(a.numerator, b.numerator))


def _even(x: Rational) -> bool:
    return x.is_integer() and x.numerator % 2 == 0


# Start with the standard preludes and extend them
PRELUDE = {
    **RATIONAL_PRELUDE,
    **PREDICATE_PRELUDE,

    # Number theory
    "gcd": binary_only(_gcd),
    "floor": unary_only(_floor),

    # Min/max
    "min": binary_only(min),
    "max": binary_only(max),

    # Extra predicates
    "even?": unary_only(_even),
    "nonzero?": unary_only(lambda x: not x.classify().has(Item.ZERO)),
    "integer?": flag_test(Item.INTEGER),
}
