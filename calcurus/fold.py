"""
Constant folding over exact rationals.

A rewriter folds an operator applied to constant arguments by looking up
a fold handler for the operator. Handlers receive the argument list and
return the folded result, or None when they can't fold (wrong arity,
division by zero, an exponent that can't be applied exactly).

Expressions here are nested lists, [op, arg1, arg2, ...], whose constant
leaves are Rational values:

    fold_constants(["+", Rational(1), ["*", Rational(2), Rational(3)]])
    # => Rational(7)

    fold_constants(["^", Rational(2), Rational.from_pair(5, 3)])
    # => ["^", Rational(2), Rational(2/3)]    (2 * 2^(2/3), integer part applied)
"""

import operator
from typing import Any, Callable, Dict, List, Optional, Union

from .pattern import CalcursType, Item
from .rational import Applied, PartiallyApplied, Rational

# Type aliases
ExprType = Union[Rational, int, str, List]
FoldHandler = Callable[[List[Any]], Optional[Any]]
FoldFuncsType = Dict[str, FoldHandler]


# ============================================================
# Fold Handler Builders
# ============================================================

def nary_fold(
    identity: Rational,
    binary_op: Callable[[Rational, Rational], Rational],
    unary: Optional[Callable[[Rational], Rational]] = None,
) -> FoldHandler:
    """Create an n-ary folder with identity element.

    Examples:
        nary_fold(Rational.zero(), Rational.add)  # (+) = 0, (+ x) = x, (+ x y z) = x+y+z
        nary_fold(Rational.one(), Rational.mul)   # (*) = 1, (* x) = x, (* x y z) = x*y*z
    """
    def handler(args: List[Rational]) -> Rational:
        if len(args) == 0:
            return identity
        if len(args) == 1:
            return unary(args[0]) if unary else args[0]
        result = args[0]
        for a in args[1:]:
            result = binary_op(result, a)
        return result
    return handler


def unary_only(f: Callable[[Any], Any]) -> FoldHandler:
    """Create a unary-only folder (e.g., abs, inv)."""
    def handler(args: List[Any]) -> Optional[Any]:
        if len(args) != 1:
            return None
        return f(args[0])
    return handler


def binary_only(f: Callable[[Any, Any], Any]) -> FoldHandler:
    """Create a binary-only folder (e.g., /, ^)."""
    def handler(args: List[Any]) -> Optional[Any]:
        if len(args) != 2:
            return None
        return f(args[0], args[1])
    return handler


def special_minus() -> FoldHandler:
    """Subtraction: (-) = 0, (- x) = -x, (- x y) = x-y."""
    def handler(args: List[Rational]) -> Optional[Rational]:
        if len(args) == 0:
            return Rational.zero()
        if len(args) == 1:
            return -args[0]
        if len(args) == 2:
            return args[0].sub(args[1])
        return None
    return handler


def safe_div() -> FoldHandler:
    """Division that declines to fold when the divisor is zero."""
    return binary_only(Rational.divide)


def exact_pow() -> FoldHandler:
    """
    Exponentiation that keeps the part of the exponent it can't apply.

    A fully applied power folds to its value. When only the integer part
    of the exponent could be applied, the result is a residual power node
    ["^", applied_base, residual]. Otherwise nothing is folded.
    """
    def handler(args: List[Rational]) -> Optional[ExprType]:
        if len(args) != 2:
            return None
        result = args[0].power(args[1])
        if isinstance(result, Applied):
            return result.value
        if isinstance(result, PartiallyApplied):
            return ["^", result.base, result.residual]
        return None
    return handler


def flag_test(flag: Item) -> FoldHandler:
    """Create a predicate folder testing a classification flag."""
    def test(x: Any) -> bool:
        return isinstance(x, CalcursType) and x.classify().has(flag)
    return unary_only(test)


# ============================================================
# Standard Preludes
# ============================================================

# Exact arithmetic
RATIONAL_PRELUDE: FoldFuncsType = {
    "+": nary_fold(Rational.zero(), Rational.add),
    "*": nary_fold(Rational.one(), Rational.mul),
    "-": special_minus(),
    "/": safe_div(),
    "^": exact_pow(),
    "abs": unary_only(Rational.abs),
    "inv": unary_only(Rational.invert),
}

# Comparisons and classification predicates for conditional rules
PREDICATE_PRELUDE: FoldFuncsType = {
    ">": binary_only(operator.gt),
    "<": binary_only(operator.lt),
    ">=": binary_only(operator.ge),
    "<=": binary_only(operator.le),
    "=": binary_only(operator.eq),
    "!=": binary_only(operator.ne),
    "rational?": flag_test(Item.RATIONAL),
    "int?": flag_test(Item.INTEGER),
    "unit?": flag_test(Item.UONE),
    "zero?": flag_test(Item.ZERO),
    "positive?": flag_test(Item.POS),
    "negative?": flag_test(Item.NEG),
}

FULL_PRELUDE: FoldFuncsType = {
    **RATIONAL_PRELUDE,
    **PREDICATE_PRELUDE,
}

# No folding at all
NO_PRELUDE: FoldFuncsType = {}


# ============================================================
# Folding
# ============================================================

def lift(exp: ExprType) -> ExprType:
    """Replace int leaves with Rational, recursively."""
    if isinstance(exp, list):
        return ([exp[0]] + [lift(arg) for arg in exp[1:]]) if exp else []
    if isinstance(exp, int) and not isinstance(exp, bool):
        return Rational(exp)
    return exp


def fold_constants(
    exp: ExprType,
    fold_funcs: Optional[FoldFuncsType] = None,
) -> ExprType:
    """
    Fold constant sub-expressions bottom-up.

    Args:
        exp: Expression to fold; int leaves are treated as Rationals
        fold_funcs: Fold handlers by operator (default: RATIONAL_PRELUDE)

    Returns:
        The folded expression. Sub-expressions with an unknown operator,
        a non-constant argument, or a handler returning None are kept.
    """
    funcs = RATIONAL_PRELUDE if fold_funcs is None else fold_funcs

    def loop(e: ExprType) -> ExprType:
        if not isinstance(e, list) or not e:
            return e

        op = e[0]
        args = [loop(arg) for arg in e[1:]]
        folded = [op] + args

        if op not in funcs:
            return folded
        if not all(isinstance(arg, Rational) for arg in args):
            return folded

        result = funcs[op](args)
        if result is None:
            return folded
        return result

    return loop(lift(exp))
