"""
calcurus - exact arithmetic and classification for symbolic computation

The numeric kernel of a computer-algebra engine: exact rationals, the
classification flags a pattern-matching simplifier dispatches on, and the
composition helper expression nodes use to share common data.

Quick Start:
    from calcurus import Rational, Item

    x = Rational.from_signed_pair(-6, 4)   # => -3/2
    x.classify().has(Item.NEG)            # => True
    x.invert()                            # => -2/3
    x.divide(Rational.zero())             # => None

Exponentiation:
    base, residual = Rational(2).power(Rational.from_pair(5, 3))
    # 2^(5/3) = 2 * 2^(2/3): base == 2, residual == 2/3

Classification flags:
    RATIONAL  - exact rational value
    INTEGER   - integral value
    UONE      - magnitude exactly one
    ZERO / POS / NEG - sign, exactly one set for every rational
"""

import logging

__version__ = "0.1.0"

# Errors
from .errors import CalcursError, UndefinedForm, InheritError

# Classification
from .pattern import Item, CalcursType, NONE, SIGN_FLAGS

# Rationals
from .rational import (
    Rational,
    PowResult,
    Applied,
    PartiallyApplied,
    Unchanged,
    I64_MIN,
    I64_MAX,
    U64_MAX,
)

# Composition
from .inherit import Inherited, inherit, base_of

# Expression nodes
from .expression import (
    Base,
    Expr,
    Number,
    Real,
    Symbol,
    Node,
    ZERO,
    ONE,
    MINUS_ONE,
)

# Constant folding
from .fold import (
    ExprType,
    FoldHandler,
    FoldFuncsType,
    nary_fold,
    unary_only,
    binary_only,
    special_minus,
    safe_div,
    exact_pow,
    flag_test,
    lift,
    fold_constants,
    RATIONAL_PRELUDE,
    PREDICATE_PRELUDE,
    FULL_PRELUDE,
    NO_PRELUDE,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API
__all__ = [
    # Version
    "__version__",
    # Errors
    "CalcursError",
    "UndefinedForm",
    "InheritError",
    # Classification
    "Item",
    "CalcursType",
    "NONE",
    "SIGN_FLAGS",
    # Rationals
    "Rational",
    "PowResult",
    "Applied",
    "PartiallyApplied",
    "Unchanged",
    "I64_MIN",
    "I64_MAX",
    "U64_MAX",
    # Composition
    "Inherited",
    "inherit",
    "base_of",
    # Expression nodes
    "Base",
    "Expr",
    "Number",
    "Real",
    "Symbol",
    "Node",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    # Constant folding
    "ExprType",
    "FoldHandler",
    "FoldFuncsType",
    "nary_fold",
    "unary_only",
    "binary_only",
    "special_minus",
    "safe_div",
    "exact_pow",
    "flag_test",
    "lift",
    "fold_constants",
    "RATIONAL_PRELUDE",
    "PREDICATE_PRELUDE",
    "FULL_PRELUDE",
    "NO_PRELUDE",
]
