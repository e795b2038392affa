"""
Expression node kinds.

Nodes are frozen dataclasses deriving from Expr. Each one embeds a Base
through @inherit, which carries bookkeeping shared by all node kinds
(currently the explanation steps that produced the node).

    x = Symbol("x")
    half = Number(Rational.from_pair(1, 2))
    expr = Node("*", (half, x))

    half.classify()      # => Item.RATIONAL | Item.POS
    ZERO.value.is_zero() # => True
"""

import dataclasses
import math
from dataclasses import dataclass, field
from typing import Tuple

from .inherit import inherit
from .pattern import NONE, CalcursType, Item
from .rational import Rational


@dataclass(frozen=True)
class Base:
    """Data shared by every node kind."""

    explanation: Tuple[str, ...] = ()

    def explain(self, step: str) -> "Base":
        """A copy with step appended to the explanation."""
        return Base(self.explanation + (step,))


class Expr(CalcursType):
    """Common type of expression nodes."""

    __slots__ = ()

    def explain(self, step: str) -> "Expr":
        """A copy of this node whose base records step."""
        return dataclasses.replace(self, base=self.get_base().explain(step))

    def steps(self) -> Tuple[str, ...]:
        return self.get_base().explanation


@dataclass(frozen=True)
@inherit(Base)
class Number(Expr):
    """Exact rational leaf."""

    value: Rational

    def classify(self) -> Item:
        return self.value.classify()

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
@inherit(Base)
class Real(Expr):
    """Floating-point leaf. Only its sign is known; NaN has none."""

    value: float

    def classify(self) -> Item:
        if math.isnan(self.value):
            return NONE
        if self.value > 0:
            return Item.POS
        if self.value < 0:
            return Item.NEG
        return Item.ZERO

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
@inherit(Base)
class Symbol(Expr):
    name: str

    def classify(self) -> Item:
        return NONE

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
@inherit(Base)
class Node(Expr):
    """Compound expression: an operator applied to arguments."""

    op: str
    args: Tuple[Expr, ...] = field(default_factory=tuple)

    def classify(self) -> Item:
        return NONE

    def __str__(self) -> str:
        if not self.args:
            return f"({self.op})"
        return f"({self.op} {' '.join(str(a) for a in self.args)})"


# Canonical constants, already lifted into the tree
ZERO = Number(Rational.zero())
ONE = Number(Rational.one())
MINUS_ONE = Number(Rational.minus_one())
