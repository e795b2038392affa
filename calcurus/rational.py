"""
Exact rational numbers for symbolic computation.

Rational wraps a normalized fraction over Python's arbitrary-precision
integers. The representation is canonical: lowest terms, a strictly
positive denominator, the sign on the numerator, and zero as 0/1. Values
are immutable; every operation returns a new Rational.

Operations that have no result for some inputs (dividing by zero,
inverting zero, narrowing to a 64-bit int) return None rather than
raising, so callers must handle the missing case explicitly:

    half = Rational.from_pair(1, 2)
    half.invert()                  # => Rational(2)
    Rational.zero().invert()       # => None
    half.divide(Rational.zero())   # => None

Exponentiation splits off what can be applied exactly and hands back the
rest, so a simplifier can rebuild a symbolic power from the residual:

    base, residual = Rational(2).power(Rational.from_pair(5, 3))
    # base == 2, residual == 2/3   (2^(5/3) = 2 * 2^(2/3))
"""

import functools
import logging
import math
import sys
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Tuple, Union

from .errors import UndefinedForm
from .pattern import CalcursType, Item

logger = logging.getLogger(__name__)

# Range accepted by try_as_integer
I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1

# Largest integer exponent power() applies exactly
U64_MAX = 2 ** 64 - 1

RationalLike = Union["Rational", int]


def _float_toward_zero(n: int) -> float:
    """Convert an int to float, rounding toward zero and saturating."""
    try:
        f = float(n)
    except OverflowError:
        return sys.float_info.max if n > 0 else -sys.float_info.max
    if abs(int(f)) > abs(n):
        # float() rounds to nearest, which may have stepped away from zero
        f = math.nextafter(f, 0.0)
    return f


@functools.total_ordering
class Rational(CalcursType):
    """
    Exact rational number in canonical form.

    Construct from an int (or an exact Fraction), or use the pair
    constructors:

        Rational(3)                      # => 3
        Rational.from_pair(6, 4)         # => 3/2
        Rational.from_signed_pair(6, -4) # => -3/2

    Equality, ordering and hashing follow the numeric value, and agree
    with int for integral values (Rational(2) == 2, hash(Rational(2)) == hash(2)).
    """

    __slots__ = ('_value',)

    def __init__(self, value: Union[int, Fraction] = 0):
        if isinstance(value, Fraction):
            self._value = value
        elif isinstance(value, int):
            self._value = Fraction(value)
        else:
            raise TypeError(
                f"Rational: expected int or Fraction, got {type(value).__name__}"
            )

    # --------------------------------------------------------
    # Constructors
    # --------------------------------------------------------

    @classmethod
    def zero(cls) -> "Rational":
        return cls(0)

    @classmethod
    def one(cls) -> "Rational":
        return cls(1)

    @classmethod
    def minus_one(cls) -> "Rational":
        return cls(-1)

    @classmethod
    def from_int(cls, value: int) -> "Rational":
        """Create an integral Rational."""
        return cls(value)

    @classmethod
    def from_pair(cls, numerator: int, denominator: int) -> "Rational":
        """
        Create numerator/denominator from two non-negative ints.

        Raises:
            ValueError: If either part is negative
            ZeroDivisionError: If denominator is zero
        """
        if numerator < 0 or denominator < 0:
            raise ValueError(
                f"from_pair: parts must be non-negative, got {numerator}/{denominator}"
            )
        if denominator == 0:
            raise ZeroDivisionError(f"from_pair: zero denominator in {numerator}/0")
        return cls(Fraction(numerator, denominator))

    @classmethod
    def from_signed_pair(cls, numerator: int, denominator: int) -> "Rational":
        """
        Create numerator/denominator from two signed ints.

        The result is negative when exactly one input is negative; the
        magnitude is |numerator| / |denominator| in lowest terms.

        Raises:
            ZeroDivisionError: If denominator is zero
        """
        negative = numerator != 0 and (numerator < 0) != (denominator < 0)
        magnitude = cls.from_pair(abs(numerator), abs(denominator))
        return -magnitude if negative else magnitude

    # --------------------------------------------------------
    # Accessors and predicates
    # --------------------------------------------------------

    @property
    def numerator(self) -> int:
        """Signed numerator in lowest terms."""
        return self._value.numerator

    @property
    def denominator(self) -> int:
        """Denominator in lowest terms, always positive."""
        return self._value.denominator

    def is_zero(self) -> bool:
        return self._value.numerator == 0

    def is_one(self) -> bool:
        return self._value == 1

    def is_positive(self) -> bool:
        return self._value.numerator > 0

    def is_negative(self) -> bool:
        return self._value.numerator < 0

    def is_integer(self) -> bool:
        return self._value.denominator == 1

    def try_as_integer(self) -> Optional[int]:
        """
        The value as an int, if integral and within signed 64-bit range.

        Returns None for non-integers and for integers that don't fit.
        """
        if not self.is_integer():
            return None
        n = self._value.numerator
        if I64_MIN <= n <= I64_MAX:
            return n
        return None

    def classify(self) -> Item:
        """
        Classification flags for this value.

        Always RATIONAL; INTEGER when integral; UONE when the value is
        1 or -1; and exactly one of ZERO, POS, NEG.
        """
        flags = Item.RATIONAL

        if self.is_integer():
            flags |= Item.INTEGER
            # lowest terms: an integer has magnitude one iff its numerator does
            if abs(self._value.numerator) == 1:
                flags |= Item.UONE

        if self.is_negative():
            flags |= Item.NEG
        elif self.is_zero():
            flags |= Item.ZERO
        else:
            flags |= Item.POS

        return flags

    # --------------------------------------------------------
    # Unary operations
    # --------------------------------------------------------

    def invert(self) -> Optional["Rational"]:
        """Multiplicative inverse keeping the sign, or None for zero."""
        if self.is_zero():
            return None
        return Rational(1 / self._value)

    def abs(self) -> "Rational":
        """Magnitude. Non-negative values are returned as-is."""
        if self._value.numerator >= 0:
            return self
        return Rational(-self._value)

    def to_approximate_float(self) -> float:
        """
        Lossy float approximation.

        Numerator and denominator are each rounded toward zero (saturating
        at the largest finite float) and then divided.
        """
        num = _float_toward_zero(self._value.numerator)
        den = _float_toward_zero(self._value.denominator)
        return num / den

    # --------------------------------------------------------
    # Arithmetic
    # --------------------------------------------------------

    def add(self, rhs: "Rational") -> "Rational":
        return Rational(self._value + rhs._value)

    def sub(self, rhs: "Rational") -> "Rational":
        return Rational(self._value - rhs._value)

    def mul(self, rhs: "Rational") -> "Rational":
        return Rational(self._value * rhs._value)

    def divide(self, rhs: "Rational") -> Optional["Rational"]:
        """self / rhs, or None if rhs is zero."""
        if rhs.is_zero():
            return None
        return Rational(self._value / rhs._value)

    def power(self, exponent: RationalLike) -> "PowResult":
        """
        Raise self to a rational exponent as far as it can be done exactly.

        Returns one of:
            Applied(value)               - the exponent was fully applied
            PartiallyApplied(base, rem)  - the integer part of the exponent was
                                           applied; rem is the fractional rest
            Unchanged(base, exponent)    - nothing could be applied

        All three unpack as a (base, residual) pair. A negative exponent
        is first folded into the base by inversion, so the pair returned
        for it carries the inverted base and a positive exponent.

        Raises:
            UndefinedForm: For 0^0, and for zero raised to a negative power
        """
        exponent = _coerce(exponent)
        if exponent is None:
            raise TypeError("power: exponent must be a Rational or int")

        if self.is_zero() and exponent.is_zero():
            raise UndefinedForm("0^0 is undefined")

        if exponent.is_zero():
            return Applied(Rational.one())

        base = self
        if exponent.is_negative():
            inverse = base.invert()
            if inverse is None:
                raise UndefinedForm(
                    "zero has no negative powers", {"exponent": exponent}
                )
            base, exponent = inverse, exponent.abs()

        if exponent.is_integer():
            n = exponent.numerator
            if n > U64_MAX:
                logger.debug("exponent %s too large to apply to %s", exponent, base)
                return Unchanged(base, exponent)
            return Applied(Rational(base._value ** n))

        # a^(p/q) with p > q: a^(p/q) = a^quot * a^(rem/q)
        num, den = exponent.numerator, exponent.denominator
        if num > den:
            quot, rem = divmod(num, den)
            if quot <= U64_MAX:
                return PartiallyApplied(
                    Rational(base._value ** quot), Rational(Fraction(rem, den))
                )
            logger.debug("integer part of %s too large to apply", exponent)

        return Unchanged(base, exponent)

    # --------------------------------------------------------
    # Operators
    # --------------------------------------------------------

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.sub(self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        """Like divide(), but raises ZeroDivisionError instead of returning None."""
        other = _coerce(other)
        if other is None:
            return NotImplemented
        result = self.divide(other)
        if result is None:
            raise ZeroDivisionError(f"{self} / 0")
        return result

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __neg__(self) -> "Rational":
        return Rational(-self._value)

    def __abs__(self) -> "Rational":
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other) -> bool:
        if isinstance(other, Rational):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Rational({self})"


def _coerce(value) -> Optional[Rational]:
    """Lift an int to Rational; None for anything that isn't exact."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, int):
        return Rational(value)
    return None


# ============================================================
# Exponentiation results
# ============================================================

class PowResult:
    """
    Outcome of Rational.power.

    Iterating yields (base, residual): the value with as much of the
    exponent applied as possible, and the exponent still to apply.
    """

    __slots__ = ()

    def as_pair(self) -> Tuple[Rational, Rational]:
        raise NotImplementedError

    def __iter__(self):
        return iter(self.as_pair())


@dataclass(frozen=True)
class Applied(PowResult):
    """The exponent was applied completely; the residual is one."""

    value: Rational

    def as_pair(self) -> Tuple[Rational, Rational]:
        return (self.value, Rational.one())


@dataclass(frozen=True)
class PartiallyApplied(PowResult):
    """The integer part was applied; residual is a proper fraction in (0, 1)."""

    base: Rational
    residual: Rational

    def as_pair(self) -> Tuple[Rational, Rational]:
        return (self.base, self.residual)


@dataclass(frozen=True)
class Unchanged(PowResult):
    """No part of the exponent could be applied exactly."""

    base: Rational
    exponent: Rational

    def as_pair(self) -> Tuple[Rational, Rational]:
        return (self.base, self.exponent)
