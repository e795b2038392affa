"""
Classification flags used by pattern matching.

Every expression node can describe itself as an Item: a set of algebraic
facts (is it rational, an integer, zero, positive...) that rules can test
without knowing the node's concrete type.

    flags = Rational(-1).classify()
    flags.has(Item.INTEGER)   # => True
    flags.has(Item.UONE)      # => True
    flags.sign()              # => Item.NEG
"""

import abc
import enum
from typing import Optional


class Item(enum.Flag):
    """
    Algebraic facts about a value.

    ZERO, POS and NEG are mutually exclusive. UONE marks a magnitude of
    exactly one (1 or -1) and only ever appears together with INTEGER.
    """

    RATIONAL = enum.auto()
    INTEGER = enum.auto()
    UONE = enum.auto()
    ZERO = enum.auto()
    POS = enum.auto()
    NEG = enum.auto()

    def has(self, flag: "Item") -> bool:
        """True if every bit of flag is set."""
        return (self & flag) == flag

    def sign(self) -> Optional["Item"]:
        """The single sign flag, or None if the value has no known sign."""
        for flag in (Item.ZERO, Item.POS, Item.NEG):
            if self & flag:
                return flag
        return None


# No facts known (symbols, compound nodes)
NONE = Item(0)

SIGN_FLAGS = Item.ZERO | Item.POS | Item.NEG


class CalcursType(abc.ABC):
    """
    Anything that can describe itself with classification flags.

    Implementations must compute the flags from their current value on
    every call; flags are never stored alongside the value.
    """

    __slots__ = ()

    @abc.abstractmethod
    def classify(self) -> Item:
        """Return the classification flags for this value."""
