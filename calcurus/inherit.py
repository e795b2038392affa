"""
Composition in place of inheritance for expression nodes.

Many node kinds share the same bookkeeping data (see expression.Base),
but a node is not a kind of Base and must not be usable where a Base is
expected. Instead, each node owns a `base` field and exposes it through
the Inherited capability. The @inherit decorator writes that field and
accessor for you:

    @dataclass(frozen=True)
    @inherit(Base)
    class Symbol(Expr):
        name: str

    sym = Symbol("x")
    sym.get_base()                 # => Base()
    isinstance(sym, Inherited)     # => True
    isinstance(sym, Base)          # => False

@inherit must sit beneath @dataclass so the added field is picked up when
the dataclass is built.
"""

import abc
import dataclasses
import inspect
import logging
from typing import Any, Callable, TypeVar

from .errors import InheritError

logger = logging.getLogger(__name__)

BASE_FIELD = "base"

T = TypeVar("T", bound=type)


class Inherited(abc.ABC):
    """Capability of classes composed with @inherit."""

    # The base type a composed class embeds
    __base_type__: type

    @abc.abstractmethod
    def get_base(self) -> Any:
        """Return the embedded base instance."""


def _get_base(self):
    return getattr(self, BASE_FIELD)


def inherit(base_type: type) -> Callable[[T], T]:
    """
    Class decorator embedding an instance of base_type as field `base`.

    The field is keyword-only, defaults to base_type(), and takes no part
    in equality or hashing. The decorated class gains get_base() and is
    registered as an Inherited.

    Raises:
        InheritError: At class definition, if the class has no named field
            layout (a tuple subclass), is already a dataclass, or already
            declares a `base` field.
    """
    if not isinstance(base_type, type):
        raise InheritError(
            "inherit() expects a type as its base",
            {"base": repr(base_type)},
        )

    def decorate(cls: T) -> T:
        if not isinstance(cls, type):
            raise InheritError(
                "@inherit can only decorate classes",
                {"target": repr(cls), "base": base_type.__name__},
            )
        if issubclass(cls, tuple):
            raise InheritError(
                f"{cls.__qualname__}: only classes with named fields can embed "
                f"a base; tuple layouts are positional",
                {"base": base_type.__name__},
            )
        if dataclasses.is_dataclass(cls):
            raise InheritError(
                f"{cls.__qualname__}: already a dataclass; place @inherit "
                f"beneath @dataclass",
                {"base": base_type.__name__},
            )

        annotations = inspect.get_annotations(cls)
        if BASE_FIELD in annotations or BASE_FIELD in cls.__dict__:
            raise InheritError(
                f"{cls.__qualname__}: field '{BASE_FIELD}' is already declared",
                {"base": base_type.__name__},
            )

        cls.__annotations__ = {**annotations, BASE_FIELD: base_type}
        setattr(cls, BASE_FIELD, dataclasses.field(
            default_factory=base_type,
            compare=False,
            hash=False,
            repr=False,
            kw_only=True,
        ))
        cls.get_base = _get_base
        cls.__base_type__ = base_type
        Inherited.register(cls)

        logger.debug("composed %s with base %s", cls.__qualname__, base_type.__name__)
        return cls

    return decorate


def base_of(obj: Any) -> Any:
    """Embedded base of an Inherited object."""
    if not isinstance(obj, Inherited):
        raise TypeError(f"{type(obj).__name__} does not embed a base")
    return obj.get_base()
