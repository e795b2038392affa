"""
Exception hierarchy for calcurus.

    CalcursError
    ├── UndefinedForm   (fatal arithmetic, e.g. 0^0)
    └── InheritError    (bad class passed to @inherit)

Expected absences (division by zero, inverting zero, integer overflow)
are not exceptions; those operations return None instead.
"""

from typing import Any, Dict, Optional


class CalcursError(Exception):
    """Base class for all calcurus errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({details})"


class UndefinedForm(CalcursError, ArithmeticError):
    """
    An expression with no defined value, such as 0^0.

    Raised for caller-side contract violations; the surrounding
    simplifier is expected to never build these forms.
    """


class InheritError(CalcursError, TypeError):
    """A class cannot be composed with a base type."""
