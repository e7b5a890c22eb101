"""Exception types raised by BondLite calculations."""

from __future__ import annotations

__all__ = [
    "BondValidationError",
    "ConvergenceError",
    "DegeneratePeriodError",
]


class BondValidationError(ValueError):
    """Raised when bond inputs violate one or more validation rules.

    Attributes:
        errors: Human-readable violation messages, in rule order.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("Validation failed: " + " ".join(self.errors))


class DegeneratePeriodError(ValueError):
    """Raised when years to maturity rounds to zero coupon periods."""


class ConvergenceError(RuntimeError):
    """Raised by a strict solver when no yield reprices the bond."""
