"""Input checks for bond calculations."""

from __future__ import annotations

import math
from numbers import Real

from ..calendar import is_valid_date
from ..core.types import BondInput, CouponFrequency

__all__ = ["validate_bond_input"]


def _finite(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def validate_bond_input(inputs: BondInput) -> list[str]:
    """Check every field of ``inputs`` and collect the violations.

    All rules are evaluated; none short-circuits another.

    Args:
        inputs: Bond terms, possibly malformed.

    Returns:
        Violation messages in field order. An empty list means valid.
    """
    errors: list[str] = []

    if not _finite(inputs.face_value) or inputs.face_value <= 0:
        errors.append("Face value must be positive.")
    rate = inputs.annual_coupon_rate_pct
    if not _finite(rate) or rate < 0:
        errors.append("Annual coupon rate must be zero or greater.")
    elif rate > 100:
        errors.append("Annual coupon rate must not exceed 100.")
    if not _finite(inputs.market_price) or inputs.market_price <= 0:
        errors.append("Market price must be positive.")
    if not _finite(inputs.years_to_maturity) or inputs.years_to_maturity <= 0:
        errors.append("Years to maturity must be positive.")
    if not isinstance(inputs.coupon_frequency, CouponFrequency):
        errors.append("Coupon frequency must be annual or semi-annual.")
    if inputs.settlement_date and not is_valid_date(inputs.settlement_date):
        errors.append("Settlement date is invalid.")

    return errors
