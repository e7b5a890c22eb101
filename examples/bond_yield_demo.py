"""Yield metrics and coupon schedule for a discount bond."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

import bondlite as bl

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def main() -> None:
    terms = bl.BondInput(
        face_value=1000.0,
        annual_coupon_rate_pct=5.0,
        market_price=950.0,
        years_to_maturity=10.0,
        coupon_frequency=bl.CouponFrequency.SEMI_ANNUAL,
        settlement_date="2024-01-15",
    )
    result = bl.calculate_bond_metrics(terms)
    print(result)
    print(f"Current yield:          {result.current_yield_pct:.4f}%")
    print(f"Yield to maturity:      {result.ytm_pct:.4f}%")
    print(f"Effective annual yield: {result.effective_annual_yield_pct:.4f}%")
    print(result.schedule_frame().head())

    try:
        bl.calculate_from_request({"faceValue": -1, "couponFrequency": "quarterly"})
    except bl.BondValidationError as exc:
        for message in exc.errors:
            print(f"rejected: {message}")


if __name__ == "__main__":
    main()
