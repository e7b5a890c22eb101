"""Dataclass and enum types used across BondLite.

All structured results are returned as frozen dataclasses for
immutability, dot-access, and clear ``repr`` output.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import pandas as pd

__all__ = [
    "BondInput",
    "BondResult",
    "CashFlowRow",
    "CouponFrequency",
    "PricingContext",
    "SolverState",
    "TradingStatus",
    "YieldSolution",
]


class CouponFrequency(Enum):
    """Supported coupon frequencies."""

    ANNUAL = "annual"
    SEMI_ANNUAL = "semi-annual"

    @property
    def periods_per_year(self) -> int:
        return 1 if self is CouponFrequency.ANNUAL else 2

    @classmethod
    def coerce(cls, value: object) -> CouponFrequency | object:
        """Map a label or payment count to a frequency.

        Unrecognised values are returned unchanged so that validation can
        report them.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            label = value.strip().lower()
            for member in cls:
                if member.value == label:
                    return member
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            for member in cls:
                if member.periods_per_year == value:
                    return member
        return value


class TradingStatus(Enum):
    """Market price relative to face value."""

    PREMIUM = "premium"
    DISCOUNT = "discount"
    PAR = "par"


class SolverState(Enum):
    """Phase of the yield solver that produced a solution."""

    NEWTON = "newton"
    BISECTION = "bisection"


_REQUEST_FIELDS = {
    "faceValue": "face_value",
    "annualCouponRatePct": "annual_coupon_rate_pct",
    "marketPrice": "market_price",
    "yearsToMaturity": "years_to_maturity",
}


def _coerce_number(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return value


@dataclass(frozen=True)
class BondInput:
    """Caller-supplied bond terms.

    Fields are not checked on construction; run
    :func:`~bondlite.instruments.validation.validate_bond_input` first.

    Attributes:
        face_value: Par amount redeemed at maturity.
        annual_coupon_rate_pct: Annual coupon rate in percent (5 = 5%).
        market_price: Observed market price.
        years_to_maturity: Remaining life in years.
        coupon_frequency: Annual or semi-annual coupons.
        settlement_date: ISO date string or ``date``; ``None`` means today.
    """

    face_value: float
    annual_coupon_rate_pct: float
    market_price: float
    years_to_maturity: float
    coupon_frequency: CouponFrequency
    settlement_date: str | dt.date | None = None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> BondInput:
        """Build an input from a camelCase request mapping.

        Numeric strings become floats and frequency labels become
        :class:`CouponFrequency`; missing numeric fields are ``None``.
        """
        kwargs: dict[str, Any] = {
            attr: _coerce_number(payload.get(key)) for key, attr in _REQUEST_FIELDS.items()
        }
        kwargs["coupon_frequency"] = CouponFrequency.coerce(payload.get("couponFrequency"))
        kwargs["settlement_date"] = payload.get("settlementDate") or None
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        freq = self.coupon_frequency
        settlement = self.settlement_date
        return {
            "faceValue": self.face_value,
            "annualCouponRatePct": self.annual_coupon_rate_pct,
            "marketPrice": self.market_price,
            "yearsToMaturity": self.years_to_maturity,
            "couponFrequency": freq.value if isinstance(freq, CouponFrequency) else freq,
            "settlementDate": settlement.isoformat() if isinstance(settlement, dt.date) else settlement,
        }


@dataclass(frozen=True)
class PricingContext:
    """Quantities derived once from a validated :class:`BondInput`."""

    periods_per_year: int
    total_periods: int
    coupon_rate_decimal: float
    annual_coupon_amount: float
    coupon_payment: float


@dataclass(frozen=True)
class YieldSolution:
    """Outcome of the periodic yield solver.

    Attributes:
        periodic_yield: Discount rate per coupon period, as a decimal.
        method: Solver phase that produced the estimate.
        iterations: Iterations spent in that phase.
        converged: False when the estimate is best-effort only.
        residual: Model price minus market price at ``periodic_yield``.
    """

    periodic_yield: float
    method: SolverState
    iterations: int
    converged: bool
    residual: float

    def __repr__(self) -> str:
        return (
            f"YieldSolution(periodic_yield={self.periodic_yield:.10f}, "
            f"method={self.method.value}, iterations={self.iterations}, "
            f"converged={self.converged})"
        )


@dataclass(frozen=True)
class CashFlowRow:
    """One coupon period of the cash flow schedule."""

    period: int
    payment_date: str
    coupon_payment: float
    cumulative_interest: float
    remaining_principal: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.period,
            "paymentDate": self.payment_date,
            "couponPayment": self.coupon_payment,
            "cumulativeInterest": self.cumulative_interest,
            "remainingPrincipal": self.remaining_principal,
        }


@dataclass(frozen=True)
class BondResult:
    """Yield metrics and cash flow schedule for one bond.

    Monetary fields are rounded to 2 decimals and yield percentages to 6.
    """

    inputs: BondInput
    annual_coupon_amount: float
    coupon_payment: float
    total_periods: int
    current_yield_pct: float
    ytm_pct: float
    effective_annual_yield_pct: float
    total_interest_earned: float
    trading_status: TradingStatus
    premium_discount_amount: float
    cash_flow_schedule: tuple[CashFlowRow, ...]
    solution: YieldSolution | None = field(default=None, compare=False)

    def __repr__(self) -> str:
        return (
            f"BondResult(ytm={self.ytm_pct:.4f}%, current_yield={self.current_yield_pct:.4f}%, "
            f"status={self.trading_status.value}, periods={self.total_periods})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Response mapping with camelCase keys."""
        return {
            "inputs": self.inputs.to_dict(),
            "annualCouponAmount": self.annual_coupon_amount,
            "couponPayment": self.coupon_payment,
            "totalPeriods": self.total_periods,
            "currentYieldPct": self.current_yield_pct,
            "ytmPct": self.ytm_pct,
            "effectiveAnnualYieldPct": self.effective_annual_yield_pct,
            "totalInterestEarned": self.total_interest_earned,
            "tradingStatus": self.trading_status.value,
            "premiumDiscountAmount": self.premium_discount_amount,
            "cashFlowSchedule": [row.to_dict() for row in self.cash_flow_schedule],
        }

    def schedule_frame(self) -> pd.DataFrame:
        """Cash flow schedule as a DataFrame indexed by period."""
        frame = pd.DataFrame(
            [
                {
                    "payment_date": pd.Timestamp(row.payment_date),
                    "coupon_payment": row.coupon_payment,
                    "cumulative_interest": row.cumulative_interest,
                    "remaining_principal": row.remaining_principal,
                }
                for row in self.cash_flow_schedule
            ],
            index=pd.Index([row.period for row in self.cash_flow_schedule], name="period"),
        )
        return frame
