"""Bond yield metrics and coupon cash flow schedules.

Example::

    import bondlite as bl

    terms = bl.BondInput(
        face_value=1000,
        annual_coupon_rate_pct=5,
        market_price=950,
        years_to_maturity=10,
        coupon_frequency=bl.CouponFrequency.SEMI_ANNUAL,
        settlement_date="2024-01-15",
    )
    result = bl.calculate_bond_metrics(terms)
    result.ytm_pct, result.trading_status
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Mapping
from typing import Any

from ..calendar import (
    Clock,
    add_months_clamped,
    months_per_period,
    parse_settlement_date,
    system_clock,
    to_iso,
)
from ..config import CalculationConfig, PeriodRounding
from ..core.types import (
    BondInput,
    BondResult,
    CashFlowRow,
    PricingContext,
    TradingStatus,
    YieldSolution,
)
from ..exceptions import BondValidationError, DegeneratePeriodError
from ..rounding import round_half_away, round_money, round_pct
from .bond_pricing import solve_periodic_yield
from .validation import validate_bond_input

__all__ = [
    "build_bond_result",
    "build_cash_flow_schedule",
    "calculate_bond_metrics",
    "calculate_from_request",
    "pricing_context",
    "trading_status",
]

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = CalculationConfig()

# Fractional period counts within this distance of a whole number are
# accepted by the strict rounding policy.
_PERIOD_TOL = 1e-9


def pricing_context(
    inputs: BondInput,
    period_rounding: PeriodRounding = PeriodRounding.ROUND,
) -> PricingContext:
    """Derive coupon amounts and the period count from validated inputs.

    Raises:
        DegeneratePeriodError: If the period count rounds below one.
        ValueError: If ``period_rounding`` is ``STRICT`` and
            ``years_to_maturity * frequency`` is not a whole number.
    """
    freq = inputs.coupon_frequency.periods_per_year
    raw_periods = inputs.years_to_maturity * freq
    total_periods = int(round_half_away(raw_periods))
    if period_rounding is PeriodRounding.STRICT and abs(raw_periods - total_periods) > _PERIOD_TOL:
        raise ValueError(
            f"{inputs.years_to_maturity} years does not span a whole number of "
            f"{inputs.coupon_frequency.value} periods"
        )
    if total_periods <= 0:
        raise DegeneratePeriodError("Total periods must be at least 1.")

    coupon_rate = inputs.annual_coupon_rate_pct / 100
    annual_coupon = inputs.face_value * coupon_rate
    return PricingContext(
        periods_per_year=freq,
        total_periods=total_periods,
        coupon_rate_decimal=coupon_rate,
        annual_coupon_amount=annual_coupon,
        coupon_payment=annual_coupon / freq,
    )


def trading_status(market_price: float, face_value: float) -> TradingStatus:
    """Classify a bond as trading at a premium, discount, or par."""
    diff = market_price - face_value
    if diff > 0:
        return TradingStatus.PREMIUM
    if diff < 0:
        return TradingStatus.DISCOUNT
    return TradingStatus.PAR


def build_cash_flow_schedule(
    context: PricingContext,
    face_value: float,
    settlement: dt.date,
    money_decimals: int = 2,
) -> tuple[CashFlowRow, ...]:
    """One row per coupon period; principal is repaid in full at the end."""
    step = months_per_period(context.periods_per_year)
    coupon = round_money(context.coupon_payment, money_decimals)
    principal = round_money(face_value, money_decimals)

    rows = []
    cumulative = 0.0
    for period in range(1, context.total_periods + 1):
        cumulative += context.coupon_payment
        rows.append(
            CashFlowRow(
                period=period,
                payment_date=to_iso(add_months_clamped(settlement, step * period)),
                coupon_payment=coupon,
                cumulative_interest=round_money(cumulative, money_decimals),
                remaining_principal=0.0 if period == context.total_periods else principal,
            )
        )
    return tuple(rows)


def build_bond_result(
    inputs: BondInput,
    solution: YieldSolution,
    context: PricingContext,
    settlement: dt.date,
    config: CalculationConfig | None = None,
) -> BondResult:
    """Assemble reported metrics from a solved periodic yield."""
    cfg = config or _DEFAULT_CONFIG
    money = cfg.money_decimals
    pct = cfg.pct_decimals
    freq = context.periods_per_year
    periodic = solution.periodic_yield

    premium_discount = inputs.market_price - inputs.face_value
    normalised = BondInput(
        face_value=inputs.face_value,
        annual_coupon_rate_pct=inputs.annual_coupon_rate_pct,
        market_price=inputs.market_price,
        years_to_maturity=inputs.years_to_maturity,
        coupon_frequency=inputs.coupon_frequency,
        settlement_date=to_iso(settlement),
    )

    return BondResult(
        inputs=normalised,
        annual_coupon_amount=round_money(context.annual_coupon_amount, money),
        coupon_payment=round_money(context.coupon_payment, money),
        total_periods=context.total_periods,
        current_yield_pct=round_pct(context.annual_coupon_amount / inputs.market_price * 100, pct),
        ytm_pct=round_pct(periodic * freq * 100, pct),
        effective_annual_yield_pct=round_pct(((1 + periodic) ** freq - 1) * 100, pct),
        total_interest_earned=round_money(context.coupon_payment * context.total_periods, money),
        trading_status=trading_status(inputs.market_price, inputs.face_value),
        premium_discount_amount=round_money(premium_discount, money),
        cash_flow_schedule=build_cash_flow_schedule(context, inputs.face_value, settlement, money),
        solution=solution,
    )


def calculate_bond_metrics(
    inputs: BondInput,
    *,
    config: CalculationConfig | None = None,
    clock: Clock | None = None,
) -> BondResult:
    """Validate inputs, solve for yield, and build the full result.

    Args:
        inputs: Bond terms.
        config: Solver and rounding settings.
        clock: Supplies the settlement date when ``inputs`` has none;
            defaults to today's date.

    Returns:
        Yield metrics and the cash flow schedule.

    Raises:
        BondValidationError: If any input rule is violated.
        DegeneratePeriodError: If the maturity is shorter than half a period.
    """
    errors = validate_bond_input(inputs)
    if errors:
        raise BondValidationError(errors)

    cfg = config or _DEFAULT_CONFIG
    context = pricing_context(inputs, cfg.period_rounding)
    if inputs.settlement_date:
        settlement = parse_settlement_date(inputs.settlement_date)
    else:
        settlement = (clock or system_clock)()

    solution = solve_periodic_yield(
        inputs.market_price,
        context.coupon_payment,
        inputs.face_value,
        context.total_periods,
        context.periods_per_year,
        context.coupon_rate_decimal,
        cfg.solver,
    )
    logger.debug(
        "Priced %d-period bond at %r: periodic yield %r via %s",
        context.total_periods,
        inputs.market_price,
        solution.periodic_yield,
        solution.method.value,
    )
    return build_bond_result(inputs, solution, context, settlement, cfg)


def calculate_from_request(
    payload: Mapping[str, Any],
    *,
    config: CalculationConfig | None = None,
    clock: Clock | None = None,
) -> dict[str, Any]:
    """Run :func:`calculate_bond_metrics` on a camelCase request mapping.

    Returns:
        The camelCase response mapping from :meth:`BondResult.to_dict`.
    """
    inputs = BondInput.from_mapping(payload)
    return calculate_bond_metrics(inputs, config=config, clock=clock).to_dict()
