"""Fixed-income pricing: bond price, price sensitivity, and yield to maturity.

The yield solver runs Newton-Raphson from the coupon rate and falls back
to bracketed bisection when Newton stalls or leaves sane rate bounds.
Non-convergence is reported on the returned :class:`YieldSolution`
rather than raised, unless the solver is configured as strict.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from ..config import SolverConfig
from ..core.types import SolverState, YieldSolution
from ..exceptions import ConvergenceError

__all__ = [
    "price_derivative",
    "price_from_periodic_yield",
    "solve_periodic_yield",
    "solve_periodic_ytm",
]

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = SolverConfig()


def price_from_periodic_yield(
    periodic_yield: float,
    coupon_payment: float,
    face_value: float,
    periods: int,
    zero_rate_tol: float = 1e-12,
) -> float:
    """Present value of the coupons and redemption at a periodic rate.

    Args:
        periodic_yield: Discount rate per coupon period.
        coupon_payment: Coupon paid each period.
        face_value: Redemption amount paid with the last coupon.
        periods: Number of coupon periods.
        zero_rate_tol: Below this magnitude the undiscounted sum is used.

    Returns:
        Model price of the bond.
    """
    if abs(periodic_yield) < zero_rate_tol:
        return coupon_payment * periods + face_value
    with np.errstate(over="ignore", divide="ignore"):
        discount = 1.0 / (1.0 + periodic_yield) ** np.arange(1, periods + 1, dtype=float)
    coupons = coupon_payment * discount.sum() if coupon_payment else 0.0
    return float(coupons + face_value * discount[-1])


def price_derivative(
    periodic_yield: float,
    coupon_payment: float,
    face_value: float,
    periods: int,
) -> float:
    """First derivative of :func:`price_from_periodic_yield` in the rate."""
    t = np.arange(1, periods + 1, dtype=float)
    growth = np.float64(1.0 + periodic_yield)
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        coupon_term = (-t * coupon_payment / growth ** (t + 1)).sum()
        return float(coupon_term - periods * face_value / growth ** (periods + 1))


def _newton(
    residual,
    derivative,
    guess: float,
    cfg: SolverConfig,
) -> YieldSolution | None:
    x = guess
    for i in range(1, cfg.newton_max_iter + 1):
        fx = residual(x)
        if abs(fx) < cfg.price_tol:
            return YieldSolution(x, SolverState.NEWTON, i, True, fx)

        dfx = derivative(x)
        if not math.isfinite(dfx) or abs(dfx) < cfg.derivative_floor:
            logger.debug("Newton stopped at iteration %d: flat derivative %r", i, dfx)
            return None

        step = x - fx / dfx
        if not math.isfinite(step) or step <= cfg.lower_bound or step > cfg.upper_bound:
            logger.debug("Newton stopped at iteration %d: step %r out of bounds", i, step)
            return None
        if abs(step - x) < cfg.step_tol:
            return YieldSolution(step, SolverState.NEWTON, i, True, residual(step))
        x = step
    logger.debug("Newton exhausted %d iterations at %r", cfg.newton_max_iter, x)
    return None


def _bisection(residual, cfg: SolverConfig) -> YieldSolution:
    low, high = cfg.bracket_low, cfg.bracket_high
    f_low = residual(low)
    f_high = residual(high)

    expansions = 0
    while f_low * f_high > 0 and expansions < cfg.bracket_expansions:
        high *= 2
        f_high = residual(high)
        expansions += 1
    bracketed = f_low * f_high <= 0
    if not bracketed:
        logger.warning(
            "No sign change between %r and %r after %d expansions", low, high, expansions
        )

    for i in range(1, cfg.bisection_max_iter + 1):
        mid = (low + high) / 2
        f_mid = residual(mid)
        if abs(f_mid) < cfg.price_tol:
            return YieldSolution(mid, SolverState.BISECTION, i, True, f_mid)
        if f_low * f_mid <= 0:
            high = mid
        else:
            low = mid
            f_low = f_mid

    mid = (low + high) / 2
    return YieldSolution(mid, SolverState.BISECTION, cfg.bisection_max_iter, False, residual(mid))


def solve_periodic_yield(
    market_price: float,
    coupon_payment: float,
    face_value: float,
    periods: int,
    periods_per_year: int,
    coupon_rate_decimal: float,
    config: SolverConfig | None = None,
) -> YieldSolution:
    """Solve for the periodic rate that reprices the bond to ``market_price``.

    Args:
        market_price: Observed market price.
        coupon_payment: Coupon paid each period.
        face_value: Redemption amount.
        periods: Number of coupon periods.
        periods_per_year: Coupon frequency.
        coupon_rate_decimal: Annual coupon rate (0.05 = 5%), used to seed Newton.
        config: Solver tolerances; defaults to :class:`SolverConfig`.

    Returns:
        The periodic yield with solver diagnostics. When neither phase
        converges the best estimate is returned with ``converged=False``.

    Raises:
        ConvergenceError: If ``config.strict`` is set and no phase converges.
    """
    cfg = config or _DEFAULT_CONFIG

    def residual(rate: float) -> float:
        return price_from_periodic_yield(
            rate, coupon_payment, face_value, periods, cfg.zero_rate_tol
        ) - market_price

    def derivative(rate: float) -> float:
        return price_derivative(rate, coupon_payment, face_value, periods)

    guess = max(cfg.initial_guess_floor, coupon_rate_decimal / periods_per_year)
    solution = _newton(residual, derivative, guess, cfg)
    if solution is None:
        logger.debug("Falling back to bisection for price %r", market_price)
        solution = _bisection(residual, cfg)

    if not solution.converged:
        if cfg.strict:
            raise ConvergenceError(
                f"Yield solver did not converge for price {market_price!r} "
                f"(residual {solution.residual:.3e})"
            )
        logger.warning(
            "Yield solver did not converge; returning best estimate %r (residual %.3e)",
            solution.periodic_yield,
            solution.residual,
        )
    else:
        logger.debug("Solved %r", solution)
    return solution


def solve_periodic_ytm(
    market_price: float,
    coupon_payment: float,
    face_value: float,
    periods: int,
    periods_per_year: int,
    coupon_rate_decimal: float,
    config: SolverConfig | None = None,
) -> float:
    """Periodic yield as a plain float; see :func:`solve_periodic_yield`."""
    return solve_periodic_yield(
        market_price,
        coupon_payment,
        face_value,
        periods,
        periods_per_year,
        coupon_rate_decimal,
        config,
    ).periodic_yield
