"""Configuration objects for the yield solver and metrics builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "CalculationConfig",
    "PeriodRounding",
    "SolverConfig",
]


class PeriodRounding(Enum):
    """How a fractional ``years * frequency`` product becomes a period count."""

    ROUND = "round"
    STRICT = "strict"


@dataclass(frozen=True)
class SolverConfig:
    """Tolerances and iteration limits for the two-phase yield solver.

    Attributes:
        newton_max_iter: Maximum Newton-Raphson iterations.
        bisection_max_iter: Maximum bisection halvings.
        bracket_expansions: Maximum doublings of the upper bracket.
        price_tol: Absolute price residual accepted as converged.
        step_tol: Newton step size accepted as converged.
        derivative_floor: Smallest usable derivative magnitude.
        zero_rate_tol: Rates closer to zero use the undiscounted price.
        initial_guess_floor: Lower clamp for the Newton starting point.
        lower_bound: Newton aborts when a step lands at or below this rate.
        upper_bound: Newton aborts when a step lands above this rate.
        bracket_low: Initial lower end of the bisection bracket.
        bracket_high: Initial upper end of the bisection bracket.
        strict: Raise :class:`~bondlite.exceptions.ConvergenceError`
            instead of returning a best-effort estimate.
    """

    newton_max_iter: int = 50
    bisection_max_iter: int = 200
    bracket_expansions: int = 20
    price_tol: float = 1e-10
    step_tol: float = 1e-12
    derivative_floor: float = 1e-12
    zero_rate_tol: float = 1e-12
    initial_guess_floor: float = -0.95
    lower_bound: float = -0.999999
    upper_bound: float = 10.0
    bracket_low: float = -0.99
    bracket_high: float = 1.0
    strict: bool = False


@dataclass(frozen=True)
class CalculationConfig:
    """Configuration for a full bond metrics calculation.

    Attributes:
        solver: Yield solver settings.
        period_rounding: ``ROUND`` rounds ``years * frequency`` half away
            from zero; ``STRICT`` rejects fractional period counts.
        money_decimals: Decimal places for monetary outputs.
        pct_decimals: Decimal places for yield percentages.
    """

    solver: SolverConfig = field(default_factory=SolverConfig)
    period_rounding: PeriodRounding = PeriodRounding.ROUND
    money_decimals: int = 2
    pct_decimals: int = 6
