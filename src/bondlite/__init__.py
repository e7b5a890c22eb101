"""BondLite: yield to maturity and cash flow schedules for fixed-rate bonds.

Provides input validation, a Newton-Raphson yield solver with a
bisection fallback, current and effective annual yields, premium or
discount classification, and bullet-repayment coupon schedules.
"""

__version__ = "0.1.0"

from .config import CalculationConfig, PeriodRounding, SolverConfig
from .core.types import (
    BondInput,
    BondResult,
    CashFlowRow,
    CouponFrequency,
    PricingContext,
    SolverState,
    TradingStatus,
    YieldSolution,
)
from .exceptions import BondValidationError, ConvergenceError, DegeneratePeriodError
from .instruments.bond_metrics import calculate_bond_metrics, calculate_from_request
from .instruments.bond_pricing import price_from_periodic_yield, solve_periodic_yield
from .instruments.validation import validate_bond_input

__all__ = [
    # Types
    "BondInput",
    "BondResult",
    "CashFlowRow",
    "CouponFrequency",
    "PricingContext",
    "SolverState",
    "TradingStatus",
    "YieldSolution",
    # Configuration
    "CalculationConfig",
    "PeriodRounding",
    "SolverConfig",
    # Errors
    "BondValidationError",
    "ConvergenceError",
    "DegeneratePeriodError",
    # Calculations
    "calculate_bond_metrics",
    "calculate_from_request",
    "price_from_periodic_yield",
    "solve_periodic_yield",
    "validate_bond_input",
]
