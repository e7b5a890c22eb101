"""Calendar helpers: settlement parsing and month arithmetic."""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable

from dateutil.relativedelta import relativedelta

__all__ = [
    "Clock",
    "add_months_clamped",
    "is_valid_date",
    "months_per_period",
    "parse_settlement_date",
    "system_clock",
    "to_iso",
]

Clock = Callable[[], dt.date]


def system_clock() -> dt.date:
    """Today's date from the wall clock."""
    return dt.date.today()


def parse_settlement_date(value: str | dt.date | dt.datetime) -> dt.date:
    """Convert an ISO-8601 date string or date-like value to a ``date``.

    Full ISO timestamps are accepted; only the calendar date is kept.

    Raises:
        ValueError: If the string is not a valid calendar date.
        TypeError: If the value is not a string or date-like.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return dt.datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise ValueError(f"Unsupported date string: {value!r}") from exc
    raise TypeError(f"Unsupported type for date: {type(value)}")


def is_valid_date(value: object) -> bool:
    """True if ``value`` parses as a calendar date."""
    try:
        parse_settlement_date(value)  # type: ignore[arg-type]
    except (ValueError, TypeError):
        return False
    return True


def add_months_clamped(start: dt.date, months: int) -> dt.date:
    """Advance ``start`` by whole months, clamping to the month's last day.

    ``2024-01-31`` plus one month is ``2024-02-29``; the input is never
    modified.
    """
    return start + relativedelta(months=months)


def months_per_period(periods_per_year: int) -> int:
    """Whole months between coupon dates."""
    if 12 % periods_per_year:
        raise ValueError(f"{periods_per_year} coupons per year do not divide 12 months")
    return 12 // periods_per_year


def to_iso(day: dt.date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return day.isoformat()
