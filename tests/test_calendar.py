"""Tests for bondlite.calendar."""

from __future__ import annotations

import datetime as dt

import pytest

from bondlite.calendar import (
    add_months_clamped,
    is_valid_date,
    months_per_period,
    parse_settlement_date,
    system_clock,
    to_iso,
)


class TestAddMonthsClamped:
    def test_plain_month_step(self):
        assert add_months_clamped(dt.date(2024, 1, 15), 6) == dt.date(2024, 7, 15)

    def test_clamps_to_leap_february(self):
        assert add_months_clamped(dt.date(2024, 1, 31), 1) == dt.date(2024, 2, 29)

    def test_clamps_to_common_february(self):
        assert add_months_clamped(dt.date(2023, 1, 31), 1) == dt.date(2023, 2, 28)

    def test_clamp_does_not_carry_forward(self):
        start = dt.date(2024, 8, 31)
        assert add_months_clamped(start, 6) == dt.date(2025, 2, 28)
        assert add_months_clamped(start, 12) == dt.date(2025, 8, 31)

    def test_year_rollover(self):
        assert add_months_clamped(dt.date(2024, 11, 30), 3) == dt.date(2025, 2, 28)

    def test_start_unchanged(self):
        start = dt.date(2024, 1, 31)
        add_months_clamped(start, 1)
        assert start == dt.date(2024, 1, 31)


class TestParseSettlementDate:
    def test_iso_date(self):
        assert parse_settlement_date("2024-03-15") == dt.date(2024, 3, 15)

    def test_iso_timestamp_keeps_calendar_date(self):
        assert parse_settlement_date("2024-01-15T10:30:00Z") == dt.date(2024, 1, 15)

    def test_date_and_datetime(self):
        assert parse_settlement_date(dt.date(2024, 3, 15)) == dt.date(2024, 3, 15)
        assert parse_settlement_date(dt.datetime(2024, 3, 15, 9, 0)) == dt.date(2024, 3, 15)

    def test_impossible_day_raises(self):
        with pytest.raises(ValueError):
            parse_settlement_date("2024-02-30")

    def test_garbage_raises(self):
        with pytest.raises(ValueError):
            parse_settlement_date("not-a-date")

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            parse_settlement_date("   ")

    def test_wrong_type_raises(self):
        with pytest.raises(TypeError):
            parse_settlement_date(20240115)  # type: ignore[arg-type]


def test_is_valid_date():
    assert is_valid_date("2024-01-15")
    assert not is_valid_date("2024-13-01")
    assert not is_valid_date(42)


def test_months_per_period():
    assert months_per_period(1) == 12
    assert months_per_period(2) == 6
    with pytest.raises(ValueError, match="divide"):
        months_per_period(5)


def test_to_iso():
    assert to_iso(dt.date(2024, 7, 5)) == "2024-07-05"


def test_system_clock_returns_date():
    assert isinstance(system_clock(), dt.date)
