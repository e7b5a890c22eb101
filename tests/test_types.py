"""Tests for bondlite.core.types and bondlite.exceptions."""

from __future__ import annotations

import datetime as dt

import pytest

from bondlite.core.types import BondInput, CouponFrequency
from bondlite.exceptions import BondValidationError


class TestCouponFrequency:
    def test_periods_per_year(self):
        assert CouponFrequency.ANNUAL.periods_per_year == 1
        assert CouponFrequency.SEMI_ANNUAL.periods_per_year == 2

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("annual", CouponFrequency.ANNUAL),
            (" Semi-Annual ", CouponFrequency.SEMI_ANNUAL),
            (2, CouponFrequency.SEMI_ANNUAL),
            (CouponFrequency.ANNUAL, CouponFrequency.ANNUAL),
        ],
    )
    def test_coerce(self, value, expected):
        assert CouponFrequency.coerce(value) is expected

    @pytest.mark.parametrize("value", ["quarterly", 4, True, None])
    def test_coerce_unknown_passthrough(self, value):
        assert CouponFrequency.coerce(value) is value


class TestBondInput:
    def test_from_mapping(self):
        terms = BondInput.from_mapping(
            {
                "faceValue": "1000",
                "annualCouponRatePct": "4.5",
                "marketPrice": 990,
                "yearsToMaturity": 3,
                "couponFrequency": "annual",
                "settlementDate": "",
            }
        )
        assert terms.face_value == 1000.0
        assert terms.annual_coupon_rate_pct == 4.5
        assert terms.market_price == 990
        assert terms.coupon_frequency is CouponFrequency.ANNUAL
        assert terms.settlement_date is None

    def test_to_dict_formats_date(self):
        terms = BondInput(1000.0, 5.0, 950.0, 10.0, CouponFrequency.SEMI_ANNUAL, dt.date(2024, 1, 15))
        payload = terms.to_dict()
        assert payload["settlementDate"] == "2024-01-15"
        assert payload["couponFrequency"] == "semi-annual"

    def test_frozen(self):
        terms = BondInput(1000.0, 5.0, 950.0, 10.0, CouponFrequency.ANNUAL)
        with pytest.raises(AttributeError):
            terms.face_value = 1.0  # type: ignore[misc]


def test_validation_error_message():
    err = BondValidationError(["Face value must be positive.", "Market price must be positive."])
    assert err.errors == ["Face value must be positive.", "Market price must be positive."]
    assert str(err) == "Validation failed: Face value must be positive. Market price must be positive."
