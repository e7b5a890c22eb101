"""Tests for bondlite.rounding."""

import math

from bondlite.rounding import round_half_away, round_money, round_pct


def test_half_rounds_away_from_zero():
    assert round_half_away(2.5) == 3.0
    assert round_half_away(-2.5) == -3.0
    assert round_half_away(0.5) == 1.0


def test_below_half_rounds_down():
    assert round_half_away(0.4999) == 0.0
    assert round_half_away(-1.2) == -1.0


def test_epsilon_bias_corrects_binary_representation():
    # 1.005 is stored as 1.00499999999999989...
    assert round_money(1.005) == 1.01


def test_pct_six_decimals():
    assert round_pct(50 / 950 * 100) == 5.263158


def test_no_negative_zero():
    result = round_money(-0.001)
    assert result == 0.0
    assert math.copysign(1.0, result) == 1.0


def test_non_finite_passthrough():
    assert math.isnan(round_money(float("nan")))
    assert round_money(float("inf")) == float("inf")
