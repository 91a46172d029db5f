"""Tests for rate and numeric-entry helpers."""

from __future__ import annotations

import pytest

from dismissals.utils.rates import (
    average,
    coerce_balls,
    coerce_runs,
    one_decimal,
    parse_leading_int,
    strike_rate,
)


class TestOneDecimal:
    def test_rounds_half_up(self):
        assert one_decimal(0.25) == 0.3
        assert one_decimal(2.5 / 10) == 0.3

    def test_binary_value_decides(self):
        # 1.15 is stored slightly below 1.15
        assert one_decimal(1.15) == 1.1

    def test_integers(self):
        assert one_decimal(1500) == 1500.0


class TestRates:
    def test_strike_rate(self):
        assert strike_rate(35, 29) == 120.7
        assert strike_rate(15, 1) == 1500.0

    def test_strike_rate_no_balls(self):
        assert strike_rate(10, 0) == 0.0

    def test_average(self):
        assert average(35, 3) == 11.7
        assert average(0, 2) == 0.0
        assert average(10, 0) is None


class TestParsing:
    @pytest.mark.parametrize("raw,expected", [
        ("42", 42), ("+5", 5), ("-3", -3), ("  8 ", 8), ("8.7", 8),
        ("1e3", 1), ("", None), ("  ", None), ("x1", None), (None, None),
        (7, 7), (7.9, 7), (float("nan"), None), (True, None),
    ])
    def test_parse_leading_int(self, raw, expected):
        assert parse_leading_int(raw) == expected

    def test_coerce_runs(self):
        assert coerce_runs("0") == 0
        assert coerce_runs("-1") == 0
        assert coerce_runs("six") == 0

    def test_coerce_balls(self):
        assert coerce_balls("0") == 1
        assert coerce_balls("") == 1
        assert coerce_balls("17") == 17
