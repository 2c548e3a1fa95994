from __future__ import annotations

import math

from crm_analytics.formatting import (
    fmt_count,
    fmt_currency,
    fmt_percent,
    round_half_up,
    safe_ratio,
)


def test_fmt_currency_has_no_fraction_and_groups_thousands() -> None:
    assert fmt_currency(1000) == "$1,000"
    assert fmt_currency(453000.0) == "$453,000"
    assert fmt_currency(0) == "$0"


def test_fmt_currency_rounds_half_up() -> None:
    assert fmt_currency(1234.5) == "$1,235"
    assert fmt_currency(1234.49) == "$1,234"


def test_fmt_percent_keeps_one_decimal() -> None:
    assert fmt_percent(50) == "50.0%"
    assert fmt_percent(200 / 3) == "66.7%"
    assert fmt_percent(-12.34) == "-12.3%"


def test_fmt_count_groups_thousands() -> None:
    assert fmt_count(7) == "7"
    assert fmt_count(1204) == "1,204"


def test_round_half_up_uses_exact_value() -> None:
    assert round_half_up(0.25, 1) == 0.3
    assert round_half_up(0.35, 1) == 0.3  # 0.35 is stored as 0.34999...
    assert round_half_up(7.05, 1) == 7.0  # 7.05 is stored as 7.04999...


def test_round_half_up_normalises_negative_zero() -> None:
    value = round_half_up(-0.04, 1)
    assert value == 0.0
    assert math.copysign(1.0, value) == 1.0
    assert fmt_percent(-0.04) == "0.0%"


def test_non_finite_values_become_zero() -> None:
    assert round_half_up(float("nan")) == 0.0
    assert round_half_up(float("inf")) == 0.0
    assert safe_ratio(5, 0) == 0.0
    assert safe_ratio(0, 0) == 0.0
    assert safe_ratio(1, 4) == 0.25
