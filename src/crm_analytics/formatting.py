"""Number formatting for KPI headlines.

All formatting is pinned to en-US / USD. Only headline strings are formatted;
trend series keep raw numbers.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import numpy as np

ZERO_CURRENCY = "$0"
ZERO_COUNT = "0"
ZERO_PERCENT = "0%"


def safe_ratio(numerator: float, denominator: float) -> float:
    """Return numerator / denominator, or 0.0 when the result would not be finite."""
    if not denominator:
        return 0.0
    ratio = numerator / denominator
    return float(ratio) if np.isfinite(ratio) else 0.0


def round_half_up(value: float, digits: int = 1) -> float:
    """Round on the exact decimal value of `value`, halves away from zero.

    Negative zero is normalised to 0.0 and non-finite input becomes 0.0.
    """
    if not np.isfinite(value):
        return 0.0
    quantum = Decimal(1).scaleb(-digits)
    rounded = float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
    return rounded if rounded != 0 else 0.0


def fmt_currency(x: float) -> str:
    """Format a USD amount with no fractional digits: 12500 -> '$12,500'."""
    amount = round_half_up(x, 0)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.0f}"


def fmt_percent(pct: float) -> str:
    """Format a value already expressed in percent: 50 -> '50.0%'."""
    return f"{round_half_up(pct, 1):,.1f}%"


def fmt_count(n: int) -> str:
    """Format a count with thousands separators."""
    return f"{int(n):,}"
