"""KPI headline and trend derivation.

Four metrics are produced from the deals and the monthly revenue snapshots:

- total revenue: value of Won deals; trend is snapshot revenue
- active deals: number of deals in an open stage; trend is snapshot deal counts
- win rate: won / (won + lost); trend is the same ratio per snapshot month
- monthly growth: revenue change vs. the previous snapshot, latest month as
  headline

Snapshots are an independent source: they are never recomputed from deals.
"""
from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd

from crm_analytics.aggregate.frames import deals_frame
from crm_analytics.formatting import (
    ZERO_COUNT,
    ZERO_CURRENCY,
    ZERO_PERCENT,
    fmt_count,
    fmt_currency,
    fmt_percent,
    round_half_up,
    safe_ratio,
)
from crm_analytics.models import (
    OPEN_STAGES,
    Deal,
    DealStage,
    KpiMetric,
    KpiSummary,
    RevenueSnapshot,
    TrendPoint,
)

log = logging.getLogger(__name__)


def empty_kpis() -> KpiSummary:
    """Return the fixed zero-valued KPIs shown before any data is loaded."""
    return KpiSummary(
        total_revenue=KpiMetric(value=ZERO_CURRENCY),
        active_deals=KpiMetric(value=ZERO_COUNT),
        win_rate=KpiMetric(value=ZERO_PERCENT),
        monthly_growth=KpiMetric(value=ZERO_PERCENT),
    )


def _win_rate_pct(stages: pd.Series) -> float:
    """Return won / (won + lost) as a percentage, 0 when nothing closed."""
    won = int((stages == DealStage.WON.value).sum())
    lost = int((stages == DealStage.LOST.value).sum())
    return safe_ratio(won, won + lost) * 100.0


def win_rate_trend(pdf: pd.DataFrame, snapshots: Sequence[RevenueSnapshot]) -> list[TrendPoint]:
    """Return the monthly win rate for every snapshot month.

    Deals are matched on the short month name of `close_date` only; the
    year is ignored, so e.g. Jan 2023 and Jan 2024 deals land in the same point.

    Args:
        pdf: Frame from `deals_frame`.
        snapshots: Revenue snapshots defining the months, in order.
    """
    points = []
    for snap in snapshots:
        month_stages = pdf.loc[pdf["month"] == snap.month, "stage"]
        points.append(TrendPoint(label=snap.month, value=round_half_up(_win_rate_pct(month_stages), 1)))
    return points


def growth_trend(snapshots: Sequence[RevenueSnapshot]) -> list[TrendPoint]:
    """Return month-over-month revenue growth in percent, first month fixed at 0.

    Growth is 0 whenever the previous month's revenue is 0.
    """
    points = []
    for i, snap in enumerate(snapshots):
        if i == 0:
            growth = 0.0
        else:
            prev = snapshots[i - 1].revenue
            growth = safe_ratio(snap.revenue - prev, prev) * 100.0
        points.append(TrendPoint(label=snap.month, value=round_half_up(growth, 1)))
    return points


def derive_kpis(
    deals: Sequence[Deal],
    snapshots: Sequence[RevenueSnapshot],
    populated: bool = True,
) -> KpiSummary:
    """Compute the four KPI headlines and their trend series.

    Args:
        deals: Deal records.
        snapshots: Monthly revenue snapshots in chronological order.
        populated: False for the unpopulated dashboard; returns `empty_kpis()`.

    Returns:
        `KpiSummary` with formatted headlines and raw trend values.
    """
    if not populated:
        return empty_kpis()

    pdf = deals_frame(deals)

    total_revenue = float(pdf.loc[pdf["stage"] == DealStage.WON.value, "value"].sum())
    active_count = int(pdf["stage"].isin([s.value for s in OPEN_STAGES]).sum())
    win_rate = _win_rate_pct(pdf["stage"])

    growth = growth_trend(snapshots)
    latest_growth = growth[-1].value if growth else 0.0

    log.debug(
        "KPIs: revenue=%.2f active=%d win_rate=%.3f latest_growth=%.1f",
        total_revenue, active_count, win_rate, latest_growth,
    )

    return KpiSummary(
        total_revenue=KpiMetric(
            value=fmt_currency(total_revenue),
            raw_value=total_revenue,
            trend=[TrendPoint(label=s.month, value=s.revenue) for s in snapshots],
        ),
        active_deals=KpiMetric(
            value=fmt_count(active_count),
            raw_value=active_count,
            trend=[TrendPoint(label=s.month, value=s.deals) for s in snapshots],
        ),
        win_rate=KpiMetric(
            value=fmt_percent(win_rate),
            raw_value=win_rate,
            trend=win_rate_trend(pdf, snapshots),
        ),
        monthly_growth=KpiMetric(
            value=fmt_percent(latest_growth),
            raw_value=latest_growth,
            trend=growth,
        ),
    )
