"""Leaderboards: most recent deals and top companies by pipeline value.

Both rankings use a stable sort, so ties keep their input order.
"""
from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd

from crm_analytics.aggregate.frames import deals_frame
from crm_analytics.config import DEFAULT_LEADERBOARD_SIZE
from crm_analytics.models import Company, Deal, DealStage, RankedCompany

log = logging.getLogger(__name__)


def recent_deals(deals: Sequence[Deal], top_n: int = DEFAULT_LEADERBOARD_SIZE) -> list[Deal]:
    """Return the `top_n` deals with the latest close date, newest first.

    Args:
        deals: Deal records (left untouched).
        top_n: Leaderboard size (default 10).

    Returns:
        A new list holding the same `Deal` objects, a subsequence of `deals`.
    """
    if not deals:
        return []

    pdf = deals_frame(deals)
    ordered = pdf.sort_values("close_date", ascending=False, kind="stable").head(top_n)
    return [deals[i] for i in ordered.index]


def company_totals(deals: Sequence[Deal]) -> pd.DataFrame:
    """Return per-company `total_value` and `deal_count`.

    Lost deals count towards `deal_count` but add nothing to `total_value`.

    Returns:
        DataFrame indexed by company name with columns `total_value`, `deal_count`.
    """
    pdf = deals_frame(deals)
    pdf["open_value"] = pdf["value"].where(pdf["stage"] != DealStage.LOST.value, 0.0)
    return pdf.groupby("company").agg(
        total_value=("open_value", "sum"),
        deal_count=("id", "size"),
    )


def top_companies(
    companies: Sequence[Company],
    deals: Sequence[Deal],
    top_n: int = DEFAULT_LEADERBOARD_SIZE,
    populated: bool = True,
) -> list[RankedCompany]:
    """Return the `top_n` companies ranked by won/open deal value.

    Every listed company takes part, with zeros if no deal references it;
    deals naming a company that is not listed are ignored. Ties keep the
    order of `companies`.

    Args:
        companies: Company records, in display order.
        deals: Deal records.
        top_n: Leaderboard size (default 10).
        populated: False for the unpopulated dashboard.

    Returns:
        Ranked companies, highest `total_value` first.
    """
    if not populated or not companies:
        return []

    totals = company_totals(deals)
    pdf = pd.DataFrame([c.model_dump() for c in companies])
    pdf["total_value"] = pdf["name"].map(totals["total_value"]).fillna(0.0).astype(float)
    pdf["deal_count"] = pdf["name"].map(totals["deal_count"]).fillna(0).astype(int)

    ranked = pdf.sort_values("total_value", ascending=False, kind="stable").head(top_n)
    log.debug("Top companies: %s", list(ranked["name"]))
    return [RankedCompany.model_validate(row) for row in ranked.to_dict("records")]
