"""Entry point that derives every dashboard view from one dataset snapshot.

Expectations:
- Input: deals, companies and revenue snapshots, all supplied at once (or all
  empty for the unpopulated dashboard)
- Output: an `AnalyticsResult`; inputs are never modified and identical inputs
  always give identical results
"""
from __future__ import annotations

import logging
from typing import Sequence

from crm_analytics.aggregate.kpis import derive_kpis
from crm_analytics.aggregate.leaderboards import recent_deals, top_companies
from crm_analytics.aggregate.pipeline import build_pipeline
from crm_analytics.config import DEFAULT_LEADERBOARD_SIZE
from crm_analytics.models import (
    AnalyticsResult,
    Company,
    Dataset,
    DatasetState,
    Deal,
    RevenueSnapshot,
)

log = logging.getLogger(__name__)


def dataset_state(
    deals: Sequence[Deal],
    companies: Sequence[Company],
    snapshots: Sequence[RevenueSnapshot],
) -> DatasetState:
    """Return EMPTY when all three collections are empty, else POPULATED."""
    if not (deals or companies or snapshots):
        return DatasetState.EMPTY
    return DatasetState.POPULATED


def derive_analytics(
    deals: Sequence[Deal],
    companies: Sequence[Company],
    snapshots: Sequence[RevenueSnapshot],
    recent_limit: int = DEFAULT_LEADERBOARD_SIZE,
    top_limit: int = DEFAULT_LEADERBOARD_SIZE,
) -> AnalyticsResult:
    """Derive KPIs, pipeline and leaderboards for a dataset snapshot.

    The four views are computed independently of each other. Call this again
    with the new collections whenever the dataset is replaced.

    Args:
        deals: Deal records.
        companies: Company records, in display order.
        snapshots: Monthly revenue snapshots in chronological order.
        recent_limit: Size of the recent-deals leaderboard.
        top_limit: Size of the top-companies leaderboard.

    Returns:
        `AnalyticsResult` for the snapshot.
    """
    state = dataset_state(deals, companies, snapshots)
    populated = state is DatasetState.POPULATED
    log.info(
        "Deriving analytics (state=%s, deals=%d, companies=%d, months=%d)",
        state.value, len(deals), len(companies), len(snapshots),
    )

    return AnalyticsResult(
        state=state,
        kpis=derive_kpis(deals, snapshots, populated=populated),
        pipeline=build_pipeline(deals, populated=populated),
        recent_deals=recent_deals(deals, recent_limit),
        top_companies=top_companies(companies, deals, top_limit, populated=populated),
    )


def derive_from_dataset(
    dataset: Dataset,
    recent_limit: int = DEFAULT_LEADERBOARD_SIZE,
    top_limit: int = DEFAULT_LEADERBOARD_SIZE,
) -> AnalyticsResult:
    """Convenience wrapper around `derive_analytics` for a `Dataset`."""
    return derive_analytics(
        dataset.deals,
        dataset.companies,
        dataset.revenue_by_month,
        recent_limit=recent_limit,
        top_limit=top_limit,
    )
