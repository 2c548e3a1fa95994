"""Pipeline funnel aggregation."""
from __future__ import annotations

import logging
from typing import Sequence

from crm_analytics.aggregate.frames import deals_frame
from crm_analytics.models import STAGE_ORDER, Deal, PipelineBucket

log = logging.getLogger(__name__)


def build_pipeline(deals: Sequence[Deal], populated: bool = True) -> list[PipelineBucket]:
    """Return total value and deal count per stage, in canonical stage order.

    Every stage is present, with zeros when no deal sits in it. The
    unpopulated dashboard gets an empty list instead, so callers can tell
    "no data loaded" apart from "no deals in any stage".

    Args:
        deals: Deal records.
        populated: False for the unpopulated dashboard.

    Returns:
        One `PipelineBucket` per stage (six), or an empty list.
    """
    if not populated:
        return []

    pdf = deals_frame(deals)
    stage_labels = [s.value for s in STAGE_ORDER]
    grouped = (
        pdf.groupby("stage")["value"]
        .agg(["sum", "size"])
        .reindex(stage_labels, fill_value=0)
    )

    buckets = [
        PipelineBucket(
            stage=stage,
            total_value=float(grouped.at[stage.value, "sum"]),
            deal_count=int(grouped.at[stage.value, "size"]),
        )
        for stage in STAGE_ORDER
    ]
    log.debug("Pipeline buckets: %s", [(b.stage.value, b.deal_count) for b in buckets])
    return buckets
