"""pandas views over the input records shared by the aggregations."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from crm_analytics.models import Deal

DEAL_COLUMNS = ["id", "name", "company", "value", "stage", "close_date"]

# Fixed English abbreviations; strftime("%b") would follow the process locale.
MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def deals_frame(deals: Sequence[Deal]) -> pd.DataFrame:
    """Return one row per deal, in input order, with a positional index.

    Args:
        deals: Deal records.

    Returns:
        DataFrame with columns `id`, `name`, `company`, `value` (float),
        `stage` (stage label string), `close_date` (datetime64) and
        `month` (short month label of `close_date`).
    """
    rows = [
        {
            "id": d.id,
            "name": d.name,
            "company": d.company,
            "value": d.value,
            "stage": d.stage.value,
            "close_date": d.close_date,
        }
        for d in deals
    ]
    pdf = pd.DataFrame(rows, columns=DEAL_COLUMNS)
    pdf["value"] = pdf["value"].astype(float)
    pdf["close_date"] = pd.to_datetime(pdf["close_date"])
    pdf["month"] = pdf["close_date"].dt.month.map(lambda m: MONTH_ABBR[int(m) - 1])
    return pdf
