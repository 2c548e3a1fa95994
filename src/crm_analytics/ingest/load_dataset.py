"""Load a CRM dataset from JSON or fall back to the built-in fixtures.

The JSON document has three top-level arrays: `companies`, `deals` and
`revenue_by_month`, with field names matching the models in
`crm_analytics.models` and ISO dates (YYYY-MM-DD) for `close_date`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from crm_analytics.ingest.sample_data import COMPANIES, DEALS, REVENUE_BY_MONTH
from crm_analytics.models import Dataset

log = logging.getLogger(__name__)


def load_dataset(path: Path) -> Dataset:
    """Parse a JSON dataset file.

    Args:
        path: Path to the JSON document.

    Returns:
        Parsed `Dataset`.

    Raises:
        FileNotFoundError: if `path` does not exist.
        pydantic.ValidationError: if the document does not match the models.
    """
    log.info("Loading dataset from %s", path)
    dataset = Dataset.model_validate_json(path.read_text(encoding="utf-8"))
    log.info(
        "Loaded %d companies, %d deals, %d months",
        len(dataset.companies), len(dataset.deals), len(dataset.revenue_by_month),
    )
    return dataset


def sample_dataset() -> Dataset:
    """Return the built-in demo dataset."""
    return Dataset.model_validate(
        {
            "companies": COMPANIES,
            "deals": DEALS,
            "revenue_by_month": REVENUE_BY_MONTH,
        }
    )


def empty_dataset() -> Dataset:
    """Return the unpopulated dataset."""
    return Dataset()
