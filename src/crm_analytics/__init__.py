"""crm_analytics package.

Derives dashboard analytics from a small CRM dataset: KPI headlines with
monthly trend series, a pipeline-stage breakdown, and the recent-deals and
top-companies leaderboards.

Architecture:
- Inputs are pydantic models (deals, companies, monthly revenue snapshots)
- pandas is used for the grouping/sorting inside each aggregation
- `derive_analytics` is a pure function; the CLI and Streamlit app call it
  whenever the dataset changes
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
