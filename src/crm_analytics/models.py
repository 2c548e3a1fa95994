"""Pydantic models for the CRM dataset and the derived analytics.

Input records (`Deal`, `Company`, `RevenueSnapshot`) are frozen; the derived
models describe what the dashboard consumes: formatted KPI headlines with raw
trend series, pipeline buckets, and the two leaderboards.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DealStage(str, Enum):
    """Lifecycle stage of a deal, declared in canonical funnel order."""

    NEW = "New"
    QUALIFIED = "Qualified"
    PROPOSAL = "Proposal"
    NEGOTIATION = "Negotiation"
    WON = "Won"
    LOST = "Lost"


STAGE_ORDER: tuple[DealStage, ...] = tuple(DealStage)
OPEN_STAGES = frozenset(
    {DealStage.NEW, DealStage.QUALIFIED, DealStage.PROPOSAL, DealStage.NEGOTIATION}
)


class DatasetState(str, Enum):
    """The two externally visible states of the dashboard."""

    EMPTY = "empty"
    POPULATED = "populated"


# =========================================================
# INPUT RECORDS
# =========================================================

class Deal(BaseModel):
    """A single opportunity.

    Attributes:
        id: Deal identifier.
        name: Display name of the deal.
        company: Name of the company it belongs to (join key on `Company.name`).
        value: Non-negative monetary amount in USD.
        stage: Current lifecycle stage.
        close_date: Calendar date the deal closed or is expected to close.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    id: int
    name: str
    company: str
    value: float = Field(..., ge=0)
    stage: DealStage
    close_date: date


class Company(BaseModel):
    """A company that deals are booked against."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    id: int
    name: str
    industry: str


class RevenueSnapshot(BaseModel):
    """Pre-aggregated revenue figures for one calendar month."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    month: str
    revenue: float = Field(..., ge=0)
    deals: int = Field(..., ge=0)


class Dataset(BaseModel):
    """The three input collections, supplied wholesale."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    companies: list[Company] = Field(default_factory=list)
    deals: list[Deal] = Field(default_factory=list)
    revenue_by_month: list[RevenueSnapshot] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.companies or self.deals or self.revenue_by_month)


# =========================================================
# DERIVED OUTPUTS
# =========================================================

class TrendPoint(BaseModel):
    """One (period label, raw value) point of a trend series."""
    model_config = ConfigDict(extra="forbid")
    label: str
    value: float


class KpiMetric(BaseModel):
    """A KPI headline.

    Attributes:
        value: Pre-formatted headline string (e.g. '$12,500', '50.0%').
        raw_value: The unformatted number behind `value`.
        trend: Raw monthly values used to draw the sparkline.
    """
    model_config = ConfigDict(extra="forbid")
    value: str
    raw_value: float = 0.0
    trend: list[TrendPoint] = Field(default_factory=list)


class KpiSummary(BaseModel):
    """The four dashboard KPIs."""
    model_config = ConfigDict(extra="forbid")
    total_revenue: KpiMetric
    active_deals: KpiMetric
    win_rate: KpiMetric
    monthly_growth: KpiMetric


class PipelineBucket(BaseModel):
    """Aggregate value and count of the deals sitting in one stage."""
    model_config = ConfigDict(extra="forbid")
    stage: DealStage
    total_value: float = Field(..., ge=0)
    deal_count: int = Field(..., ge=0)


class RankedCompany(BaseModel):
    """Company projection augmented with its open/won value and deal count."""
    model_config = ConfigDict(extra="forbid")
    id: int
    name: str
    industry: str
    total_value: float = Field(..., ge=0)
    deal_count: int = Field(..., ge=0)


class AnalyticsResult(BaseModel):
    """Everything derived from one dataset snapshot."""
    model_config = ConfigDict(extra="forbid")
    state: DatasetState
    kpis: KpiSummary
    pipeline: list[PipelineBucket] = Field(default_factory=list)
    recent_deals: list[Deal] = Field(default_factory=list)
    top_companies: list[RankedCompany] = Field(default_factory=list)
