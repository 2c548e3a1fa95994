from __future__ import annotations

from datetime import date

import pytest

from crm_analytics.models import Company, Deal, DealStage, RevenueSnapshot


def make_deal(
    id: int,
    stage: str,
    value: float = 1000,
    close_date: str = "2024-01-15",
    company: str = "Acme",
    name: str | None = None,
) -> Deal:
    return Deal(
        id=id,
        name=name or f"Deal {id}",
        company=company,
        value=value,
        stage=DealStage(stage),
        close_date=date.fromisoformat(close_date),
    )


def make_company(id: int, name: str, industry: str = "Software") -> Company:
    return Company(id=id, name=name, industry=industry)


def make_snapshots(*pairs: tuple[str, float], deals: int = 0) -> list[RevenueSnapshot]:
    return [RevenueSnapshot(month=m, revenue=r, deals=deals) for m, r in pairs]


@pytest.fixture
def won_lost_deals() -> list[Deal]:
    return [
        make_deal(1, "Won", 1000, "2024-01-15"),
        make_deal(2, "Lost", 500, "2024-01-20"),
    ]
