from __future__ import annotations

from conftest import make_company, make_deal, make_snapshots

from crm_analytics.aggregate.build import dataset_state, derive_analytics, derive_from_dataset
from crm_analytics.ingest.load_dataset import empty_dataset, sample_dataset
from crm_analytics.models import DatasetState


def test_empty_state_resolves_every_view_to_its_empty_form() -> None:
    result = derive_from_dataset(empty_dataset())
    assert result.state is DatasetState.EMPTY
    k = result.kpis
    assert (k.total_revenue.value, k.active_deals.value, k.win_rate.value, k.monthly_growth.value) == (
        "$0", "0", "0%", "0%",
    )
    assert k.total_revenue.trend == k.active_deals.trend == k.win_rate.trend == k.monthly_growth.trend == []
    assert result.pipeline == []
    assert result.recent_deals == []
    assert result.top_companies == []


def test_companies_only_dataset_is_populated() -> None:
    result = derive_analytics([], [make_company(1, "Acme")], [])
    assert dataset_state([], [make_company(1, "Acme")], []) is DatasetState.POPULATED
    assert result.state is DatasetState.POPULATED
    assert len(result.pipeline) == 6
    assert [(c.name, c.total_value, c.deal_count) for c in result.top_companies] == [("Acme", 0.0, 0)]
    assert result.kpis.total_revenue.value == "$0"
    assert result.kpis.win_rate.value == "0.0%"


def test_derivation_is_idempotent_and_leaves_inputs_alone() -> None:
    dataset = sample_dataset()
    before = dataset.model_dump_json()
    first = derive_from_dataset(dataset).model_dump_json()
    second = derive_from_dataset(dataset).model_dump_json()
    assert first == second
    assert dataset.model_dump_json() == before


def test_sample_dataset_headlines() -> None:
    result = derive_from_dataset(sample_dataset())
    k = result.kpis
    assert k.total_revenue.value == "$453,000"
    assert k.active_deals.value == "10"
    assert k.win_rate.value == "71.4%"
    assert k.monthly_growth.value == "10.7%"
    assert [p.label for p in k.total_revenue.trend] == ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]


def test_sample_dataset_structural_properties() -> None:
    dataset = sample_dataset()
    result = derive_from_dataset(dataset)

    assert sum(b.deal_count for b in result.pipeline) == len(dataset.deals)

    dates = [d.close_date for d in result.recent_deals]
    assert len(dates) == 10
    assert dates == sorted(dates, reverse=True)

    values = [c.total_value for c in result.top_companies]
    assert len(values) == 10
    assert values == sorted(values, reverse=True)
    for company in result.top_companies:
        mine = [d for d in dataset.deals if d.company == company.name]
        assert company.deal_count == len(mine)
        assert company.total_value == sum(d.value for d in mine if d.stage.value != "Lost")


def test_leaderboard_limits_are_configurable() -> None:
    result = derive_from_dataset(sample_dataset(), recent_limit=3, top_limit=5)
    assert len(result.recent_deals) == 3
    assert len(result.top_companies) == 5


def test_views_are_independent_of_each_other(won_lost_deals) -> None:
    snapshots = make_snapshots(("Jan", 1000), ("Feb", 1500))
    result = derive_analytics(won_lost_deals, [], snapshots)
    assert result.kpis.win_rate.value == "50.0%"
    assert result.kpis.monthly_growth.value == "50.0%"
    assert result.top_companies == []
    assert [d.id for d in result.recent_deals] == [2, 1]
    assert make_deal(1, "Won", 1000, "2024-01-15") in result.recent_deals
