from __future__ import annotations

from conftest import make_company, make_deal

from crm_analytics.aggregate.leaderboards import company_totals, recent_deals, top_companies


def test_recent_deals_sorted_newest_first() -> None:
    deals = [
        make_deal(1, "New", close_date="2024-02-01"),
        make_deal(2, "Won", close_date="2024-06-30"),
        make_deal(3, "Lost", close_date="2024-04-15"),
    ]
    assert [d.id for d in recent_deals(deals)] == [2, 3, 1]


def test_recent_deals_ties_keep_input_order() -> None:
    deals = [
        make_deal(1, "New", close_date="2024-03-01"),
        make_deal(2, "New", close_date="2024-05-01"),
        make_deal(3, "Won", close_date="2024-03-01"),
        make_deal(4, "Lost", close_date="2024-05-01"),
    ]
    assert [d.id for d in recent_deals(deals)] == [2, 4, 1, 3]


def test_recent_deals_truncates_and_does_not_mutate() -> None:
    deals = [make_deal(i, "New", close_date=f"2024-01-{i:02d}") for i in range(1, 13)]
    before = list(deals)
    out = recent_deals(deals)
    assert len(out) == 10
    assert [d.id for d in out] == list(range(12, 2, -1))
    assert deals == before
    assert all(any(d is orig for orig in deals) for d in out)


def test_recent_deals_short_input_and_empty() -> None:
    deals = [make_deal(1, "New"), make_deal(2, "Won")]
    assert len(recent_deals(deals)) == 2
    assert recent_deals([]) == []
    assert len(recent_deals(deals, top_n=1)) == 1


def test_company_totals_exclude_lost_value_but_count_lost_deals() -> None:
    deals = [
        make_deal(1, "Won", 1000, company="Acme"),
        make_deal(2, "Lost", 500, company="Acme"),
        make_deal(3, "Negotiation", 250, company="Acme"),
        make_deal(4, "Lost", 900, company="Globex"),
    ]
    totals = company_totals(deals)
    assert totals.loc["Acme", "total_value"] == 1250.0
    assert totals.loc["Acme", "deal_count"] == 3
    assert totals.loc["Globex", "total_value"] == 0.0
    assert totals.loc["Globex", "deal_count"] == 1


def test_company_without_deals_still_listed() -> None:
    ranked = top_companies([make_company(1, "Acme")], [])
    assert len(ranked) == 1
    assert ranked[0].name == "Acme"
    assert ranked[0].total_value == 0.0
    assert ranked[0].deal_count == 0


def test_top_companies_ranked_by_value_with_stable_ties() -> None:
    companies = [
        make_company(1, "Acme"),
        make_company(2, "Globex"),
        make_company(3, "Initech"),
        make_company(4, "Hooli"),
    ]
    deals = [
        make_deal(1, "Won", 300, company="Initech"),
        make_deal(2, "Proposal", 500, company="Globex"),
        make_deal(3, "Won", 300, company="Hooli"),
        make_deal(4, "Lost", 10000, company="Acme"),
    ]
    ranked = top_companies(companies, deals)
    assert [c.name for c in ranked] == ["Globex", "Initech", "Hooli", "Acme"]
    assert ranked[-1].deal_count == 1
    assert ranked[-1].total_value == 0.0
    assert ranked[0].industry == "Software"
    assert ranked[0].id == 2


def test_top_companies_ignores_unknown_companies_and_truncates() -> None:
    companies = [make_company(i, f"Co {i}") for i in range(1, 13)]
    deals = [make_deal(i, "Won", 100 * i, company=f"Co {i}") for i in range(1, 13)]
    deals.append(make_deal(99, "Won", 10**6, company="Not Listed"))
    ranked = top_companies(companies, deals)
    assert len(ranked) == 10
    assert [c.name for c in ranked][:2] == ["Co 12", "Co 11"]
    assert "Not Listed" not in {c.name for c in ranked}
    assert len(top_companies(companies, deals, top_n=3)) == 3


def test_top_companies_empty() -> None:
    assert top_companies([], [make_deal(1, "Won")]) == []
    assert top_companies([make_company(1, "Acme")], [], populated=False) == []
