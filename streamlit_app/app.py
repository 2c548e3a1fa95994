from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

from crm_analytics.aggregate.build import derive_from_dataset
from crm_analytics.config import get_settings
from crm_analytics.ingest.load_dataset import empty_dataset, load_dataset, sample_dataset
from crm_analytics.models import KpiMetric

# =====================================================
# Page config
# =====================================================
st.set_page_config(page_title="DemoCRM Dashboard", layout="wide")
st.title("📊 DemoCRM Dashboard")
st.caption("Start with a clean slate, then populate the dashboard with a single click.")

settings = get_settings()

# =====================================================
# Empty / populated toggle
# =====================================================
if "populated" not in st.session_state:
    st.session_state.populated = False

c_reset, c_populate, _ = st.columns([1, 1, 4])
with c_reset:
    if st.button("Reset to Empty", disabled=not st.session_state.populated):
        st.session_state.populated = False
        st.rerun()
with c_populate:
    if st.button("Populate Dashboard", type="primary", disabled=st.session_state.populated):
        st.session_state.populated = True
        st.rerun()

if st.session_state.populated:
    dataset = load_dataset(settings.data_path) if settings.data_path else sample_dataset()
else:
    dataset = empty_dataset()

result = derive_from_dataset(
    dataset,
    recent_limit=settings.recent_deals_limit,
    top_limit=settings.top_companies_limit,
)

# =====================================================
# Helpers
# =====================================================
def sparkline(metric: KpiMetric, color: str) -> None:
    """Draw a KPI trend as a small area chart, or a placeholder when empty."""
    if not metric.trend:
        st.caption("No trend yet")
        return
    df = pd.DataFrame([p.model_dump() for p in metric.trend])
    chart = (
        alt.Chart(df)
        .mark_area(line={"color": color}, color=color, opacity=0.25)
        .encode(
            x=alt.X("label:N", sort=None, axis=None),
            y=alt.Y("value:Q", axis=None),
            tooltip=["label:N", "value:Q"],
        )
        .properties(height=60)
    )
    st.altair_chart(chart, width="stretch")


def empty_state(title: str, description: str) -> None:
    st.info(f"**{title}**\n\n{description}")


# =====================================================
# SECTION 1 — KPIs
# =====================================================
kpi_cards = [
    ("Total Revenue", "Won this year", result.kpis.total_revenue, "#3B82F6"),
    ("Active Deals", "Pipeline in motion", result.kpis.active_deals, "#6366F1"),
    ("Win Rate", "Won vs. lost", result.kpis.win_rate, "#10B981"),
    ("Monthly Growth", "vs. last month", result.kpis.monthly_growth, "#F97316"),
]

for col, (label, helper, metric, color) in zip(st.columns(4), kpi_cards):
    with col:
        st.metric(label, metric.value, help=helper)
        sparkline(metric, color)

st.divider()

# =====================================================
# SECTION 2 — REVENUE TREND + PIPELINE
# =====================================================
c_rev, c_pipe = st.columns([3, 2])

with c_rev:
    st.subheader("Revenue Trend")
    if dataset.revenue_by_month:
        df_rev = pd.DataFrame([s.model_dump() for s in dataset.revenue_by_month])
        chart_rev = (
            alt.Chart(df_rev)
            .mark_line(point=True, color="#3B82F6")
            .encode(
                x=alt.X("month:N", sort=None, title=None),
                y=alt.Y("revenue:Q", title="Revenue (USD)"),
                tooltip=["month:N", alt.Tooltip("revenue:Q", format="$,.0f"), "deals:Q"],
            )
            .properties(height=300)
        )
        st.altair_chart(chart_rev, width="stretch")
    else:
        empty_state("No revenue data yet", "Revenue trendlines appear here once deals start closing.")

with c_pipe:
    st.subheader("Pipeline Overview")
    if result.pipeline:
        df_pipe = pd.DataFrame([b.model_dump(mode="json") for b in result.pipeline])
        stage_sort = list(df_pipe["stage"])
        bars = (
            alt.Chart(df_pipe)
            .mark_bar(color="#3B82F6")
            .encode(
                y=alt.Y("stage:N", sort=stage_sort, title=None),
                x=alt.X("total_value:Q", title="Pipeline Value (USD)"),
                tooltip=["stage:N", alt.Tooltip("total_value:Q", format="$,.0f"), "deal_count:Q"],
            )
        )
        counts = (
            alt.Chart(df_pipe)
            .mark_text(align="left", dx=4, color="#10B981")
            .encode(
                y=alt.Y("stage:N", sort=stage_sort),
                x="total_value:Q",
                text=alt.Text("deal_count:Q"),
            )
        )
        st.altair_chart((bars + counts).properties(height=300), width="stretch")
    else:
        empty_state(
            "No pipeline data",
            "The funnel comes to life after your first set of deals enter the pipeline.",
        )

st.divider()

# =====================================================
# SECTION 3 — LEADERBOARDS
# =====================================================
c_recent, c_top = st.columns(2)

with c_recent:
    st.subheader("Recent Deals")
    if result.recent_deals:
        df_recent = pd.DataFrame([d.model_dump(mode="json") for d in result.recent_deals])
        df_recent = df_recent[["name", "company", "value", "stage", "close_date"]]
        st.dataframe(
            df_recent,
            hide_index=True,
            width="stretch",
            column_config={"value": st.column_config.NumberColumn("Value", format="$%d")},
        )
    else:
        empty_state("No deals yet", "Keep an eye here as soon as you start logging opportunities.")

with c_top:
    st.subheader("Top Companies")
    if result.top_companies:
        df_top = pd.DataFrame([c.model_dump() for c in result.top_companies])
        df_top = df_top[["name", "industry", "total_value", "deal_count"]]
        st.dataframe(
            df_top,
            hide_index=True,
            width="stretch",
            column_config={"total_value": st.column_config.NumberColumn("Total Value", format="$%d")},
        )
    else:
        empty_state(
            "No companies yet",
            "Company leaderboards surface after your opportunities start flowing.",
        )

# =====================================================
# Footer
# =====================================================
st.caption("DemoCRM • pandas • pydantic • Streamlit • Altair")
