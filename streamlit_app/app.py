from __future__ import annotations

import pandas as pd
import streamlit as st
import altair as alt

from hr_analytics.analytics import (
    apply_query,
    bucket_tenure_at_exit,
    build_monthly_series,
    compute_kpis,
    exit_type_breakdown,
    filter_options,
    list_managers,
    tally_field,
    team_members,
    yearly_exit_trends,
)
from hr_analytics.config import get_settings
from hr_analytics.exceptions import RosterLoadError
from hr_analytics.ingest import load_roster
from hr_analytics.models import RosterFilters, RosterSort
from hr_analytics.snapshot import RosterSnapshot

# =====================================================
# Page config
# =====================================================
st.set_page_config(page_title="HR Dashboard", layout="wide")
st.title("👥 HR Dashboard")
st.caption("Employee analytics and insights")

settings = get_settings()


@st.cache_resource(show_spinner="Loading HR data...")
def get_roster(source: str) -> RosterSnapshot:
    """Load the roster once per source; the snapshot is shared across reruns."""
    return load_roster(source, cache_dir=settings.cache_dir)


try:
    roster = get_roster(settings.roster_source)
except RosterLoadError as exc:
    st.error(f"Error loading HR data: {exc}")
    st.stop()


# =====================================================
# Helpers
# =====================================================
def to_frame(items: list) -> pd.DataFrame:
    """Turn a list of result models into a DataFrame for charting."""
    return pd.DataFrame([i.model_dump() for i in items])


def bar_chart(df: pd.DataFrame, label: str, value: str, title: str) -> alt.Chart:
    """Bar chart that keeps the engine's ordering of `df`."""
    return (
        alt.Chart(df)
        .mark_bar()
        .encode(
            x=alt.X(f"{label}:N", sort=None, title=None),
            y=alt.Y(f"{value}:Q", title=title),
            tooltip=[f"{label}:N", f"{value}:Q"],
        )
        .properties(height=300)
    )


# =====================================================
# SECTION 0: KPI CARDS
# =====================================================
kpis = compute_kpis(roster)

row1 = st.columns(4)
row1[0].metric("Total Employees", kpis.total_employees)
row1[1].metric("Active Employees", kpis.active_employees)
row1[2].metric("Exited Employees", kpis.exited_employees)
row1[3].metric("Departments", kpis.total_departments)

row2 = st.columns(4)
row2[0].metric("Locations", kpis.total_locations)
row2[1].metric("Avg Tenure", f"{kpis.avg_tenure} years")
row2[2].metric(f"Attrition Rate ({pd.Timestamp.now().year})", f"{kpis.attrition_rate}%")
row2[3].metric("New Hires (12m)", kpis.new_hires)

row3 = st.columns(4)
row3[0].metric("Voluntary Exits", kpis.voluntary_exits)
row3[1].metric("Involuntary Exits", kpis.involuntary_exits)
row3[2].metric("Avg Tenure at Exit", f"{kpis.avg_tenure_at_exit} years")
row3[3].metric("Recent Exits (3m)", kpis.recent_exits)

st.divider()

# =====================================================
# SECTION 1: WORKFORCE BREAKDOWN
# =====================================================
st.header("📊 Workforce Breakdown")
active_only = st.toggle("Active employees only", value=False)

c1, c2, c3 = st.columns(3)
for col, field, title in (
    (c1, "department", "Employees by Department"),
    (c2, "location", "Employees by Location"),
    (c3, "gender", "Gender Distribution"),
):
    df_tally = to_frame(tally_field(roster, field, active_only=active_only))
    with col:
        st.subheader(title)
        if df_tally.empty:
            st.info("No data.")
        else:
            st.altair_chart(bar_chart(df_tally, "key", "count", "Employees"), width="stretch")

st.divider()

# =====================================================
# SECTION 2: TURNOVER & EXIT ANALYSIS
# =====================================================
st.header("📉 Exit Analysis & Trends")

series = build_monthly_series(roster, window_months=settings.window_months)
df_monthly = to_frame(series.points)

df_turnover = df_monthly.melt(
    id_vars=["month"],
    value_vars=["joins", "exits_total"],
    var_name="series",
    value_name="employees",
)
st.subheader("Joins vs Exits (monthly)")
st.altair_chart(
    alt.Chart(df_turnover)
    .mark_line(point=True)
    .encode(
        x=alt.X("month:O", title="Month"),
        y=alt.Y("employees:Q", title="Employees"),
        color=alt.Color("series:N", title=None),
        tooltip=["month:O", "series:N", "employees:Q"],
    )
    .properties(height=320),
    width="stretch",
)

df_exits = df_monthly.melt(
    id_vars=["month"],
    value_vars=["exits_voluntary", "exits_involuntary", "exits_total", "moving_average"],
    var_name="series",
    value_name="exits",
)
st.subheader("Monthly Exit Trends")
st.altair_chart(
    alt.Chart(df_exits)
    .mark_line()
    .encode(
        x=alt.X("month:O", title="Month"),
        y=alt.Y("exits:Q", title="Exits"),
        color=alt.Color("series:N", title=None),
        strokeDash=alt.condition(
            alt.datum.series == "moving_average", alt.value([5, 5]), alt.value([0])
        ),
        tooltip=["month:O", "series:N", "exits:Q"],
    )
    .properties(height=320),
    width="stretch",
)

e1, e2 = st.columns(2)
with e1:
    st.subheader("Exit Types")
    df_types = to_frame(exit_type_breakdown(roster))
    if df_types.empty:
        st.info("No exits recorded.")
    else:
        st.altair_chart(
            alt.Chart(df_types)
            .mark_arc()
            .encode(theta="count:Q", color="key:N", tooltip=["key:N", "count:Q"]),
            width="stretch",
        )
with e2:
    st.subheader("Exits by Year")
    df_years = to_frame(yearly_exit_trends(roster))
    if df_years.empty:
        st.info("No exits recorded.")
    else:
        df_years = df_years.melt(
            id_vars=["year"],
            value_vars=["voluntary", "involuntary", "unknown"],
            var_name="exit_type",
            value_name="exits",
        )
        st.altair_chart(
            alt.Chart(df_years)
            .mark_bar()
            .encode(
                x=alt.X("year:O", title="Year"),
                y=alt.Y("exits:Q", stack=True),
                color="exit_type:N",
                tooltip=["year:O", "exit_type:N", "exits:Q"],
            ),
            width="stretch",
        )

st.subheader("Tenure at Exit")
df_tenure = to_frame(bucket_tenure_at_exit(roster)).melt(
    id_vars=["label"],
    value_vars=["voluntary", "involuntary", "unknown"],
    var_name="exit_type",
    value_name="exits",
)
st.altair_chart(
    alt.Chart(df_tenure)
    .mark_bar()
    .encode(
        x=alt.X("label:N", sort=None, title="Tenure"),
        y=alt.Y("exits:Q", stack=True),
        color="exit_type:N",
        tooltip=["label:N", "exit_type:N", "exits:Q"],
    )
    .properties(height=300),
    width="stretch",
)

st.divider()

# =====================================================
# SECTION 3: TEAM MANAGEMENT
# =====================================================
st.header("🧑‍💼 Team Management")

m1, m2, m3 = st.columns([2, 1, 1])
manager_search = m1.text_input("Search managers or departments")
manager_sort = m2.selectbox("Sort by", ["team_size", "name", "department"])
team_active_only = m3.checkbox("Active only", value=True)

managers = list_managers(
    roster,
    search=manager_search,
    sort_by=manager_sort,
    direction="desc" if manager_sort == "team_size" else "asc",
    active_only=team_active_only,
)
if not managers:
    st.info("No managers match.")
else:
    st.dataframe(to_frame(managers), width="stretch", hide_index=True)
    labels = {m.id: f"{m.name} ({m.id})" for m in managers}
    selected = st.selectbox("Team members for", list(labels), format_func=labels.get)
    members = team_members(roster, selected, active_only=team_active_only)
    st.dataframe(to_frame(members), width="stretch", hide_index=True)

st.divider()

# =====================================================
# SECTION 4: EMPLOYEE DIRECTORY
# =====================================================
st.header("📋 Employee Directory")

options = filter_options(roster)
f1, f2, f3, f4 = st.columns(4)
search = f1.text_input("Search name, ID or designation")
department = f2.selectbox("Department", [""] + options.departments, format_func=lambda v: v or "All")
location = f3.selectbox("Location", [""] + options.locations, format_func=lambda v: v or "All")
status = f4.selectbox("Status", ["all", "active", "exited"])

s1, s2, s3 = st.columns(3)
sort_field = s1.selectbox("Sort by", ["id", "name", "designation", "department", "location", "join_date"])
sort_direction = s2.radio("Direction", ["asc", "desc"], horizontal=True)
page = s3.number_input("Page", min_value=1, value=1, step=1)

result = apply_query(
    roster,
    RosterFilters(search_term=search, department=department, location=location, status=status),
    RosterSort(field=sort_field, direction=sort_direction),
    page=int(page),
    page_size=settings.page_size,
)
st.caption(f"{result.total_records} employees • page {result.page} of {max(result.total_pages, 1)}")
st.dataframe(to_frame(result.employees), width="stretch", hide_index=True)
