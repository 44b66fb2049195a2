"""Headline KPI computation for the dashboard cards.

All counts are taken over the full roster. Averages and rates are rounded to
one decimal and guarded so an empty or degenerate roster yields zeros rather
than NaN.
"""

from __future__ import annotations

import logging

import pandas as pd

from hr_analytics.analytics._common import AsOf, resolve_as_of, round1, safe_mean, years_between
from hr_analytics.models import INVOLUNTARY, VOLUNTARY, KPISnapshot
from hr_analytics.snapshot import RosterSnapshot

log = logging.getLogger(__name__)

NEW_HIRE_WINDOW_DAYS = 365
RECENT_EXIT_WINDOW_DAYS = 90


def _distinct_non_empty(values: pd.Series) -> int:
    return int(values[values != ""].nunique())


def compute_kpis(roster: RosterSnapshot, as_of: AsOf = None) -> KPISnapshot:
    """Compute the scalar KPI snapshot.

    Args:
        roster: Snapshot to summarize.
        as_of: Reference instant; defaults to now.

    Returns:
        `KPISnapshot` where:
        - `avg_tenure` averages active employees' tenure up to `as_of`,
          skipping unparseable join dates.
        - `attrition_rate` is exits in the calendar year of `as_of` as a
          percentage of the whole roster.
        - `new_hires` / `recent_exits` count dates on or after
          `as_of` minus 365 / 90 days.
        - `avg_tenure_at_exit` averages exit-minus-join over exits with both
          dates parseable.
    """
    ts = resolve_as_of(as_of)
    pdf = roster.frame()

    total = len(pdf)
    active = pdf[pdf["is_active"]]
    exited = pdf[~pdf["is_active"]]

    avg_tenure = max(0.0, safe_mean(years_between(active["join_date"], ts)))

    current_year_exits = int((exited["exit_date"].dt.year == ts.year).sum())
    attrition_rate = (current_year_exits / total) * 100.0 if total > 0 else 0.0

    hire_cutoff = ts - pd.Timedelta(days=NEW_HIRE_WINDOW_DAYS)
    new_hires = int((pdf["join_date"] >= hire_cutoff).sum())

    tenure_at_exit = years_between(exited["join_date"], exited["exit_date"])
    avg_tenure_at_exit = max(0.0, safe_mean(tenure_at_exit))

    exit_cutoff = ts - pd.Timedelta(days=RECENT_EXIT_WINDOW_DAYS)
    recent_exits = int((exited["exit_date"] >= exit_cutoff).sum())

    kpis = KPISnapshot(
        total_employees=total,
        active_employees=len(active),
        exited_employees=len(exited),
        total_departments=_distinct_non_empty(pdf["department"]),
        total_locations=_distinct_non_empty(pdf["location"]),
        avg_tenure=round1(avg_tenure),
        attrition_rate=round1(attrition_rate),
        new_hires=new_hires,
        voluntary_exits=int((exited["exit_category"] == VOLUNTARY).sum()),
        involuntary_exits=int((exited["exit_category"] == INVOLUNTARY).sum()),
        avg_tenure_at_exit=round1(avg_tenure_at_exit),
        recent_exits=recent_exits,
    )
    log.debug("Computed KPIs for %d employees as of %s", total, ts.date())
    return kpis
