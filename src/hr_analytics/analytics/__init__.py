"""Roster analytics components.

Each module exposes pure functions of a `RosterSnapshot` (and, where time
matters, an ``as_of`` reference date). None of them depend on another
component's output, so a caller can compute only what it renders.
"""

from hr_analytics.analytics.categorical import (
    exit_type_breakdown,
    filter_options,
    tally,
    tally_field,
)
from hr_analytics.analytics.managers import build_manager_rollup, list_managers, team_members
from hr_analytics.analytics.roster_query import PAGE_SIZE, apply_query
from hr_analytics.analytics.stats import compute_kpis
from hr_analytics.analytics.tenure import bucket_tenure_at_exit, exit_tenure_records
from hr_analytics.analytics.timeseries import (
    build_monthly_series,
    moving_average,
    yearly_exit_trends,
)

__all__ = [
    "PAGE_SIZE",
    "apply_query",
    "bucket_tenure_at_exit",
    "build_manager_rollup",
    "build_monthly_series",
    "compute_kpis",
    "exit_tenure_records",
    "exit_type_breakdown",
    "filter_options",
    "list_managers",
    "moving_average",
    "tally",
    "tally_field",
    "team_members",
    "yearly_exit_trends",
]
