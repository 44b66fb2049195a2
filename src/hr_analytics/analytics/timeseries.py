"""Calendar-month join/exit series and yearly exit trends.

Buckets are keyed by (year, month) periods, so month boundaries are exact
regardless of month length. The window always has exactly `window_months`
points ending at the month containing `as_of`.
"""

from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd

from hr_analytics.analytics._common import AsOf, resolve_as_of, round1
from hr_analytics.models import (
    EXIT_CATEGORIES,
    INVOLUNTARY,
    UNKNOWN,
    VOLUNTARY,
    MonthlyPoint,
    MonthlySeries,
    YearlyExitPoint,
)
from hr_analytics.snapshot import RosterSnapshot

log = logging.getLogger(__name__)

DEFAULT_WINDOW_MONTHS = 24
MOVING_AVERAGE_WINDOW = 3


def moving_average(series: Sequence[float], window: int = MOVING_AVERAGE_WINDOW) -> list[float]:
    """Centered moving average with truncated edges.

    With ``h = window // 2``, index ``i`` averages
    ``series[max(0, i - h):min(n, i + h + 1)]``. For the default window of 3
    edge points average two values and interior points three. Results are
    rounded to one decimal.

    Args:
        series: Values to smooth.
        window: Odd window size (default 3).

    Returns:
        List of the same length as `series`.

    Raises:
        ValueError: if `window` is not a positive odd number.
    """
    if window < 1 or window % 2 == 0:
        raise ValueError(f"window must be a positive odd number, got {window}")
    values = pd.Series(list(series), dtype=float)
    if values.empty:
        return []
    smoothed = values.rolling(window=window, center=True, min_periods=1).mean()
    return [round1(v) for v in smoothed]


def _monthly_counts(dates: pd.Series, months: pd.PeriodIndex) -> pd.Series:
    """Count parseable dates per month, restricted to `months`."""
    periods = dates.dropna().dt.to_period("M")
    return periods.value_counts().reindex(months, fill_value=0).astype(int)


def build_monthly_series(
    roster: RosterSnapshot,
    as_of: AsOf = None,
    window_months: int = DEFAULT_WINDOW_MONTHS,
) -> MonthlySeries:
    """Build the rolling monthly joins/exits series.

    Args:
        roster: Snapshot to aggregate.
        as_of: Reference instant; the last bucket is its month. Defaults to now.
        window_months: Number of monthly buckets (default 24).

    Returns:
        `MonthlySeries` with `window_months` points, oldest first. Events
        outside the window are ignored. The moving average is taken over
        `exits_total` and is also stored on each point.

    Raises:
        ValueError: if `window_months` is less than 1.
    """
    if window_months < 1:
        raise ValueError("window_months must be at least 1")

    ts = resolve_as_of(as_of)
    months = pd.period_range(end=ts.to_period("M"), periods=window_months, freq="M")
    pdf = roster.frame()

    joins = _monthly_counts(pdf["join_date"], months)
    exits = {
        category: _monthly_counts(pdf.loc[pdf["exit_category"] == category, "exit_date"], months)
        for category in EXIT_CATEGORIES
    }
    totals = exits[VOLUNTARY] + exits[INVOLUNTARY] + exits[UNKNOWN]
    trend = moving_average(totals.tolist())

    points = [
        MonthlyPoint(
            month=str(period),
            label=period.strftime("%b %Y"),
            joins=int(joins[period]),
            exits_voluntary=int(exits[VOLUNTARY][period]),
            exits_involuntary=int(exits[INVOLUNTARY][period]),
            exits_unknown=int(exits[UNKNOWN][period]),
            exits_total=int(totals[period]),
            moving_average=avg,
        )
        for period, avg in zip(months, trend)
    ]
    log.debug(
        "Built %d monthly points from %s to %s", len(points), months[0], months[-1]
    )
    return MonthlySeries(points=points, moving_average=trend)


def yearly_exit_trends(roster: RosterSnapshot) -> list[YearlyExitPoint]:
    """Exits per calendar year with the exit-type split, oldest year first.

    Only years that have at least one exit with a parseable date appear.
    """
    pdf = roster.frame()
    exited = pdf[pdf["exit_date"].notna()]
    if exited.empty:
        return []

    by_year = (
        pd.crosstab(exited["exit_date"].dt.year, exited["exit_category"])
        .reindex(columns=list(EXIT_CATEGORIES), fill_value=0)
        .sort_index()
    )
    return [
        YearlyExitPoint(
            year=int(year),
            voluntary=int(row[VOLUNTARY]),
            involuntary=int(row[INVOLUNTARY]),
            unknown=int(row[UNKNOWN]),
            total=int(row[VOLUNTARY] + row[INVOLUNTARY] + row[UNKNOWN]),
        )
        for year, row in by_year.iterrows()
    ]
