from __future__ import annotations

import pytest

from conftest import AS_OF, make_roster
from hr_analytics.analytics.timeseries import (
    build_monthly_series,
    moving_average,
    yearly_exit_trends,
)
from hr_analytics.snapshot import RosterSnapshot


def test_moving_average_truncates_edges() -> None:
    assert moving_average([2, 4, 6]) == [3.0, 4.0, 5.0]
    assert moving_average([1, 0, 0, 1]) == [0.5, 0.3, 0.3, 0.5]
    assert moving_average([5]) == [5.0]
    assert moving_average([]) == []


def test_moving_average_wider_odd_window() -> None:
    assert moving_average([1, 2, 3, 4, 5], window=5) == [2.0, 2.5, 3.0, 3.5, 4.0]
    assert moving_average([4, 8], window=1) == [4.0, 8.0]


@pytest.mark.parametrize("window", [0, 2, 4, -1])
def test_moving_average_rejects_even_or_empty_window(window: int) -> None:
    with pytest.raises(ValueError):
        moving_average([1, 2, 3], window=window)


@pytest.mark.parametrize("window", [1, 3, 24])
def test_series_length_matches_window(empty_roster: RosterSnapshot, window: int) -> None:
    series = build_monthly_series(empty_roster, AS_OF, window_months=window)
    assert len(series.points) == window
    assert len(series.moving_average) == window
    assert series.points[-1].month == "2025-06"
    assert all(p.joins == 0 and p.exits_total == 0 for p in series.points)


def test_series_rejects_empty_window(empty_roster: RosterSnapshot) -> None:
    with pytest.raises(ValueError):
        build_monthly_series(empty_roster, AS_OF, window_months=0)


def test_months_are_consecutive_oldest_first(sample_roster: RosterSnapshot) -> None:
    points = build_monthly_series(sample_roster, AS_OF).points
    assert points[0].month == "2023-07"
    assert points[0].label == "Jul 2023"
    assert points[6].month == "2024-01"
    assert points[-1].label == "Jun 2025"


def test_events_counted_by_calendar_month(sample_roster: RosterSnapshot) -> None:
    points = {p.month: p for p in build_monthly_series(sample_roster, AS_OF).points}
    assert points["2023-08"].joins == 1  # E007
    assert points["2024-11"].joins == 1  # E004
    assert sum(p.joins for p in points.values()) == 2
    assert points["2024-01"].exits_involuntary == 1
    assert points["2025-03"].exits_voluntary == 1
    assert points["2025-05"].exits_unknown == 1
    assert points["2025-06"].exits_total == 1
    assert sum(p.exits_total for p in points.values()) == 4


def test_month_boundaries_are_exact() -> None:
    roster = make_roster([
        ("M1", "Last day", "2025-01-31", "", "", "", "", "", "", "", ""),
        ("M2", "First day", "2025-02-01", "", "", "", "", "", "", "", ""),
        ("M3", "Leap day", "2024-02-29", "", "", "", "", "", "", "2025-02-28", "Voluntary"),
    ])
    points = {p.month: p for p in build_monthly_series(roster, "2025-02-28", window_months=13).points}
    assert points["2025-01"].joins == 1
    assert points["2025-02"].joins == 1
    assert points["2024-02"].joins == 1
    assert points["2025-02"].exits_voluntary == 1


def test_events_outside_window_are_ignored(sample_roster: RosterSnapshot) -> None:
    points = build_monthly_series(sample_roster, AS_OF, window_months=3).points
    assert [p.month for p in points] == ["2025-04", "2025-05", "2025-06"]
    assert [p.exits_total for p in points] == [0, 1, 1]
    assert sum(p.joins for p in points) == 0


def test_moving_average_over_total_exits(sample_roster: RosterSnapshot) -> None:
    series = build_monthly_series(sample_roster, AS_OF)
    assert series.moving_average[-1] == 1.0
    assert series.moving_average[-2] == 0.7
    assert series.moving_average[20] == 0.3
    assert [p.moving_average for p in series.points] == series.moving_average


def test_yearly_exit_trends(sample_roster: RosterSnapshot) -> None:
    years = yearly_exit_trends(sample_roster)
    assert [y.year for y in years] == [2024, 2025]
    assert (years[0].involuntary, years[0].total) == (1, 1)
    assert (years[1].voluntary, years[1].unknown, years[1].total) == (1, 2, 3)


def test_yearly_exit_trends_empty(empty_roster: RosterSnapshot) -> None:
    assert yearly_exit_trends(empty_roster) == []
