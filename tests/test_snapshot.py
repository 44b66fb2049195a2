from __future__ import annotations

import pandas as pd

from conftest import AS_OF, make_roster
from hr_analytics.analytics.stats import compute_kpis
from hr_analytics.snapshot import RosterSnapshot, parse_date


def test_parse_date_handles_absent_and_invalid_values() -> None:
    assert parse_date("") is None
    assert parse_date(None) is None
    assert parse_date("not-a-date") is None
    assert parse_date("2024-02-29") == pd.Timestamp("2024-02-29")


def test_frame_is_a_copy(sample_roster: RosterSnapshot) -> None:
    pdf = sample_roster.frame()
    pdf.loc[:, "department"] = "Changed"
    assert (sample_roster.frame()["department"] != "Changed").all()


def test_frame_rows_follow_roster_order(sample_roster: RosterSnapshot) -> None:
    pdf = sample_roster.frame()
    assert list(pdf["id"]) == [e.id for e in sample_roster.employees]
    assert pd.isna(pdf.loc[5, "join_date"])  # E006 has an unparseable join date
    assert bool(pdf.loc[0, "is_active"])
    assert not bool(pdf.loc[2, "is_active"])


def test_get_tolerates_missing_ids(sample_roster: RosterSnapshot) -> None:
    assert sample_roster.get("E002").full_name == "Ben Cole"
    assert sample_roster.get("E099") is None
    assert len(sample_roster) == 8


def test_empty_snapshot_has_typed_columns(empty_roster: RosterSnapshot) -> None:
    pdf = empty_roster.frame()
    assert pdf.empty
    assert pd.api.types.is_datetime64_any_dtype(pdf["join_date"])
    assert pd.api.types.is_datetime64_any_dtype(pdf["exit_date"])


def test_out_of_range_dates_become_missing() -> None:
    assert parse_date("9999-12-31") is None
    assert parse_date("1600-01-01") is None

    roster = make_roster([
        ("S1", "Sam Roe", "2020-01-01", "", "", "Ops", "", "", "", "9999-12-31", ""),
        ("S2", "Tia Wu", "1600-01-01", "", "", "Ops", "", "", "", "", ""),
    ])
    pdf = roster.frame()
    assert pd.isna(pdf.loc[0, "exit_date"])
    assert pd.isna(pdf.loc[1, "join_date"])
    assert pdf.loc[0, "join_date"] == pd.Timestamp("2020-01-01")
    # a sentinel exit date still marks the employee as exited
    assert not bool(pdf.loc[0, "is_active"])
    assert compute_kpis(roster, AS_OF).exited_employees == 1
