from __future__ import annotations

import pytest

from conftest import make_roster
from hr_analytics.analytics.managers import build_manager_rollup, list_managers, team_members
from hr_analytics.snapshot import RosterSnapshot


def test_rollup_counts_and_first_seen_order(sample_roster: RosterSnapshot) -> None:
    rollup = build_manager_rollup(sample_roster)
    assert list(rollup) == ["E001", "E099", "E002"]

    asha = rollup["E001"]
    assert (asha.name, asha.department, asha.location) == ("Asha Rao", "Engineering", "Bangalore")
    # E007 names no manager, so only E002-E004 count
    assert (asha.team_size, asha.active_team_size) == (3, 2)

    ben = rollup["E002"]
    assert (ben.team_size, ben.active_team_size) == (1, 0)


def test_dangling_manager_resolves_to_unknown(sample_roster: RosterSnapshot) -> None:
    frank = build_manager_rollup(sample_roster)["E099"]
    assert frank.name == "Frank Ode"
    assert (frank.department, frank.location) == ("Unknown", "Unknown")
    assert (frank.team_size, frank.active_team_size) == (2, 1)


def test_cycles_and_self_references_terminate() -> None:
    roster = make_roster([
        ("C1", "Cy One", "2020-01-01", "", "", "Ops", "Oslo", "Cy Two", "C2", "", ""),
        ("C2", "Cy Two", "2020-01-01", "", "", "Ops", "Oslo", "Cy One", "C1", "", ""),
        ("C3", "Selfie", "2020-01-01", "", "", "Ops", "Oslo", "Selfie", "C3", "", ""),
    ])
    rollup = build_manager_rollup(roster)
    assert {m: s.team_size for m, s in rollup.items()} == {"C2": 1, "C1": 1, "C3": 1}


def test_team_members_matches_manager_id_only(sample_roster: RosterSnapshot) -> None:
    assert [e.id for e in team_members(sample_roster, "E001")] == ["E002", "E003", "E004", "E007"]
    assert [e.id for e in team_members(sample_roster, "E001", active_only=True)] == ["E002", "E004"]
    assert team_members(sample_roster, "nobody") == []


def test_list_managers_default_sorts_by_active_team(sample_roster: RosterSnapshot) -> None:
    assert [m.id for m in list_managers(sample_roster)] == ["E001", "E099", "E002"]


def test_list_managers_search_and_name_sort(sample_roster: RosterSnapshot) -> None:
    found = list_managers(sample_roster, search="ENGINEERING", sort_by="name", direction="asc")
    assert [m.name for m in found] == ["Asha Rao", "Ben Cole"]
    assert [m.id for m in list_managers(sample_roster, search="ode")] == ["E099"]


def test_list_managers_total_team_size_keeps_ties_stable() -> None:
    roster = make_roster([
        ("T1", "a", "2020-01-01", "", "", "", "", "Zed", "Z1", "", ""),
        ("T2", "b", "2020-01-01", "", "", "", "", "Amy", "A1", "2021-01-01", "Voluntary"),
    ])
    by_total = list_managers(roster, active_only=False)
    assert [m.id for m in by_total] == ["Z1", "A1"]
    by_active = list_managers(roster, direction="asc")
    assert [m.id for m in by_active] == ["A1", "Z1"]


def test_list_managers_rejects_unknown_sort(sample_roster: RosterSnapshot) -> None:
    with pytest.raises(ValueError):
        list_managers(sample_roster, sort_by="salary")


def test_list_managers_search_keeps_whitespace(sample_roster: RosterSnapshot) -> None:
    assert [m.id for m in list_managers(sample_roster, search="frank ")] == ["E099"]
    assert list_managers(sample_roster, search=" frank") == []
