"""Manager-to-team rollups and the manager directory view.

Only the direct manager of each employee is ever resolved, so cycles or
self-references in the reporting data cannot cause repeated traversal.
"""

from __future__ import annotations

import logging
from typing import Literal

from hr_analytics.models import UNKNOWN, Employee, ManagerSummary, SortDirection
from hr_analytics.snapshot import RosterSnapshot

log = logging.getLogger(__name__)

ManagerSortField = Literal["name", "department", "team_size"]


def build_manager_rollup(roster: RosterSnapshot) -> dict[str, ManagerSummary]:
    """Aggregate direct reports per manager id.

    Employees missing either `manager_name` or `manager_id` are skipped. The
    first report seen for a manager supplies the manager's display name; the
    department and location come from the manager's own roster record, or
    "Unknown" when that record is absent.

    Returns:
        Mapping of manager id to `ManagerSummary`, in first-seen order.
    """
    seeds: dict[str, dict[str, str]] = {}
    team_size: dict[str, int] = {}
    active_size: dict[str, int] = {}

    for e in roster:
        if not (e.manager_name and e.manager_id):
            continue
        manager_id = e.manager_id
        if manager_id not in seeds:
            record = roster.get(manager_id)
            seeds[manager_id] = {
                "name": e.manager_name,
                "department": (record.department if record else "") or UNKNOWN,
                "location": (record.location if record else "") or UNKNOWN,
            }
            team_size[manager_id] = 0
            active_size[manager_id] = 0
        team_size[manager_id] += 1
        if e.is_active:
            active_size[manager_id] += 1

    dangling = sum(1 for m in seeds if roster.get(m) is None)
    if dangling:
        log.debug("%d managers have no roster record of their own", dangling)

    return {
        manager_id: ManagerSummary(
            id=manager_id,
            team_size=team_size[manager_id],
            active_team_size=active_size[manager_id],
            **seed,
        )
        for manager_id, seed in seeds.items()
    }


def team_members(
    roster: RosterSnapshot,
    manager_id: str,
    active_only: bool = False,
) -> list[Employee]:
    """Return the direct reports of `manager_id` in roster order."""
    return [
        e for e in roster
        if e.manager_id == manager_id and (not active_only or e.is_active)
    ]


def list_managers(
    roster: RosterSnapshot,
    search: str = "",
    sort_by: ManagerSortField = "team_size",
    direction: SortDirection = "desc",
    active_only: bool = True,
) -> list[ManagerSummary]:
    """Search and sort the manager rollup for the manager directory.

    Args:
        roster: Snapshot to aggregate.
        search: Case-insensitive substring matched against manager name or
            department.
        sort_by: ``name``, ``department`` or ``team_size``.
        direction: ``asc`` or ``desc``.
        active_only: When sorting by team size, use the active team size.

    Returns:
        Matching summaries; ties keep first-seen order.
    """
    if sort_by not in ("name", "department", "team_size"):
        raise ValueError(f"Unsupported manager sort field: {sort_by!r}")
    if direction not in ("asc", "desc"):
        raise ValueError(f"Unsupported sort direction: {direction!r}")

    needle = search.lower()
    managers = [
        m for m in build_manager_rollup(roster).values()
        if not needle or needle in m.name.lower() or needle in m.department.lower()
    ]

    attr: str = sort_by
    if sort_by == "team_size" and active_only:
        attr = "active_team_size"
    return sorted(managers, key=lambda m: getattr(m, attr), reverse=direction == "desc")
