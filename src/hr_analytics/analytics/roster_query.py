"""Filter, sort and paginate the roster for the employee table."""

from __future__ import annotations

import logging
import math
from typing import Any, Callable

import pandas as pd

from hr_analytics.models import RosterFilters, RosterPage, RosterSort
from hr_analytics.snapshot import RosterSnapshot

log = logging.getLogger(__name__)

PAGE_SIZE = 10

# Sort field -> frame column
SORT_COLUMNS = {
    "id": "id",
    "name": "full_name",
    "designation": "designation",
    "department": "department",
    "location": "location",
    "join_date": "join_date",
}

SEARCH_COLUMNS = ("full_name", "id", "designation")


def _filter_mask(pdf: pd.DataFrame, filters: RosterFilters) -> pd.Series:
    mask = pd.Series(True, index=pdf.index)

    needle = filters.search_term.lower()
    if needle:
        matches = pd.Series(False, index=pdf.index)
        for column in SEARCH_COLUMNS:
            matches |= pdf[column].str.lower().str.contains(needle, regex=False)
        mask &= matches

    if filters.department:
        mask &= pdf["department"] == filters.department
    if filters.location:
        mask &= pdf["location"] == filters.location

    if filters.status == "active":
        mask &= pdf["is_active"]
    elif filters.status == "exited":
        mask &= ~pdf["is_active"]
    return mask


def _sort_key(pdf: pd.DataFrame, field: str) -> Callable[[int], Any]:
    column = pdf[SORT_COLUMNS[field]]
    if field == "join_date":
        # unparseable dates order before any real date
        return lambda pos: (
            (False, pd.Timestamp.min) if pd.isna(column[pos]) else (True, column[pos])
        )
    return lambda pos: column[pos]


def apply_query(
    roster: RosterSnapshot,
    filters: RosterFilters | None = None,
    sort: RosterSort | None = None,
    page: int = 1,
    page_size: int = PAGE_SIZE,
) -> RosterPage:
    """Return one page of the filtered, sorted roster.

    Filters combine with AND. Sorting is stable in both directions, so rows
    with equal sort values keep their roster order. A page outside
    ``1..total_pages`` yields an empty page rather than an error.

    Args:
        roster: Snapshot to query.
        filters: Search term, department, location and status filters.
        sort: Sort field and direction; defaults to id ascending.
        page: 1-indexed page number.
        page_size: Rows per page (default 10).

    Raises:
        ValueError: if `page_size` is less than 1.
    """
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    filters = filters or RosterFilters()
    sort = sort or RosterSort()

    pdf = roster.frame()
    positions = [int(pos) for pos in pdf.index[_filter_mask(pdf, filters).to_numpy()]]
    positions.sort(key=_sort_key(pdf, sort.field), reverse=sort.direction == "desc")

    total_records = len(positions)
    total_pages = math.ceil(total_records / page_size)

    if page < 1:
        selected: list[int] = []
    else:
        start = (page - 1) * page_size
        selected = positions[start : start + page_size]

    log.debug(
        "Roster query matched %d of %d rows (page %d/%d)",
        total_records,
        len(roster),
        page,
        total_pages,
    )
    return RosterPage(
        employees=[roster.employees[pos] for pos in selected],
        page=page,
        page_size=page_size,
        total_records=total_records,
        total_pages=total_pages,
    )
