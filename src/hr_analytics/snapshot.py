"""Immutable in-memory roster used for one computation pass.

A `RosterSnapshot` is built once per load. It keeps the validated `Employee`
records in input order and a pandas view with the date columns parsed, which
the analytics components read but never modify (`frame()` always returns a
copy).
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

import pandas as pd

from hr_analytics.models import Employee

log = logging.getLogger(__name__)

FRAME_COLUMNS = [
    "id",
    "full_name",
    "gender",
    "designation",
    "department",
    "location",
    "manager_name",
    "manager_id",
    "exit_category",
    "is_active",
    "join_date",
    "exit_date",
]


def parse_date(value: str | None) -> pd.Timestamp | None:
    """Parse a roster date string, returning ``None`` when it is absent or invalid.

    Timezone-aware values are converted to naive timestamps so every parsed
    date compares against every other. Dates outside the nanosecond range
    (a `9999-12-31` sentinel, a year-1600 typo) are treated as invalid.
    """
    if not value:
        return None
    ts = pd.to_datetime(value, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_convert(None)
    try:
        return ts.as_unit("ns")
    except (OverflowError, pd.errors.OutOfBoundsDatetime):
        log.debug("Date %r is outside the supported range", value)
        return None


def _build_frame(employees: tuple[Employee, ...]) -> pd.DataFrame:
    rows = [
        {
            "id": e.id,
            "full_name": e.full_name,
            "gender": e.gender,
            "designation": e.designation,
            "department": e.department,
            "location": e.location,
            "manager_name": e.manager_name or "",
            "manager_id": e.manager_id or "",
            "exit_category": e.exit_category,
            "is_active": e.is_active,
        }
        for e in employees
    ]
    pdf = pd.DataFrame(rows, columns=FRAME_COLUMNS[:-2])
    pdf["is_active"] = pdf["is_active"].astype(bool)
    pdf["join_date"] = pd.Series(
        [parse_date(e.join_date) for e in employees], index=pdf.index, dtype="datetime64[ns]"
    )
    pdf["exit_date"] = pd.Series(
        [parse_date(e.exit_date) for e in employees], index=pdf.index, dtype="datetime64[ns]"
    )
    return pdf


class RosterSnapshot:
    """Read-only collection of employees for one computation pass.

    Args:
        employees: Validated employee records in roster order.
    """

    def __init__(self, employees: Iterable[Employee]) -> None:
        self._employees: tuple[Employee, ...] = tuple(employees)
        self._by_id: dict[str, Employee] = {}
        for e in self._employees:
            # first record wins if the loader let a duplicate id through
            self._by_id.setdefault(e.id, e)
        self._frame = _build_frame(self._employees)

        unparsed_joins = int(self._frame["join_date"].isna().sum())
        if unparsed_joins:
            log.debug("%d roster rows have no parseable join date", unparsed_joins)

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> RosterSnapshot:
        """Build a snapshot from plain dicts keyed by `Employee` field names."""
        return cls(Employee.model_validate(r) for r in records)

    @property
    def employees(self) -> tuple[Employee, ...]:
        return self._employees

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    def get(self, employee_id: str) -> Employee | None:
        """Return the employee with `employee_id`, or ``None`` when absent."""
        return self._by_id.get(employee_id)

    def frame(self) -> pd.DataFrame:
        """Return a copy of the tabular view.

        Rows are indexed by roster position, so ``frame().index[i]`` matches
        ``employees[i]``. `join_date` and `exit_date` are ``datetime64`` columns
        with ``NaT`` for absent or unparseable values.
        """
        return self._frame.copy()
