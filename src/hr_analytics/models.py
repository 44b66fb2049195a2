"""Pydantic models for roster records and the derived dashboard structures.

`Employee` describes one parsed roster row as handed over by the loader. The
remaining models are the value objects returned by the analytics components;
they are frozen so a result can be shared between callers without copying.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

VOLUNTARY = "Voluntary"
INVOLUNTARY = "Involuntary"
UNKNOWN = "Unknown"
EXIT_CATEGORIES = (VOLUNTARY, INVOLUNTARY, UNKNOWN)

SortField = Literal["id", "name", "designation", "department", "location", "join_date"]
SortDirection = Literal["asc", "desc"]
StatusFilter = Literal["all", "active", "exited"]


class Employee(BaseModel):
    """Schema for a single roster row.

    Date fields are kept as the strings supplied by the loader; parsing happens
    once inside `RosterSnapshot`. Empty optional fields are normalized to
    ``None``.

    Attributes:
        id: Unique, non-empty employee identifier.
        full_name: Display name.
        join_date: Date of joining as a string.
        gender: Free-text gender value.
        designation: Job title.
        department: Department name.
        location: Office or site name.
        manager_name: Reporting manager's full name, if any.
        manager_id: Reporting manager's employee id, if any.
        exit_date: Date of exit as a string; ``None`` for active employees.
        exit_type: ``Voluntary``, ``Involuntary`` or anything else (unknown).
    """
    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)
    id: str = Field(..., min_length=1)
    full_name: str = ""
    join_date: str = ""
    gender: str = ""
    designation: str = ""
    department: str = ""
    location: str = ""
    manager_name: str | None = None
    manager_id: str | None = None
    exit_date: str | None = None
    exit_type: str | None = None

    @field_validator("manager_name", "manager_id", "exit_date", "exit_type")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        return value or None

    @property
    def is_active(self) -> bool:
        """True when the employee has no exit date."""
        return self.exit_date is None

    @property
    def exit_category(self) -> str:
        """Exit type folded onto Voluntary / Involuntary / Unknown."""
        if self.exit_type in (VOLUNTARY, INVOLUNTARY):
            return self.exit_type
        return UNKNOWN


class KPISnapshot(BaseModel):
    """Scalar headline metrics for the dashboard cards."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    total_employees: int = Field(0, ge=0)
    active_employees: int = Field(0, ge=0)
    exited_employees: int = Field(0, ge=0)
    total_departments: int = Field(0, ge=0)
    total_locations: int = Field(0, ge=0)
    avg_tenure: float = Field(0.0, ge=0)
    attrition_rate: float = Field(0.0, ge=0)
    new_hires: int = Field(0, ge=0)
    voluntary_exits: int = Field(0, ge=0)
    involuntary_exits: int = Field(0, ge=0)
    avg_tenure_at_exit: float = Field(0.0, ge=0)
    recent_exits: int = Field(0, ge=0)


class CategoryTally(BaseModel):
    """Count of roster rows sharing one categorical value."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    key: str
    count: int = Field(..., ge=0)


class FilterOptions(BaseModel):
    """Distinct values used to populate the roster table filter controls."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    departments: list[str]
    locations: list[str]


class TenureBucket(BaseModel):
    """Exits falling into one tenure-at-exit range, split by exit type."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    label: str
    voluntary: int = Field(0, ge=0)
    involuntary: int = Field(0, ge=0)
    unknown: int = Field(0, ge=0)
    total: int = Field(0, ge=0)


class ExitTenureRecord(BaseModel):
    """Tenure detail for one exited employee."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    id: str
    full_name: str
    tenure_years: float
    exit_type: str
    department: str
    designation: str
    bucket: str


class MonthlyPoint(BaseModel):
    """Joins and exits recorded in one calendar month.

    Attributes:
        month: ``YYYY-MM`` key of the bucket.
        label: Short display label such as ``Jan 2025``.
        joins: Employees whose join date falls in the month.
        exits_voluntary: Voluntary exits in the month.
        exits_involuntary: Involuntary exits in the month.
        exits_unknown: Exits with no recognized exit type.
        exits_total: All exits in the month.
        moving_average: Centered 3-month average of ``exits_total``.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    month: str
    label: str
    joins: int = Field(0, ge=0)
    exits_voluntary: int = Field(0, ge=0)
    exits_involuntary: int = Field(0, ge=0)
    exits_unknown: int = Field(0, ge=0)
    exits_total: int = Field(0, ge=0)
    moving_average: float = Field(0.0, ge=0)


class MonthlySeries(BaseModel):
    """Monthly points (oldest first) plus the parallel moving-average series."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    points: list[MonthlyPoint]
    moving_average: list[float]


class YearlyExitPoint(BaseModel):
    """Exits per calendar year, split by exit type."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    year: int
    voluntary: int = Field(0, ge=0)
    involuntary: int = Field(0, ge=0)
    unknown: int = Field(0, ge=0)
    total: int = Field(0, ge=0)


class ManagerSummary(BaseModel):
    """Direct-report rollup for one manager."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    id: str
    name: str
    department: str
    location: str
    team_size: int = Field(0, ge=0)
    active_team_size: int = Field(0, ge=0)


class RosterFilters(BaseModel):
    """Filters for the roster table; empty strings disable a filter."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    search_term: str = ""
    department: str = ""
    location: str = ""
    status: StatusFilter = "all"


class RosterSort(BaseModel):
    """Single-column sort for the roster table."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    field: SortField = "id"
    direction: SortDirection = "asc"


class RosterPage(BaseModel):
    """One page of the filtered and sorted roster."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    employees: list[Employee]
    page: int
    page_size: int = Field(..., ge=1)
    total_records: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
