from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from hr_analytics.snapshot import RosterSnapshot

AS_OF = pd.Timestamp("2025-06-15")

CSV_HEADER = (
    "Employee ID,Employee Full Name,Date of Joining,Gender,Designation,Department,"
    "Location,Reporting Manager Full Name,Reporting Manager ID,Date of Exit,Exit Type"
)

# id, name, joined, gender, designation, department, location, manager, manager id, exited, exit type
SAMPLE_ROWS = [
    ("E001", "Asha Rao", "2019-03-10", "Female", "Engineering Manager", "Engineering", "Bangalore", "", "", "", ""),
    ("E002", "Ben Cole", "2021-05-01", "Male", "Software Engineer", "Engineering", "Bangalore", "Asha Rao", "E001", "", ""),
    ("E003", "Chen Li", "2022-02-14", "Female", "Data Analyst", "Analytics", "Pune", "Asha Rao", "E001", "2025-03-31", "Voluntary"),
    ("E004", "Dev Patel", "2024-11-20", "Male", "Software Engineer", "Engineering", "Pune", "Asha Rao", "E001", "", ""),
    ("E005", "Eva Gomez", "2020-07-01", "Female", "Sales Lead", "Sales", "Mumbai", "Frank Ode", "E099", "2024-01-15", "Involuntary"),
    ("E006", "Farid Khan", "not-a-date", "Male", "Sales Associate", "Sales", "", "Frank Ode", "E099", "", ""),
    ("E007", "Gina Park", "2023-08-08", "Female", "Recruiter", "", "Mumbai", "", "E001", "2025-05-20", "Resigned"),
    ("E008", "Hal Moore", "2018-01-01", "Male", "Analyst", "Analytics", "Bangalore", "Ben Cole", "E002", "2025-06-01", ""),
]

FIELDS = (
    "id", "full_name", "join_date", "gender", "designation", "department",
    "location", "manager_name", "manager_id", "exit_date", "exit_type",
)


def make_roster(rows: list[tuple[str, ...]]) -> RosterSnapshot:
    return RosterSnapshot.from_records(dict(zip(FIELDS, row)) for row in rows)


def write_csv(path: Path, rows: list[tuple[str, ...]], header: str = CSV_HEADER) -> Path:
    lines = [header] + [",".join(row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_roster() -> RosterSnapshot:
    return make_roster(SAMPLE_ROWS)


@pytest.fixture
def scenario_roster() -> RosterSnapshot:
    """A active for two years, B left voluntarily after ~1.5y, C involuntarily after ~0.3y."""
    return RosterSnapshot.from_records([
        {"id": "A", "full_name": "Alice", "join_date": "2023-06-15", "department": "Ops"},
        {"id": "B", "full_name": "Bob", "join_date": "2022-01-01", "department": "Ops",
         "exit_date": "2023-07-02", "exit_type": "Voluntary"},
        {"id": "C", "full_name": "Cara", "join_date": "2024-01-01", "department": "Ops",
         "exit_date": "2024-04-20", "exit_type": "Involuntary"},
    ])


@pytest.fixture
def empty_roster() -> RosterSnapshot:
    return RosterSnapshot([])


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    return write_csv(tmp_path / "hr-data.csv", SAMPLE_ROWS)
