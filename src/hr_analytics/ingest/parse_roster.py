"""Parse the HR roster CSV into validated `Employee` records.

The CSV uses the dashboard export headers (``Employee ID``, ``Date of
Joining`` ...). Every cell is read as a string and missing cells become empty
strings, so the snapshot decides what counts as a usable date.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from hr_analytics.exceptions import RosterLoadError
from hr_analytics.models import Employee

log = logging.getLogger(__name__)

# CSV header -> Employee field
CSV_COLUMNS = {
    "Employee ID": "id",
    "Employee Full Name": "full_name",
    "Date of Joining": "join_date",
    "Gender": "gender",
    "Designation": "designation",
    "Department": "department",
    "Location": "location",
    "Reporting Manager Full Name": "manager_name",
    "Reporting Manager ID": "manager_id",
    "Date of Exit": "exit_date",
    "Exit Type": "exit_type",
}

REQUIRED_COLUMNS = ("Employee ID", "Employee Full Name", "Date of Joining", "Date of Exit")


def roster_frame_to_records(pdf: pd.DataFrame, source: str = "") -> list[Employee]:
    """Convert a string-typed roster DataFrame into `Employee` records.

    Optional columns absent from the frame are filled with empty strings;
    unrecognized columns are ignored.

    Raises:
        RosterLoadError: on missing required headers, rows that fail
            validation, or duplicate employee ids.
    """
    pdf = pdf.rename(columns=lambda c: str(c).strip())
    missing = [c for c in REQUIRED_COLUMNS if c not in pdf.columns]
    if missing:
        raise RosterLoadError(
            "Roster is missing required columns",
            source=source,
            details={"missing_columns": missing},
        )

    pdf = pdf.reindex(columns=list(CSV_COLUMNS), fill_value="").fillna("")
    pdf = pdf.rename(columns=CSV_COLUMNS)

    employees: list[Employee] = []
    bad_rows: list[int] = []
    for i, rec in enumerate(pdf.to_dict(orient="records")):
        try:
            employees.append(Employee.model_validate({k: str(v) for k, v in rec.items()}))
        except ValidationError:
            # +2: header line plus 1-based numbering
            bad_rows.append(i + 2)

    if bad_rows:
        log.error("Rejected %d roster rows from %s", len(bad_rows), source or "frame")
        raise RosterLoadError(
            "Roster contains invalid rows",
            source=source,
            details={"rows": bad_rows[:20], "bad_count": len(bad_rows)},
        )

    ids = pd.Series([e.id for e in employees], dtype=object)
    duplicates = sorted(ids[ids.duplicated()].unique().tolist())
    if duplicates:
        raise RosterLoadError(
            "Roster contains duplicate employee ids",
            source=source,
            details={"duplicate_ids": duplicates[:20]},
        )
    return employees


def parse_roster_csv(path: Path) -> list[Employee]:
    """Read a roster CSV file into `Employee` records.

    Args:
        path: Path to the CSV file (UTF-8).

    Raises:
        RosterLoadError: if the file cannot be read or parsed.
    """
    try:
        pdf = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8",
        )
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        log.error("Unable to read roster %s: %s", path, exc)
        raise RosterLoadError(
            "Unable to read roster CSV", source=str(path), original_error=exc
        ) from exc

    employees = roster_frame_to_records(pdf, source=str(path))
    log.info("Parsed %d employees from %s", len(employees), path)
    return employees
