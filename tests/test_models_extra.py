from __future__ import annotations

import pytest
from pydantic import ValidationError

from hr_analytics.models import Employee, RosterFilters, RosterSort


def test_employee_blank_optional_fields_become_none() -> None:
    e = Employee.model_validate({
        "id": " E1 ",
        "full_name": "Asha",
        "manager_name": "  ",
        "manager_id": "",
        "exit_date": "",
        "exit_type": "",
    })
    assert e.id == "E1"
    assert e.manager_name is None
    assert e.manager_id is None
    assert e.is_active


def test_employee_exit_category_folds_unrecognized_types() -> None:
    vol = Employee(id="1", exit_date="2024-01-01", exit_type="Voluntary")
    other = Employee(id="2", exit_date="2024-01-01", exit_type="voluntary")
    missing = Employee(id="3", exit_date="2024-01-01")
    assert vol.exit_category == "Voluntary"
    assert other.exit_category == "Unknown"
    assert missing.exit_category == "Unknown"
    assert not vol.is_active


def test_employee_rejects_blank_id() -> None:
    with pytest.raises(ValidationError):
        Employee.model_validate({"id": "   ", "full_name": "Nobody"})


def test_employee_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        Employee.model_validate({"id": "1", "salary": "100"})


def test_roster_sort_rejects_field_outside_allow_list() -> None:
    with pytest.raises(ValidationError):
        RosterSort(field="gender")


def test_roster_filters_reject_unknown_status() -> None:
    with pytest.raises(ValidationError):
        RosterFilters(status="retired")
