from datetime import date

import pytest

from worktime.common.http import parse_model
from worktime.core.exceptions import ValidationError
from worktime.time_entries.schemas import TimeEntryCreate, TimeEntryQuery, TimeEntryUpdate


def test_create_payload_uses_camel_case_keys():
    p = parse_model(
        TimeEntryCreate,
        {"employeeId": 1, "date": "2026-01-05", "checkInTime": "09:00", "checkOutTime": "", "breakMinutes": ""},
    )

    assert p.employee_id == 1
    assert p.work_date == date(2026, 1, 5)
    assert p.check_out_time is None
    assert p.break_minutes == 0


def test_create_payload_rejects_weekend():
    with pytest.raises(ValidationError) as exc:
        parse_model(TimeEntryCreate, {"employeeId": 1, "date": "2026-01-03", "checkInTime": "09:00"})

    assert any("weekends" in d for d in exc.value.details)


def test_create_payload_rejects_bad_time():
    with pytest.raises(ValidationError) as exc:
        parse_model(TimeEntryCreate, {"employeeId": 1, "date": "2026-01-05", "checkInTime": "25:00"})

    assert exc.value.details[0].startswith("checkInTime:")


def test_update_payload_blank_check_out_is_ignored():
    p = parse_model(TimeEntryUpdate, {"checkOutTime": " "})
    assert p.check_out_time is None


def test_query_all_employees_means_no_filter():
    q = parse_model(TimeEntryQuery, {"employeeId": "all_employees", "page": ""})
    assert q.employee_id is None
    assert q.page == 1
