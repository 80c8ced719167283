from datetime import date, datetime

import pytest

from worktime.core.enums import EntryState
from worktime.core.exceptions import NotFoundError, ValidationError
from worktime.time_entries.service import TimeEntryService

MONDAY = date(2026, 1, 5)
SATURDAY = date(2026, 1, 3)


@pytest.fixture
def svc(entries_repo, employees_repo):
    return TimeEntryService(entries_repo, employees_repo)


def test_create_entry_stores_12h_times_and_total(svc, add_employee):
    emp = add_employee("Ana")

    e = svc.create_time_entry(
        employee_id=emp,
        work_date=MONDAY,
        check_in_time="09:00",
        check_out_time="17:30",
        break_minutes=30,
    )

    assert e.check_in_time == "9:00 AM"
    assert e.check_out_time == "5:30 PM"
    assert e.total_hours == 8.0
    assert e.employee_name == "Ana"
    assert e.state == EntryState.CLOSED


def test_create_open_entry_has_no_total(svc, add_employee):
    emp = add_employee("Ana")

    e = svc.create_time_entry(employee_id=emp, work_date=MONDAY, check_in_time="9:00 AM")

    assert e.check_out_time is None
    assert e.total_hours is None
    assert e.state == EntryState.OPEN


def test_weekend_is_rejected_before_anything_else(svc, entries_repo):
    with pytest.raises(ValidationError) as exc:
        svc.create_time_entry(employee_id=999, work_date=SATURDAY, check_in_time="not a time")

    assert "weekends" in str(exc.value)
    assert entries_repo.all() == []


def test_unknown_employee_is_rejected(svc):
    with pytest.raises(ValidationError):
        svc.create_time_entry(employee_id=42, work_date=MONDAY, check_in_time="09:00")


def test_update_recomputes_total(svc, add_employee):
    emp = add_employee("Ana")
    e = svc.create_time_entry(employee_id=emp, work_date=MONDAY, check_in_time="09:00", check_out_time="17:00")

    updated = svc.update_time_entry(e.entry_id, {"break_minutes": 60})

    assert updated.break_minutes == 60
    assert updated.total_hours == 7.0


def test_break_longer_than_shift_is_rejected(svc, add_employee, entries_repo):
    emp = add_employee("Ana")

    with pytest.raises(ValidationError) as exc:
        svc.create_time_entry(
            employee_id=emp, work_date=MONDAY, check_in_time="09:00", check_out_time="10:00", break_minutes=120
        )
    assert exc.value.details[0].startswith("breakMinutes:")
    assert entries_repo.all() == []


def test_update_with_too_long_break_keeps_entry(svc, add_employee):
    emp = add_employee("Ana")
    e = svc.create_time_entry(employee_id=emp, work_date=MONDAY, check_in_time="09:00", check_out_time="10:00")

    with pytest.raises(ValidationError):
        svc.update_time_entry(e.entry_id, {"break_minutes": 90})
    assert svc.get_time_entry(e.entry_id).total_hours == 1.0


def test_update_never_clears_check_out(svc, add_employee):
    emp = add_employee("Ana")
    e = svc.create_time_entry(employee_id=emp, work_date=MONDAY, check_in_time="09:00", check_out_time="17:00")

    updated = svc.update_time_entry(e.entry_id, {"check_out_time": None, "check_in_time": "10:00"})

    assert updated.check_out_time == "5:00 PM"
    assert updated.total_hours == 7.0


def test_update_to_weekend_is_rejected(svc, add_employee):
    emp = add_employee("Ana")
    e = svc.create_time_entry(employee_id=emp, work_date=MONDAY, check_in_time="09:00")

    with pytest.raises(ValidationError) as exc:
        svc.update_time_entry(e.entry_id, {"work_date": SATURDAY})
    assert "Cannot update time entries for weekends" == str(exc.value)


def test_checkout_closes_open_entry(svc, add_employee):
    emp = add_employee("Ana")
    e = svc.create_time_entry(employee_id=emp, work_date=MONDAY, check_in_time="09:00", break_minutes=30)

    closed = svc.checkout_time_entry(e.entry_id, now=datetime(2026, 1, 5, 17, 30))

    assert closed.check_out_time == "5:30 PM"
    assert closed.total_hours == 8.0


def test_checkout_of_closed_entry_is_a_no_op(svc, add_employee):
    emp = add_employee("Ana")
    e = svc.create_time_entry(employee_id=emp, work_date=MONDAY, check_in_time="09:00", check_out_time="12:00")

    assert svc.checkout_time_entry(e.entry_id, now=datetime(2026, 1, 5, 18, 0)) is None
    assert svc.get_time_entry(e.entry_id).check_out_time == "12:00 PM"


def test_checkout_of_missing_entry(svc):
    assert svc.checkout_time_entry(123) is None


def test_delete_entry(svc, add_employee):
    emp = add_employee("Ana")
    e = svc.create_time_entry(employee_id=emp, work_date=MONDAY, check_in_time="09:00")

    svc.delete_time_entry(e.entry_id)

    with pytest.raises(NotFoundError):
        svc.get_time_entry(e.entry_id)
    with pytest.raises(NotFoundError):
        svc.delete_time_entry(e.entry_id)


def test_pagination_indices(svc, add_employee, add_entry):
    emp = add_employee("Ana")
    for day in range(5, 10):
        for _ in range(5):
            add_entry(emp, date(2026, 1, day), 8.0)

    page = svc.get_time_entries(page=3)

    assert page.total_entries == 25
    assert page.total_pages == 3
    assert len(page.entries) == 5
    assert (page.start_index, page.end_index) == (21, 25)


def test_pagination_filters_and_empty_result(svc, add_employee, add_entry):
    a = add_employee("Ana")
    b = add_employee("Ben")
    add_entry(a, date(2026, 1, 5), 8.0)
    add_entry(b, date(2026, 1, 6), 8.0)
    add_entry(b, date(2026, 1, 12), 8.0)

    page = svc.get_time_entries(date_from=date(2026, 1, 5), date_to=date(2026, 1, 9), employee_id=b)
    assert [e.work_date for e in page.entries] == [date(2026, 1, 6)]

    empty = svc.get_time_entries(employee_id=999)
    assert (empty.total_entries, empty.total_pages, empty.start_index, empty.end_index) == (0, 0, 0, 0)


def test_entries_by_date(svc, add_employee, add_entry):
    emp = add_employee("Ana")
    add_entry(emp, MONDAY, 8.0)
    add_entry(emp, date(2026, 1, 6), 8.0)

    assert [e.work_date for e in svc.get_time_entries_by_date(MONDAY)] == [MONDAY]
