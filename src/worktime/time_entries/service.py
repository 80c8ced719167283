from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.timecalc import elapsed_hours, format_time_12h
from ..common.validators import require_weekday
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import TimeEntry, TimeEntryPage
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)


def _stored_time(value: Optional[str], field_name: str) -> Optional[str]:
    """Times are stored in their 12-hour display form ('9:00 AM')."""
    if not value:
        return None
    try:
        return format_time_12h(value)
    except ValueError:
        raise ValidationError(f"Invalid {field_name}", [f"{field_name}: invalid time"])


def _total_hours(check_in: Optional[str], check_out: Optional[str], break_minutes: int) -> Optional[float]:
    hours = elapsed_hours(check_in, check_out, break_minutes)
    if hours is None:
        return None
    if hours < 0:
        raise ValidationError(
            "Break is longer than the time worked",
            ["breakMinutes: exceeds the time between check-in and check-out"],
        )
    return round(hours, 2)


class TimeEntryService:
    """Use case: record, edit and close time entries."""

    def __init__(self, entries: TimeEntryRepository, employees: EmployeeRepository):
        self._entries = entries
        self._employees = employees

    def _ensure_employee(self, employee_id: int) -> None:
        if not self._employees.get_by_id(int(employee_id)):
            raise ValidationError("Employee not found", ["employeeId: unknown employee"])

    def create_time_entry(
        self,
        *,
        employee_id: int,
        work_date: date,
        check_in_time: str,
        check_out_time: Optional[str] = None,
        break_minutes: int = 0,
    ) -> TimeEntry:
        require_weekday(work_date)
        self._ensure_employee(employee_id)

        check_in = _stored_time(check_in_time, "checkInTime")
        if not check_in:
            raise ValidationError("Check-in time is required", ["checkInTime: required"])
        check_out = _stored_time(check_out_time, "checkOutTime")
        break_minutes = int(break_minutes or 0)

        entry_id = self._entries.create_entry(
            employee_id=int(employee_id),
            work_date=work_date,
            check_in_time=check_in,
            check_out_time=check_out,
            break_minutes=break_minutes,
            total_hours=_total_hours(check_in, check_out, break_minutes),
        )
        logger.info("Created time entry %s for employee %s on %s", entry_id, employee_id, work_date)
        return self.get_time_entry(entry_id)

    def get_time_entries(
        self,
        *,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        employee_id: Optional[int] = None,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> TimeEntryPage:
        page = max(int(page or 1), 1)
        offset = (page - 1) * page_size

        rows, total = self._entries.list_page(
            date_from=date_from,
            date_to=date_to,
            employee_id=employee_id,
            limit=page_size,
            offset=offset,
        )

        return TimeEntryPage(
            entries=list(rows),
            total_entries=total,
            total_pages=math.ceil(total / page_size),
            current_page=page,
            page_size=page_size,
            start_index=offset + 1 if total > 0 else 0,
            end_index=min(offset + page_size, total),
        )

    def get_time_entries_by_date(self, work_date: date) -> Sequence[TimeEntry]:
        return self._entries.list_for_date(work_date)

    def get_time_entry(self, entry_id: int) -> TimeEntry:
        entry = self._entries.get_by_id(int(entry_id))
        if not entry:
            raise NotFoundError("Time entry not found")
        return entry

    def update_time_entry(self, entry_id: int, changes: Mapping[str, Any]) -> TimeEntry:
        current = self.get_time_entry(entry_id)
        update: dict[str, Any] = {}

        if changes.get("work_date") is not None:
            update["work_date"] = require_weekday(changes["work_date"], action="update")

        if changes.get("employee_id") is not None:
            self._ensure_employee(changes["employee_id"])
            update["employee_id"] = int(changes["employee_id"])

        if changes.get("check_in_time"):
            update["check_in_time"] = _stored_time(changes["check_in_time"], "checkInTime")
        if changes.get("check_out_time"):
            update["check_out_time"] = _stored_time(changes["check_out_time"], "checkOutTime")
        if changes.get("break_minutes") is not None:
            update["break_minutes"] = int(changes["break_minutes"])

        check_in = update.get("check_in_time", current.check_in_time)
        check_out = update.get("check_out_time", current.check_out_time)
        break_minutes = update.get("break_minutes", current.break_minutes)
        if check_in and check_out:
            update["total_hours"] = _total_hours(check_in, check_out, break_minutes)

        if update:
            self._entries.update_entry(current.entry_id, update)
        return self.get_time_entry(current.entry_id)

    def delete_time_entry(self, entry_id: int) -> None:
        if not self._entries.delete_entry(int(entry_id)):
            raise NotFoundError("Time entry not found")
        logger.info("Deleted time entry %s", entry_id)

    def checkout_time_entry(self, entry_id: int, *, now: datetime | None = None) -> Optional[TimeEntry]:
        """Close an open entry at the current wall-clock time.

        Returns None (and changes nothing) when the entry is missing or already closed.
        """
        entry = self._entries.get_by_id(int(entry_id))
        if not entry or entry.check_out_time:
            return None

        now = now or now_local()
        updated = self.update_time_entry(entry.entry_id, {"check_out_time": now.strftime("%H:%M")})
        logger.info("Checked out time entry %s at %s", entry.entry_id, updated.check_out_time)
        return updated
