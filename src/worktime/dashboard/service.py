from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.datetime_utils import end_of_week, start_of_week
from ..core.constants import WORK_DAYS_PER_WEEK
from ..employees.repository import EmployeeRepository
from ..time_entries.model import TimeEntry
from ..time_entries.repository import TimeEntryRepository
from .model import Dashboard, DashboardStats


def _sum_hours(entries: Sequence[TimeEntry]) -> float:
    # open entries count as 0
    return sum(e.total_hours or 0 for e in entries)


class DashboardService:
    def __init__(self, entries: TimeEntryRepository, employees: EmployeeRepository):
        self._entries = entries
        self._employees = employees

    def get_dashboard(self, day: date) -> Dashboard:
        entries = self._entries.list_for_date(day)
        return Dashboard(entries=entries, stats=self._stats(day, entries))

    def get_dashboard_stats(self, day: date) -> DashboardStats:
        return self._stats(day, self._entries.list_for_date(day))

    def _stats(self, day: date, today_entries: Sequence[TimeEntry]) -> DashboardStats:
        total_hours = _sum_hours(today_entries)
        active = self._employees.count_active()
        checked_in = sum(1 for e in today_entries if not e.check_out_time)

        week_entries = self._entries.list_in_range(start=start_of_week(day), end=end_of_week(day))
        weekly_total = _sum_hours(week_entries)

        return DashboardStats(
            total_hours=round(total_hours, 2),
            active_employees=active,
            checked_in_count=checked_in,
            avg_hours_per_employee=round(total_hours / active, 2) if active > 0 else 0,
            weekly_avg_hours=round(weekly_total / (active * WORK_DAYS_PER_WEEK), 2) if active > 0 else 0,
        )
