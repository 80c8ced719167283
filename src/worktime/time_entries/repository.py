from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import TimeEntry


class TimeEntryRepository(Protocol):
    def create_entry(
        self,
        *,
        employee_id: int,
        work_date: date,
        check_in_time: str,
        check_out_time: Optional[str],
        break_minutes: int,
        total_hours: Optional[float],
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[TimeEntry]:
        """Entries of one calendar day, newest first."""

        raise NotImplementedError

    def list_in_range(self, *, start: date, end: date, employee_id: Optional[int] = None) -> Sequence[TimeEntry]:
        """Entries with start <= work_date <= end, oldest first."""

        raise NotImplementedError

    def list_page(
        self,
        *,
        date_from: Optional[date],
        date_to: Optional[date],
        employee_id: Optional[int],
        limit: int,
        offset: int,
    ) -> tuple[Sequence[TimeEntry], int]:
        """One page of entries (newest first) plus the total match count."""

        raise NotImplementedError

    def update_entry(self, entry_id: int, changes: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def delete_entry(self, entry_id: int) -> bool:
        raise NotImplementedError
