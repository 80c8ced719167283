from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import EntryState


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: one work period of one employee on one calendar day.

    ``total_hours`` is derived from the times and break, never user supplied.
    ``employee_name`` is read-side enrichment from the employees table.
    """

    entry_id: int
    employee_id: int
    work_date: date
    check_in_time: str
    check_out_time: Optional[str] = None
    break_minutes: int = 0
    total_hours: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    employee_name: Optional[str] = None

    @property
    def state(self) -> EntryState:
        return EntryState.CLOSED if self.check_out_time else EntryState.OPEN


@dataclass(frozen=True)
class TimeEntryPage:
    entries: Sequence[TimeEntry] = field(default_factory=list)
    total_entries: int = 0
    total_pages: int = 0
    current_page: int = 1
    page_size: int = 10
    start_index: int = 0
    end_index: int = 0
