from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    ``last_check_in`` is read-side enrichment (date of the latest time entry).
    """

    employee_id: int
    name: str
    email: str
    position: str
    status: EmployeeStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_check_in: Optional[date] = None

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE
