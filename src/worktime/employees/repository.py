from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import EmployeeStatus
from .model import Employee


class EmployeeRepository(Protocol):
    def create_employee(self, *, name: str, email: str, position: str, status: EmployeeStatus) -> int:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Employee with ``last_check_in`` filled in."""

        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """All employees with ``last_check_in``, in one query."""

        raise NotImplementedError

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError

    def count_active(self) -> int:
        raise NotImplementedError

    def update_employee(self, employee_id: int, changes: Mapping[str, Any]) -> bool:
        """Partial update; keys are a subset of name/email/position/status."""

        raise NotImplementedError
