from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..common.validators import require_min_length
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employees (create, edit, deactivate)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def _ensure_email_free(self, email: str, *, employee_id: int | None = None) -> None:
        existing = self._employees.get_by_email(email)
        if existing and existing.employee_id != employee_id:
            raise ValidationError("Email already in use", ["email: already in use"])

    def create_employee(self, *, name: str, email: str, position: str) -> Employee:
        name = require_min_length(name, "name", 2)
        position = require_min_length(position, "position", 2)
        email = email.strip()
        self._ensure_email_free(email)

        employee_id = self._employees.create_employee(
            name=name,
            email=email,
            position=position,
            status=EmployeeStatus.ACTIVE,
        )
        logger.info("Created employee %s (%s)", employee_id, email)
        return self.get_employee(employee_id)

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def list_active(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def update_employee(self, employee_id: int, changes: Mapping[str, Any]) -> Employee:
        self.get_employee(employee_id)

        changes = {k: v for k, v in changes.items() if v is not None}
        if "email" in changes:
            self._ensure_email_free(changes["email"], employee_id=int(employee_id))

        if changes:
            self._employees.update_employee(int(employee_id), changes)
        return self.get_employee(employee_id)

    def deactivate_employee(self, employee_id: int) -> Employee:
        employee = self.update_employee(employee_id, {"status": EmployeeStatus.INACTIVE})
        logger.info("Deactivated employee %s", employee_id)
        return employee
