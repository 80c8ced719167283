from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employees are never deleted, only switched to INACTIVE."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class ReportType(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    EMPLOYEE = "employee"
    CUSTOM = "custom"


class EntryState(str, Enum):
    """Derived state of a time entry (no check-out yet means OPEN)."""

    OPEN = "open"
    CLOSED = "closed"
