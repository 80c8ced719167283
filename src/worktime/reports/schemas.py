from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.constants import ALL_EMPLOYEES
from ..core.enums import ReportType


class ReportQuery(BaseModel):
    """Query string of GET /api/reports."""

    model_config = ConfigDict(populate_by_name=True)

    report_type: str = Field(default=ReportType.WEEKLY.value, alias="reportType", min_length=1)
    date_from: Optional[date] = Field(default=None, alias="dateFrom")
    date_to: Optional[date] = Field(default=None, alias="dateTo")
    employee_id: Optional[int] = Field(default=None, alias="employeeId")

    @field_validator("report_type", mode="before")
    @classmethod
    def _default_type(cls, value):
        return value or ReportType.WEEKLY.value

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def _blank(cls, value):
        return value or None

    @field_validator("employee_id", mode="before")
    @classmethod
    def _all_employees(cls, value):
        if not value or value == ALL_EMPLOYEES:
            return None
        return value
