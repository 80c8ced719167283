from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..common.datetime_utils import is_weekend
from ..common.timecalc import is_valid_time
from ..core.constants import ALL_EMPLOYEES


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _check_time(value: Optional[str]) -> Optional[str]:
    if value is not None and not is_valid_time(value):
        raise ValueError("must be a time like 09:00 or 9:00 AM")
    return value


class TimeEntryCreate(BaseModel):
    """Body of POST /api/time-entries."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    employee_id: int = Field(alias="employeeId", ge=1)
    work_date: date = Field(alias="date")
    check_in_time: str = Field(alias="checkInTime", min_length=1)
    check_out_time: Optional[str] = Field(default=None, alias="checkOutTime")
    break_minutes: int = Field(default=0, alias="breakMinutes", ge=0)

    @field_validator("work_date")
    @classmethod
    def _not_weekend(cls, value: date) -> date:
        if is_weekend(value):
            raise ValueError("Cannot add time entries for weekends")
        return value

    @field_validator("check_out_time", mode="before")
    @classmethod
    def _blank_check_out(cls, value):
        return _blank_to_none(value)

    @field_validator("break_minutes", mode="before")
    @classmethod
    def _blank_break(cls, value):
        return 0 if _blank_to_none(value) is None else value

    @field_validator("check_in_time", "check_out_time")
    @classmethod
    def _valid_time(cls, value: Optional[str]) -> Optional[str]:
        return _check_time(value)


class TimeEntryUpdate(BaseModel):
    """Body of PATCH /api/time-entries/<id>; only the keys sent are changed.

    A blank check-out keeps the stored one (a closed entry never reopens).
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    employee_id: Optional[int] = Field(default=None, alias="employeeId", ge=1)
    work_date: Optional[date] = Field(default=None, alias="date")
    check_in_time: Optional[str] = Field(default=None, alias="checkInTime", min_length=1)
    check_out_time: Optional[str] = Field(default=None, alias="checkOutTime")
    break_minutes: Optional[int] = Field(default=None, alias="breakMinutes", ge=0)

    @field_validator("work_date")
    @classmethod
    def _not_weekend(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and is_weekend(value):
            raise ValueError("Cannot update time entries to weekends")
        return value

    @field_validator("check_out_time", "break_minutes", mode="before")
    @classmethod
    def _blank_optional(cls, value):
        return _blank_to_none(value)

    @field_validator("check_in_time", "check_out_time")
    @classmethod
    def _valid_time(cls, value: Optional[str]) -> Optional[str]:
        return _check_time(value)


class TimeEntryQuery(BaseModel):
    """Query string of GET /api/time-entries."""

    model_config = ConfigDict(populate_by_name=True)

    date_from: Optional[date] = Field(default=None, alias="dateFrom")
    date_to: Optional[date] = Field(default=None, alias="dateTo")
    employee_id: Optional[int] = Field(default=None, alias="employeeId")
    page: int = Field(default=1, ge=1)

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def _blank(cls, value):
        return _blank_to_none(value)

    @field_validator("page", mode="before")
    @classmethod
    def _default_page(cls, value):
        return 1 if _blank_to_none(value) is None else value

    @field_validator("employee_id", mode="before")
    @classmethod
    def _all_employees(cls, value):
        if value == ALL_EMPLOYEES:
            return None
        return _blank_to_none(value)
