from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DashboardQuery(BaseModel):
    """Query string of GET /api/dashboard (date defaults to today)."""

    model_config = ConfigDict(populate_by_name=True)

    day: Optional[date] = Field(default=None, alias="date")

    @field_validator("day", mode="before")
    @classmethod
    def _blank(cls, value):
        return value or None
