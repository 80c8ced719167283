from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ..core.enums import EmployeeStatus


class EmployeeCreate(BaseModel):
    """Body of POST /api/employees."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=2)
    email: EmailStr
    position: str = Field(min_length=2)


class EmployeeUpdate(BaseModel):
    """Body of PATCH /api/employees/<id>; only the keys sent are changed."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=2)
    email: Optional[EmailStr] = None
    position: Optional[str] = Field(default=None, min_length=2)
    status: Optional[EmployeeStatus] = None
