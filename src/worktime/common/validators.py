from __future__ import annotations

from datetime import date

from ..core.exceptions import ValidationError
from .datetime_utils import is_weekend


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required", [f"{field_name}: required"])
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value.strip()) < min_len:
        raise ValidationError(
            f"{field_name} must be at least {min_len} characters",
            [f"{field_name}: must be at least {min_len} characters"],
        )
    return value.strip()


def require_weekday(value: date, *, action: str = "add") -> date:
    if is_weekend(value):
        raise ValidationError(f"Cannot {action} time entries for weekends", ["date: falls on a weekend"])
    return value
