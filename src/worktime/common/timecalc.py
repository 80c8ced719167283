"""Wall-clock time arithmetic for check-in / check-out strings.

Times travel through the system as strings in one of two shapes:

- 24-hour ``"HH:MM"`` (what HTML time inputs and the checkout clock produce)
- 12-hour ``"h:MM AM"`` / ``"h:MM PM"`` (what is stored and displayed)

Every computation goes through :func:`normalize_time` first, so both shapes
are accepted anywhere.
"""

from __future__ import annotations

import re
from typing import Optional

from ..core.constants import MINUTES_PER_DAY

_MERIDIEM_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])\s*$")
_24H_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::\d{2})?\s*$")


def _has_meridiem(value: str) -> bool:
    upper = value.upper()
    return "AM" in upper or "PM" in upper


def normalize_time(value: Optional[str]) -> str:
    """Convert a 12-hour or 24-hour time string to 24-hour ``"HH:MM"``.

    Empty input gives an empty string. 24-hour input is zero-padded (seconds
    dropped); anything else is returned stripped for :func:`to_minutes` to reject.
    """
    if not value:
        return ""

    if not _has_meridiem(value):
        m = _24H_RE.match(value)
        if not m:
            return value.strip()
        return f"{int(m.group(1)):02d}:{m.group(2)}"

    m = _MERIDIEM_RE.match(value)
    if not m:
        raise ValueError(f"Invalid time string: {value!r}")

    hour = int(m.group(1))
    minutes = m.group(2)
    period = m.group(3).upper()

    if period == "PM" and hour < 12:
        hour += 12
    elif period == "AM" and hour == 12:
        hour = 0

    return f"{hour:02d}:{minutes}"


def to_minutes(value: str) -> int:
    """Minutes since midnight. Raises ValueError on malformed input."""
    normalized = normalize_time(value)
    m = _24H_RE.match(normalized)
    if not m:
        raise ValueError(f"Invalid time string: {value!r}")

    hours = int(m.group(1))
    minutes = int(m.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"Invalid time string: {value!r}")
    return hours * 60 + minutes


def is_valid_time(value: str) -> bool:
    try:
        to_minutes(value)
    except ValueError:
        return False
    return True


def elapsed_hours(check_in: Optional[str], check_out: Optional[str], break_minutes: int = 0) -> Optional[float]:
    """Worked hours between check-in and check-out, minus break time.

    A check-out at or before the check-in is read as the next day (one
    24h correction only). A break longer than the shift gives a negative
    result; callers decide whether to reject it.
    """
    if not check_in or not check_out:
        return None

    minutes = to_minutes(check_out) - to_minutes(check_in)
    if minutes <= 0:
        minutes += MINUTES_PER_DAY

    minutes -= int(break_minutes or 0)
    return minutes / 60


def format_duration(total_minutes: int) -> str:
    """e.g. 330 -> '5h 30m'."""
    total_minutes = int(total_minutes)
    return f"{total_minutes // 60}h {total_minutes % 60}m"


def format_time_12h(value: Optional[str]) -> str:
    """24-hour 'HH:MM' -> 12-hour 'h:MM AM|PM'. 12-hour input is returned as is."""
    if not value:
        return ""
    if _has_meridiem(value):
        return value

    total = to_minutes(value)
    hours, minutes = divmod(total, 60)
    period = "PM" if hours >= 12 else "AM"
    display_hours = hours % 12 or 12
    return f"{display_hours}:{minutes:02d} {period}"
