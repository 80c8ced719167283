from __future__ import annotations

from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def is_weekend(d: date) -> bool:
    """Saturday or Sunday."""
    return d.weekday() >= 5


def date_range(start: date, end: date) -> list[date]:
    """Every calendar day from start to end, both inclusive."""
    days: list[date] = []
    current = start
    while current <= end:
        days.append(current)
        current += timedelta(days=1)
    return days


def start_of_week(d: date) -> date:
    """Monday of the week containing d."""
    return d - timedelta(days=d.weekday())


def end_of_week(d: date) -> date:
    """Sunday of the Monday-start week containing d."""
    return start_of_week(d) + timedelta(days=6)


def start_of_month(d: date) -> date:
    return d.replace(day=1)


def end_of_month(d: date) -> date:
    next_month = (d.replace(day=28) + timedelta(days=4)).replace(day=1)
    return next_month - timedelta(days=1)


def add_months(d: date, months: int) -> date:
    """Shift a first-of-month date by whole months."""
    index = d.year * 12 + (d.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def format_date_short(d: date) -> str:
    """Format date as 'Mon D' (platform-safe, e.g., 'Nov 7')."""
    return f"{d.strftime('%b')} {d.day}"


def format_day_label(d: date) -> str:
    """Format date as 'Wkd, Mon D' (e.g., 'Fri, Nov 7')."""
    return f"{d.strftime('%a')}, {format_date_short(d)}"
