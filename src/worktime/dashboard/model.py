from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..time_entries.model import TimeEntry


@dataclass(frozen=True)
class DashboardStats:
    """Figures for one day; every number is rounded to 2 decimals."""

    total_hours: float
    active_employees: int
    checked_in_count: int
    avg_hours_per_employee: float
    weekly_avg_hours: float


@dataclass(frozen=True)
class Dashboard:
    entries: Sequence[TimeEntry]
    stats: DashboardStats
