from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from ..employees.model import Employee


@dataclass
class ChartPoint:
    """One calendar bucket of the chart: label plus hours per employee id."""

    label: str
    values: dict[int, float] = field(default_factory=dict)


@dataclass(frozen=True)
class EmployeeSummary:
    employee_id: int
    employee_name: str
    total_days: int
    total_hours: float
    avg_daily_hours: float
    total_break_minutes: int


@dataclass(frozen=True)
class ReportTotals:
    total_days: int = 0
    total_hours: float = 0.0
    avg_daily_hours: float = 0.0
    total_break_minutes: int = 0


@dataclass(frozen=True)
class ReportResult:
    title: str
    chart_data: Sequence[ChartPoint]
    summary_data: Sequence[EmployeeSummary]
    employee_totals: ReportTotals
    employees: Sequence[Employee]
    date_from: date
    date_to: date
