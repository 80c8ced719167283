from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.enums import ReportType
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..time_entries.model import TimeEntry
from ..time_entries.repository import TimeEntryRepository
from .factory import BucketingStrategyFactory
from .model import ChartPoint, EmployeeSummary, ReportResult, ReportTotals

logger = logging.getLogger(__name__)


def _as_report_type(value: ReportType | str) -> ReportType:
    """Unrecognised report types fall back to a custom (day by day) range."""
    try:
        return ReportType(value)
    except ValueError:
        logger.info("Unknown report type %r, using custom range", value)
        return ReportType.CUSTOM


def summarize_employee(employee: Employee, entries: Sequence[TimeEntry]) -> EmployeeSummary:
    """Days and hours count closed entries only; breaks count every entry."""
    closed = [e for e in entries if e.total_hours is not None]
    total_days = len(closed)
    total_hours = sum(e.total_hours for e in closed)
    return EmployeeSummary(
        employee_id=employee.employee_id,
        employee_name=employee.name,
        total_days=total_days,
        total_hours=total_hours,
        avg_daily_hours=total_hours / total_days if total_days > 0 else 0,
        total_break_minutes=sum(int(e.break_minutes or 0) for e in entries),
    )


def grand_totals(rows: Sequence[EmployeeSummary]) -> ReportTotals:
    """Sum the summary rows; the average is recomputed, not averaged."""
    if not rows:
        return ReportTotals()

    total_days = sum(r.total_days for r in rows)
    total_hours = sum(r.total_hours for r in rows)
    return ReportTotals(
        total_days=total_days,
        total_hours=total_hours,
        avg_daily_hours=total_hours / total_days if total_days > 0 else 0,
        total_break_minutes=sum(r.total_break_minutes for r in rows),
    )


class ReportService:
    """Use case: hours reports (chart series + per-employee summary)."""

    def __init__(
        self,
        entries: TimeEntryRepository,
        employees: EmployeeRepository,
        *,
        factory: Optional[BucketingStrategyFactory] = None,
    ):
        self._entries = entries
        self._employees = employees
        self._factory = factory or BucketingStrategyFactory()

    def generate_report(
        self,
        report_type: ReportType | str,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        employee_id: Optional[int] = None,
        *,
        today: Optional[date] = None,
    ) -> ReportResult:
        report_type = _as_report_type(report_type)
        today = today or today_local()
        start = date_from or today - timedelta(days=DEFAULT_REPORT_DAYS)
        end = date_to or today
        if start > end:
            raise ValidationError("dateFrom must not be after dateTo", ["dateFrom: after dateTo"])

        strategy = self._factory.for_report_type(report_type)
        chart_start, chart_end = strategy.expand(start, end)

        # One fetch for the widest range; the summary only looks at [start, end].
        entries = self._entries.list_in_range(start=chart_start, end=chart_end, employee_id=employee_id)
        active = list(self._employees.list_active())

        logger.debug(
            "Report %s %s..%s (chart %s..%s) employee=%s: %d entries",
            report_type.value, start, end, chart_start, chart_end, employee_id, len(entries),
        )

        summary = self._summary(entries, start=start, end=end, employee_id=employee_id, active=active)
        return ReportResult(
            title=strategy.title,
            chart_data=self._chart(strategy, entries, chart_start, chart_end),
            summary_data=summary,
            employee_totals=grand_totals(summary),
            employees=active,
            date_from=start,
            date_to=end,
        )

    def _chart(self, strategy, entries: Sequence[TimeEntry], start: date, end: date) -> list[ChartPoint]:
        points: dict[date, ChartPoint] = {}
        for bucket in strategy.buckets(start, end):
            points[bucket.key] = ChartPoint(label=bucket.label)

        for e in entries:
            if e.total_hours is None:
                continue
            point = points.get(strategy.key_for(e.work_date))
            if point is None:
                continue
            point.values[e.employee_id] = point.values.get(e.employee_id, 0) + e.total_hours

        return list(points.values())

    def _summary(
        self,
        entries: Sequence[TimeEntry],
        *,
        start: date,
        end: date,
        employee_id: Optional[int],
        active: Sequence[Employee],
    ) -> list[EmployeeSummary]:
        if employee_id is not None:
            employee = self._employees.get_by_id(int(employee_id))
            in_scope = [employee] if employee else []
        else:
            in_scope = list(active)

        by_employee: dict[int, list[TimeEntry]] = defaultdict(list)
        for e in entries:
            if start <= e.work_date <= end:
                by_employee[e.employee_id].append(e)

        rows: list[EmployeeSummary] = []
        for employee in in_scope:
            own = by_employee.get(employee.employee_id)
            if not own:
                continue
            rows.append(summarize_employee(employee, own))
        return rows
