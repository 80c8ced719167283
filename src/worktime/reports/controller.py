from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import login_required, parse_model
from ..container import Container
from ..employees.controller import employee_json
from .model import ReportResult
from .schemas import ReportQuery


def _hours(value: float) -> float:
    return round(float(value), 2)


def report_json(r: ReportResult) -> dict:
    return {
        "title": r.title,
        "chartData": [
            {"label": p.label, "values": {str(k): _hours(v) for k, v in p.values.items()}}
            for p in r.chart_data
        ],
        "summaryData": [
            {
                "employeeId": s.employee_id,
                "employeeName": s.employee_name,
                "totalDays": s.total_days,
                "totalHours": _hours(s.total_hours),
                "avgDailyHours": _hours(s.avg_daily_hours),
                "totalBreakMinutes": s.total_break_minutes,
            }
            for s in r.summary_data
        ],
        "employeeTotals": {
            "totalDays": r.employee_totals.total_days,
            "totalHours": _hours(r.employee_totals.total_hours),
            "avgDailyHours": _hours(r.employee_totals.avg_daily_hours),
            "totalBreakMinutes": r.employee_totals.total_break_minutes,
        },
        "employees": [employee_json(e) for e in r.employees],
        "dateRange": {"from": r.date_from.isoformat(), "to": r.date_to.isoformat()},
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports", methods=["GET"], endpoint="api_reports")
    @login_required
    def reports():
        q = parse_model(ReportQuery, request.args.to_dict())
        report = container.report_service.generate_report(
            q.report_type,
            date_from=q.date_from,
            date_to=q.date_to,
            employee_id=q.employee_id,
        )
        return jsonify(report_json(report))
