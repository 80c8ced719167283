from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.http import login_required, parse_model
from ..container import Container
from ..time_entries.controller import time_entry_json
from .schemas import DashboardQuery


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    @login_required
    def dashboard():
        q = parse_model(DashboardQuery, request.args.to_dict())
        data = container.dashboard_service.get_dashboard(q.day or today_local())
        s = data.stats
        return jsonify(
            {
                "entries": [time_entry_json(e) for e in data.entries],
                "stats": {
                    "totalHours": s.total_hours,
                    "activeEmployees": s.active_employees,
                    "checkedInCount": s.checked_in_count,
                    "avgHoursPerEmployee": s.avg_hours_per_employee,
                    "weeklyAvgHours": s.weekly_avg_hours,
                },
            }
        )
