from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import login_required, parse_model
from ..container import Container
from ..core.exceptions import NotFoundError
from .model import TimeEntry, TimeEntryPage
from .schemas import TimeEntryCreate, TimeEntryQuery, TimeEntryUpdate


def _iso(value) -> str | None:
    return value.isoformat() if value else None


def time_entry_json(e: TimeEntry) -> dict:
    return {
        "id": e.entry_id,
        "employeeId": e.employee_id,
        "employeeName": e.employee_name,
        "date": _iso(e.work_date),
        "checkInTime": e.check_in_time,
        "checkOutTime": e.check_out_time,
        "breakMinutes": e.break_minutes,
        "totalHours": e.total_hours,
        "state": e.state.value,
        "createdAt": _iso(e.created_at),
        "updatedAt": _iso(e.updated_at),
    }


def _page_json(p: TimeEntryPage) -> dict:
    return {
        "entries": [time_entry_json(e) for e in p.entries],
        "totalEntries": p.total_entries,
        "totalPages": p.total_pages,
        "currentPage": p.current_page,
        "pageSize": p.page_size,
        "startIndex": p.start_index,
        "endIndex": p.end_index,
    }


def register(app: Flask, container: Container) -> None:
    service = container.time_entry_service

    @app.route("/api/time-entries", methods=["GET"], endpoint="api_list_time_entries")
    @login_required
    def list_time_entries():
        q = parse_model(TimeEntryQuery, request.args.to_dict())
        page = service.get_time_entries(
            date_from=q.date_from,
            date_to=q.date_to,
            employee_id=q.employee_id,
            page=q.page,
        )
        return jsonify(_page_json(page))

    @app.route("/api/time-entries", methods=["POST"], endpoint="api_create_time_entry")
    @login_required
    def create_time_entry():
        payload = parse_model(TimeEntryCreate, request.get_json(silent=True))
        entry = service.create_time_entry(
            employee_id=payload.employee_id,
            work_date=payload.work_date,
            check_in_time=payload.check_in_time,
            check_out_time=payload.check_out_time,
            break_minutes=payload.break_minutes,
        )
        return jsonify(time_entry_json(entry)), 201

    @app.route("/api/time-entries/<int:entry_id>", methods=["GET"], endpoint="api_get_time_entry")
    @login_required
    def get_time_entry(entry_id: int):
        return jsonify(time_entry_json(service.get_time_entry(entry_id)))

    @app.route("/api/time-entries/<int:entry_id>", methods=["PATCH"], endpoint="api_update_time_entry")
    @login_required
    def update_time_entry(entry_id: int):
        payload = parse_model(TimeEntryUpdate, request.get_json(silent=True))
        entry = service.update_time_entry(entry_id, payload.model_dump(exclude_unset=True))
        return jsonify(time_entry_json(entry))

    @app.route("/api/time-entries/<int:entry_id>", methods=["DELETE"], endpoint="api_delete_time_entry")
    @login_required
    def delete_time_entry(entry_id: int):
        service.delete_time_entry(entry_id)
        return "", 204

    @app.route("/api/time-entries/<int:entry_id>/checkout", methods=["POST"], endpoint="api_checkout_time_entry")
    @login_required
    def checkout_time_entry(entry_id: int):
        entry = service.checkout_time_entry(entry_id)
        if not entry:
            raise NotFoundError("Time entry not found or already checked out")
        return jsonify(time_entry_json(entry))
