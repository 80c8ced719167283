from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import login_required, parse_model
from ..container import Container
from .model import Employee
from .schemas import EmployeeCreate, EmployeeUpdate


def _iso(value) -> str | None:
    return value.isoformat() if value else None


def employee_json(e: Employee) -> dict:
    return {
        "id": e.employee_id,
        "name": e.name,
        "email": e.email,
        "position": e.position,
        "status": e.status.value,
        "createdAt": _iso(e.created_at),
        "updatedAt": _iso(e.updated_at),
        "lastCheckIn": _iso(e.last_check_in),
    }


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="api_list_employees")
    @login_required
    def list_employees():
        return jsonify([employee_json(e) for e in service.list_employees()])

    @app.route("/api/employees", methods=["POST"], endpoint="api_create_employee")
    @login_required
    def create_employee():
        payload = parse_model(EmployeeCreate, request.get_json(silent=True))
        employee = service.create_employee(name=payload.name, email=payload.email, position=payload.position)
        return jsonify(employee_json(employee)), 201

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="api_get_employee")
    @login_required
    def get_employee(employee_id: int):
        return jsonify(employee_json(service.get_employee(employee_id)))

    @app.route("/api/employees/<int:employee_id>", methods=["PATCH"], endpoint="api_update_employee")
    @login_required
    def update_employee(employee_id: int):
        payload = parse_model(EmployeeUpdate, request.get_json(silent=True))
        employee = service.update_employee(employee_id, payload.model_dump(exclude_unset=True))
        return jsonify(employee_json(employee))

    @app.route("/api/employees/<int:employee_id>/deactivate", methods=["PATCH"], endpoint="api_deactivate_employee")
    @login_required
    def deactivate_employee(employee_id: int):
        return jsonify(employee_json(service.deactivate_employee(employee_id)))
