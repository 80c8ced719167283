from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_date
from .model import Employee
from .repository import EmployeeRepository

_UPDATABLE_COLUMNS = ("name", "email", "position", "status")

_SELECT_WITH_LAST_CHECK_IN = """
    SELECT
        e.employee_id, e.name, e.email, e.position, e.status, e.created_at, e.updated_at,
        last.last_check_in
    FROM employees e
    LEFT JOIN (
        SELECT employee_id, MAX(work_date) AS last_check_in
        FROM time_entries
        GROUP BY employee_id
    ) last ON last.employee_id = e.employee_id
"""


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        name=r["name"],
        email=r["email"],
        position=r["position"],
        status=EmployeeStatus(r["status"]),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
        last_check_in=to_date(r.get("last_check_in")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_employee(self, *, name: str, email: str, position: str, status: EmployeeStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, email, position, status)
                VALUES(%s,%s,%s,%s)
                """,
                (name, email, position, status.value),
            )
            return int(cur.lastrowid)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_WITH_LAST_CHECK_IN + " WHERE e.employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, email, position, status, created_at, updated_at
                FROM employees
                WHERE email=%s
                """,
                (email,),
            )
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_WITH_LAST_CHECK_IN + " ORDER BY e.name DESC")
            return [_to_employee(r) for r in fetchall(cur)]

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, email, position, status, created_at, updated_at
                FROM employees
                WHERE status=%s
                ORDER BY employee_id ASC
                """,
                (EmployeeStatus.ACTIVE.value,),
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def count_active(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM employees WHERE status=%s", (EmployeeStatus.ACTIVE.value,))
            r = fetchone(cur)
            return int(r["n"]) if r else 0

    def update_employee(self, employee_id: int, changes: Mapping[str, Any]) -> bool:
        sets: list[str] = []
        params: list[object] = []
        for col in _UPDATABLE_COLUMNS:
            if col not in changes:
                continue
            value = changes[col]
            if isinstance(value, EmployeeStatus):
                value = value.value
            sets.append(f"{col}=%s")
            params.append(value)

        sets.append("updated_at=CURRENT_TIMESTAMP")
        params.append(int(employee_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE employees SET {', '.join(sets)} WHERE employee_id=%s",
                tuple(params),
            )
            return cur.rowcount > 0
