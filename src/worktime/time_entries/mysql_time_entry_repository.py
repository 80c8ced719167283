from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_date, to_float
from .model import TimeEntry
from .repository import TimeEntryRepository

_UPDATABLE_COLUMNS = (
    "employee_id",
    "work_date",
    "check_in_time",
    "check_out_time",
    "break_minutes",
    "total_hours",
)

_SELECT = """
    SELECT
        te.entry_id, te.employee_id, te.work_date, te.check_in_time, te.check_out_time,
        te.break_minutes, te.total_hours, te.created_at, te.updated_at,
        e.name AS employee_name
    FROM time_entries te
    LEFT JOIN employees e ON e.employee_id = te.employee_id
"""


def _to_entry(r: dict) -> TimeEntry:
    return TimeEntry(
        entry_id=int(r["entry_id"]),
        employee_id=int(r["employee_id"]),
        work_date=to_date(r["work_date"]),
        check_in_time=r["check_in_time"],
        check_out_time=r.get("check_out_time"),
        break_minutes=int(r.get("break_minutes") or 0),
        total_hours=to_float(r.get("total_hours")),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
        employee_name=r.get("employee_name"),
    )


def _range_clauses(
    date_from: Optional[date], date_to: Optional[date], employee_id: Optional[int]
) -> tuple[str, list[object]]:
    clauses: list[str] = []
    params: list[object] = []

    if date_from is not None:
        clauses.append("te.work_date >= %s")
        params.append(date_from)
    if date_to is not None:
        clauses.append("te.work_date <= %s")
        params.append(date_to)
    if employee_id is not None:
        clauses.append("te.employee_id = %s")
        params.append(int(employee_id))

    where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
    return where, params


class MySQLTimeEntryRepository(TimeEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_entry(
        self,
        *,
        employee_id: int,
        work_date: date,
        check_in_time: str,
        check_out_time: Optional[str],
        break_minutes: int,
        total_hours: Optional[float],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_entries(employee_id, work_date, check_in_time, check_out_time, break_minutes, total_hours)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), work_date, check_in_time, check_out_time, int(break_minutes), total_hours),
            )
            return int(cur.lastrowid)

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE te.entry_id=%s", (int(entry_id),))
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def list_for_date(self, work_date: date) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE te.work_date=%s ORDER BY te.created_at DESC, te.entry_id DESC",
                (work_date,),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def list_in_range(self, *, start: date, end: date, employee_id: Optional[int] = None) -> Sequence[TimeEntry]:
        where, params = _range_clauses(start, end, employee_id)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + f" {where} ORDER BY te.work_date ASC, te.entry_id ASC", tuple(params))
            return [_to_entry(r) for r in fetchall(cur)]

    def list_page(
        self,
        *,
        date_from: Optional[date],
        date_to: Optional[date],
        employee_id: Optional[int],
        limit: int,
        offset: int,
    ) -> tuple[Sequence[TimeEntry], int]:
        where, params = _range_clauses(date_from, date_to, employee_id)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS n FROM time_entries te {where}", tuple(params))
            r = fetchone(cur)
            total = int(r["n"]) if r else 0

            cur.execute(
                _SELECT
                + f" {where} ORDER BY te.work_date DESC, te.created_at DESC, te.entry_id DESC LIMIT %s OFFSET %s",
                tuple(params) + (int(limit), int(offset)),
            )
            return [_to_entry(r) for r in fetchall(cur)], total

    def update_entry(self, entry_id: int, changes: Mapping[str, Any]) -> bool:
        sets: list[str] = []
        params: list[object] = []
        for col in _UPDATABLE_COLUMNS:
            if col in changes:
                sets.append(f"{col}=%s")
                params.append(changes[col])

        sets.append("updated_at=CURRENT_TIMESTAMP")
        params.append(int(entry_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE time_entries SET {', '.join(sets)} WHERE entry_id=%s", tuple(params))
            return cur.rowcount > 0

    def delete_entry(self, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM time_entries WHERE entry_id=%s", (int(entry_id),))
            return cur.rowcount > 0
