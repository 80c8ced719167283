from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Any, Mapping, Optional

import pytest
from werkzeug.security import generate_password_hash

from worktime.container import wire_container
from worktime.core.enums import EmployeeStatus
from worktime.employees.model import Employee
from worktime.main import create_app
from worktime.time_entries.model import TimeEntry
from worktime.users.model import User


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(int(user_id))

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.username == username), None)

    def create_user(self, *, username: str, password_hash: str) -> int:
        user_id = len(self._by_id) + 1
        self._by_id[user_id] = User(user_id=user_id, username=username, password_hash=password_hash)
        return user_id


class InMemoryEmployees:
    def __init__(self):
        self._by_id: dict[int, Employee] = {}
        self.entries: Optional["InMemoryTimeEntries"] = None

    def _with_last_check_in(self, e: Employee) -> Employee:
        if not self.entries:
            return e
        dates = [t.work_date for t in self.entries.all() if t.employee_id == e.employee_id]
        return replace(e, last_check_in=max(dates) if dates else None)

    def create_employee(self, *, name: str, email: str, position: str, status: EmployeeStatus) -> int:
        employee_id = len(self._by_id) + 1
        self._by_id[employee_id] = Employee(
            employee_id=employee_id,
            name=name,
            email=email,
            position=position,
            status=status,
            created_at=datetime(2026, 1, 1, 9, 0),
            updated_at=datetime(2026, 1, 1, 9, 0),
        )
        return employee_id

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        e = self._by_id.get(int(employee_id))
        return self._with_last_check_in(e) if e else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        return next((e for e in self._by_id.values() if e.email == email), None)

    def list_all(self):
        items = [self._with_last_check_in(e) for e in self._by_id.values()]
        return sorted(items, key=lambda e: e.name, reverse=True)

    def list_active(self):
        return [e for e in self._by_id.values() if e.status == EmployeeStatus.ACTIVE]

    def count_active(self) -> int:
        return len(self.list_active())

    def update_employee(self, employee_id: int, changes: Mapping[str, Any]) -> bool:
        e = self._by_id.get(int(employee_id))
        if not e:
            return False
        self._by_id[e.employee_id] = replace(e, **dict(changes))
        return True


class InMemoryTimeEntries:
    def __init__(self, employees: InMemoryEmployees):
        self._by_id: dict[int, TimeEntry] = {}
        self._next_id = 1
        self._employees = employees
        employees.entries = self

    def all(self):
        return list(self._by_id.values())

    def _named(self, e: TimeEntry) -> TimeEntry:
        employee = self._employees._by_id.get(e.employee_id)
        return replace(e, employee_name=employee.name if employee else None)

    def create_entry(self, *, employee_id, work_date, check_in_time, check_out_time, break_minutes, total_hours) -> int:
        entry_id = self._next_id
        self._next_id += 1
        self._by_id[entry_id] = TimeEntry(
            entry_id=entry_id,
            employee_id=int(employee_id),
            work_date=work_date,
            check_in_time=check_in_time,
            check_out_time=check_out_time,
            break_minutes=int(break_minutes),
            total_hours=total_hours,
            created_at=datetime(2026, 1, 1, 9, 0, entry_id % 60),
        )
        return entry_id

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        e = self._by_id.get(int(entry_id))
        return self._named(e) if e else None

    def list_for_date(self, work_date: date):
        items = [self._named(e) for e in self._by_id.values() if e.work_date == work_date]
        return sorted(items, key=lambda e: e.entry_id, reverse=True)

    def list_in_range(self, *, start: date, end: date, employee_id: Optional[int] = None):
        items = [
            self._named(e)
            for e in self._by_id.values()
            if start <= e.work_date <= end and (employee_id is None or e.employee_id == employee_id)
        ]
        return sorted(items, key=lambda e: (e.work_date, e.entry_id))

    def list_page(self, *, date_from, date_to, employee_id, limit, offset):
        items = [
            self._named(e)
            for e in self._by_id.values()
            if (date_from is None or e.work_date >= date_from)
            and (date_to is None or e.work_date <= date_to)
            and (employee_id is None or e.employee_id == employee_id)
        ]
        items.sort(key=lambda e: (e.work_date, e.entry_id), reverse=True)
        return items[offset : offset + limit], len(items)

    def update_entry(self, entry_id: int, changes: Mapping[str, Any]) -> bool:
        e = self._by_id.get(int(entry_id))
        if not e:
            return False
        self._by_id[e.entry_id] = replace(e, **dict(changes))
        return True

    def delete_entry(self, entry_id: int) -> bool:
        return self._by_id.pop(int(entry_id), None) is not None


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def entries_repo(employees_repo) -> InMemoryTimeEntries:
    return InMemoryTimeEntries(employees_repo)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    repo = InMemoryUsers()
    repo.create_user(username="admin", password_hash=generate_password_hash("admin123"))
    return repo


@pytest.fixture
def add_employee(employees_repo):
    def _add(name: str, *, status: EmployeeStatus = EmployeeStatus.ACTIVE) -> int:
        email = f"{name.lower().replace(' ', '.')}@acme.org"
        return employees_repo.create_employee(name=name, email=email, position="Developer", status=status)

    return _add


@pytest.fixture
def add_entry(entries_repo):
    def _add(
        employee_id: int,
        work_date: date,
        total_hours: Optional[float],
        *,
        break_minutes: int = 0,
        check_in: str = "9:00 AM",
        check_out: Optional[str] = "5:00 PM",
    ) -> int:
        return entries_repo.create_entry(
            employee_id=employee_id,
            work_date=work_date,
            check_in_time=check_in,
            check_out_time=check_out if total_hours is not None else None,
            break_minutes=break_minutes,
            total_hours=total_hours,
        )

    return _add


@pytest.fixture
def container(users_repo, employees_repo, entries_repo):
    return wire_container(users_repo=users_repo, employees_repo=employees_repo, time_entries_repo=entries_repo)


@pytest.fixture
def app(container):
    return create_app(container, settings_module="worktime.settings.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    resp = client.post("/api/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200
    return client
