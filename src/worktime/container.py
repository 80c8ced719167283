from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .reports.service import ReportService
from .time_entries.mysql_time_entry_repository import MySQLTimeEntryRepository
from .time_entries.repository import TimeEntryRepository
from .time_entries.service import TimeEntryService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    employees_repo: EmployeeRepository
    time_entries_repo: TimeEntryRepository

    auth_service: AuthService
    employee_service: EmployeeService
    time_entry_service: TimeEntryService
    report_service: ReportService
    dashboard_service: DashboardService


def wire_container(
    *,
    users_repo: UserRepository,
    employees_repo: EmployeeRepository,
    time_entries_repo: TimeEntryRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build the services on top of any repository implementations."""
    return Container(
        conn=conn,
        users_repo=users_repo,
        employees_repo=employees_repo,
        time_entries_repo=time_entries_repo,
        auth_service=AuthService(users_repo),
        employee_service=EmployeeService(employees_repo),
        time_entry_service=TimeEntryService(time_entries_repo, employees_repo),
        report_service=ReportService(time_entries_repo, employees_repo),
        dashboard_service=DashboardService(time_entries_repo, employees_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return wire_container(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        time_entries_repo=MySQLTimeEntryRepository(conn),
    )
