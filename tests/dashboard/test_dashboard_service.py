from datetime import date

from worktime.core.enums import EmployeeStatus
from worktime.dashboard.service import DashboardService

WEDNESDAY = date(2026, 1, 7)


def test_stats_without_active_employees(entries_repo, employees_repo):
    stats = DashboardService(entries_repo, employees_repo).get_dashboard_stats(WEDNESDAY)

    assert stats.total_hours == 0
    assert stats.active_employees == 0
    assert stats.avg_hours_per_employee == 0
    assert stats.weekly_avg_hours == 0


def test_dashboard_for_a_day(entries_repo, employees_repo, add_employee, add_entry):
    a = add_employee("Ana")
    b = add_employee("Ben")
    add_employee("Old Timer", status=EmployeeStatus.INACTIVE)

    add_entry(a, WEDNESDAY, 7.5)
    add_entry(b, WEDNESDAY, None)  # still checked in
    add_entry(a, date(2026, 1, 5), 8.0)
    add_entry(b, date(2026, 1, 12), 9.0)  # next week

    d = DashboardService(entries_repo, employees_repo).get_dashboard(WEDNESDAY)

    assert len(d.entries) == 2
    assert d.stats.total_hours == 7.5
    assert d.stats.active_employees == 2
    assert d.stats.checked_in_count == 1
    assert d.stats.avg_hours_per_employee == 3.75
    # (7.5 + 8.0) / (2 employees * 5 days)
    assert d.stats.weekly_avg_hours == 1.55


def test_stats_are_rounded(entries_repo, employees_repo, add_employee, add_entry):
    for name in ("Ana", "Ben", "Cai"):
        add_employee(name)
    add_entry(1, WEDNESDAY, 8.0)

    stats = DashboardService(entries_repo, employees_repo).get_dashboard_stats(WEDNESDAY)

    assert stats.avg_hours_per_employee == 2.67
    assert stats.weekly_avg_hours == 0.53
