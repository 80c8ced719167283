"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_REPORT_DAYS = 7
DEFAULT_PAGE_SIZE = 10
WORK_DAYS_PER_WEEK = 5
MINUTES_PER_DAY = 24 * 60

ALL_EMPLOYEES = "all_employees"
