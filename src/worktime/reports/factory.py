from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ReportType
from .bucketing.base import BucketingStrategy
from .bucketing.daily import DailyBuckets
from .bucketing.monthly import MonthlyBuckets
from .bucketing.weekly import WeeklyBuckets


@dataclass
class BucketingStrategyFactory:
    """Factory Pattern: choose the bucketing strategy for a report type."""

    def for_report_type(self, report_type: ReportType) -> BucketingStrategy:
        if report_type == ReportType.DAILY:
            return DailyBuckets(title="Daily Summary")
        if report_type == ReportType.WEEKLY:
            return WeeklyBuckets(title="Weekly Summary")
        if report_type == ReportType.MONTHLY:
            return MonthlyBuckets(title="Monthly Summary")
        # employee / custom ranges are charted day by day
        return DailyBuckets(title="Custom Range Summary")
