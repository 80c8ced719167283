from __future__ import annotations

from datetime import date, timedelta

from ...common.datetime_utils import end_of_week, format_date_short, start_of_week
from .base import Bucket, BucketingStrategy


class WeeklyBuckets(BucketingStrategy):
    """Monday-start weeks, labelled 'Jan 5 - Jan 11'."""

    def expand(self, start: date, end: date) -> tuple[date, date]:
        return start_of_week(start), end_of_week(end)

    def key_for(self, d: date) -> date:
        return start_of_week(d)

    def buckets(self, start: date, end: date) -> list[Bucket]:
        out: list[Bucket] = []
        current = start_of_week(start)
        while current <= end:
            label = f"{format_date_short(current)} - {format_date_short(end_of_week(current))}"
            out.append(Bucket(key=current, label=label))
            current += timedelta(days=7)
        return out
