from __future__ import annotations

from datetime import date

from ...common.datetime_utils import date_range, format_day_label
from .base import Bucket, BucketingStrategy


class DailyBuckets(BucketingStrategy):
    """One bucket per calendar day, empty days included."""

    def expand(self, start: date, end: date) -> tuple[date, date]:
        return start, end

    def key_for(self, d: date) -> date:
        return d

    def buckets(self, start: date, end: date) -> list[Bucket]:
        return [Bucket(key=d, label=format_day_label(d)) for d in date_range(start, end)]
