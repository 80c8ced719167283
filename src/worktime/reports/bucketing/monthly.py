from __future__ import annotations

from datetime import date

from ...common.datetime_utils import add_months, end_of_month, start_of_month
from .base import Bucket, BucketingStrategy


class MonthlyBuckets(BucketingStrategy):
    """Calendar months, labelled 'January 2026'."""

    def expand(self, start: date, end: date) -> tuple[date, date]:
        return start_of_month(start), end_of_month(end)

    def key_for(self, d: date) -> date:
        return start_of_month(d)

    def buckets(self, start: date, end: date) -> list[Bucket]:
        out: list[Bucket] = []
        current = start_of_month(start)
        while current <= end:
            out.append(Bucket(key=current, label=current.strftime("%B %Y")))
            current = add_months(current, 1)
        return out
