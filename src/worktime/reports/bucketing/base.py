from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Bucket:
    key: date
    label: str


class BucketingStrategy(ABC):
    """Strategy Pattern: how a date range is cut into chart buckets."""

    def __init__(self, title: str):
        self.title = title

    @abstractmethod
    def expand(self, start: date, end: date) -> tuple[date, date]:
        """Widen the requested range to whole buckets."""

        raise NotImplementedError

    @abstractmethod
    def key_for(self, d: date) -> date:
        """Key of the bucket containing d."""

        raise NotImplementedError

    @abstractmethod
    def buckets(self, start: date, end: date) -> list[Bucket]:
        """Every bucket of an already expanded range, in chronological order."""

        raise NotImplementedError
