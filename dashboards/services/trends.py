"""
Trend Aggregator

Monthly disease-case series over a trailing window. Buckets use the local
calendar month (settings.TIME_ZONE) of each case's report timestamp.

Series are sparse: months without cases are left out, not zero-filled.
"""

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from dateutil.relativedelta import relativedelta
from django.utils import timezone

from locations.hierarchy import normalize_component
from .classifier import outbreak_contribution, record_value


@dataclass(frozen=True)
class TrendPoint:
    year: int
    month: int
    province: Optional[str] = None
    count: int = 0
    outbreaks: int = 0

    @property
    def period(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def sort_key(self):
        return (self.year, self.month, self.province or '')

    def as_scoped_dict(self):
        return {'month': self.period, 'count': self.count, 'outbreaks': self.outbreaks}

    def as_national_dict(self):
        return {
            'date': self.period,
            'province': self.province,
            'diseases': self.count,
            'outbreaks': self.outbreaks,
        }


def window_start(months: int, now: Optional[datetime] = None) -> datetime:
    """Start of a trailing window of ``months`` calendar months ending now."""
    now = now or timezone.now()
    return now - relativedelta(months=months)


def _local(value: datetime) -> datetime:
    return timezone.localtime(value) if timezone.is_aware(value) else value


def monthly_trends(
    cases: Iterable,
    months: int,
    now: Optional[datetime] = None,
    by_province: bool = False,
) -> List[TrendPoint]:
    """
    Bucket cases reported within the window by (year, month[, province]).

    Returns TrendPoints sorted ascending by (year, month[, province]); only
    buckets with at least one case are present.
    """
    start = window_start(months, now)
    counts = Counter()
    outbreaks = Counter()

    for case in cases:
        reported = record_value(case, 'reported_date')
        if reported is None or reported < start:
            continue
        local = _local(reported)
        province = normalize_component(record_value(case, 'province')) if by_province else None
        bucket = (local.year, local.month, province)
        counts[bucket] += 1
        outbreaks[bucket] += outbreak_contribution(case)

    points = [
        TrendPoint(year=year, month=month, province=province,
                   count=counts[(year, month, province)],
                   outbreaks=outbreaks[(year, month, province)])
        for (year, month, province) in counts
    ]
    return sorted(points, key=lambda point: point.sort_key)
