"""Interval normalizer: visit list -> merged Schengen presence intervals.

Boundary rule: an interval merges into the running one when it starts on or
before the day after the running interval ends. Overlaps merge, and so do
touching ranges (leaving France and entering Germany on the same day, or on
consecutive days, is continuous presence). A full calendar day outside the
Area between two stays keeps them apart.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from schengen_calc.domain.constants import ONE_DAY
from schengen_calc.domain.exceptions import InvalidInterval
from schengen_calc.domain.membership import SchengenMembership, resolve_membership
from schengen_calc.domain.models import VisitRecord

VisitInput = Union[VisitRecord, Mapping[str, Any]]


@dataclass(frozen=True)
class DayInterval:
    """Closed range of calendar days, both ends counted."""

    start: dt.date
    end: dt.date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise InvalidInterval(f"interval end {self.end} is before start {self.start}")

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, day: dt.date) -> bool:
        return self.start <= day <= self.end

    def overlap_days(self, lo: dt.date, hi: dt.date) -> int:
        start = max(self.start, lo)
        end = min(self.end, hi)
        return max(0, (end - start).days + 1)


def coerce_visit(raw: VisitInput) -> VisitRecord:
    if isinstance(raw, VisitRecord):
        return raw
    return VisitRecord.model_validate(raw)


def check_visit_order(visit: VisitRecord) -> None:
    if visit.exit_date is not None and visit.entry_date > visit.exit_date:
        raise InvalidInterval(
            f"visit to {visit.country}: entry {visit.entry_date} is after exit {visit.exit_date}"
        )


def materialize(
    visits: Iterable[VisitInput],
    reference_date: dt.date,
    membership: SchengenMembership | None = None,
) -> list[DayInterval]:
    """Schengen visits as closed intervals; ongoing stays end on ``reference_date``."""
    members = resolve_membership(membership)
    intervals: list[DayInterval] = []
    for raw in visits:
        visit = coerce_visit(raw)
        check_visit_order(visit)
        if not members.contains(visit.country):
            continue
        end = visit.exit_date if visit.exit_date is not None else reference_date
        if end < visit.entry_date:
            # ongoing stay that has not started as of the reference date
            continue
        intervals.append(DayInterval(start=visit.entry_date, end=end))
    return intervals


def merge_intervals(intervals: Iterable[DayInterval]) -> tuple[DayInterval, ...]:
    ordered = sorted(intervals, key=lambda item: (item.start, item.end))
    merged: list[DayInterval] = []
    for item in ordered:
        if merged and item.start <= merged[-1].end + ONE_DAY:
            running = merged[-1]
            if item.end > running.end:
                merged[-1] = DayInterval(start=running.start, end=item.end)
            continue
        merged.append(item)
    return tuple(merged)


def normalize(
    visits: Iterable[VisitInput],
    reference_date: dt.date,
    membership: SchengenMembership | None = None,
) -> tuple[DayInterval, ...]:
    return merge_intervals(materialize(visits, reference_date, membership))


def total_days(intervals: Iterable[DayInterval]) -> int:
    return sum(item.days for item in intervals)


__all__ = [
    "DayInterval",
    "VisitInput",
    "check_visit_order",
    "coerce_visit",
    "materialize",
    "merge_intervals",
    "normalize",
    "total_days",
]
