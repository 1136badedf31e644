"""Window evaluator: usage of the trailing 180-day window at one date."""

from __future__ import annotations

import datetime as dt
from collections.abc import Sequence
from datetime import timedelta

from schengen_calc.domain.compliance.normalizer import DayInterval
from schengen_calc.domain.constants import MAX_STAY_DAYS, WINDOW_DAYS
from schengen_calc.domain.models import ComplianceStatus


def window_start(reference_date: dt.date) -> dt.date:
    """First day of the 180-day window ending on (and including) ``reference_date``."""
    return reference_date - timedelta(days=WINDOW_DAYS - 1)


def used_days_on(intervals: Sequence[DayInterval], day: dt.date) -> int:
    lo = window_start(day)
    return sum(item.overlap_days(lo, day) for item in intervals)


def evaluate(intervals: Sequence[DayInterval], reference_date: dt.date) -> ComplianceStatus:
    """Compliance figures at ``reference_date``.

    ``intervals`` must already be merged; overlapping input would count shared
    days twice.
    """
    lo = window_start(reference_date)
    used = 0
    earliest: dt.date | None = None
    for item in intervals:
        counted = item.overlap_days(lo, reference_date)
        if counted <= 0:
            continue
        used += counted
        first = max(item.start, lo)
        if earliest is None or first < earliest:
            earliest = first

    return ComplianceStatus(
        reference_date=reference_date,
        used_days=used,
        remaining_days=max(0, MAX_STAY_DAYS - used),
        is_compliant=used <= MAX_STAY_DAYS,
        next_reset_date=earliest + timedelta(days=WINDOW_DAYS) if earliest is not None else None,
    )


__all__ = ["evaluate", "used_days_on", "window_start"]
