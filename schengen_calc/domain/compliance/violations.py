"""Violation scanner: maximal date ranges where rolling usage exceeds 90 days.

For a merged interval set, the daily change of ``used_days(d)`` is
``covered(d) - covered(d - 180)``. That difference can only change on an
interval start, the day after an interval end, and the same two days shifted
by 180. Between consecutive breakpoints usage is therefore linear with slope
-1, 0 or +1, so one evaluation per breakpoint pins down every day of the
segment exactly.
"""

from __future__ import annotations

import bisect
import datetime as dt
from collections.abc import Iterable, Sequence
from datetime import timedelta

from schengen_calc.domain.compliance.normalizer import DayInterval, merge_intervals
from schengen_calc.domain.compliance.window import used_days_on
from schengen_calc.domain.constants import MAX_STAY_DAYS, ONE_DAY, WINDOW_DAYS
from schengen_calc.domain.exceptions import InvalidInterval
from schengen_calc.domain.models import ViolationPeriod

_SHADOW = timedelta(days=WINDOW_DAYS)


def _is_covered(intervals: Sequence[DayInterval], starts: Sequence[dt.date], day: dt.date) -> bool:
    idx = bisect.bisect_right(starts, day) - 1
    return idx >= 0 and intervals[idx].end >= day


def breakpoints(
    intervals: Iterable[DayInterval],
    from_date: dt.date,
    to_date: dt.date,
) -> list[dt.date]:
    points = {from_date}
    for item in intervals:
        for point in (
            item.start,
            item.end + ONE_DAY,
            item.start + _SHADOW,
            item.end + _SHADOW + ONE_DAY,
        ):
            if from_date < point <= to_date:
                points.add(point)
    return sorted(points)


def _over_limit_span(
    seg_start: dt.date,
    seg_end: dt.date,
    used_at_start: int,
    slope: int,
) -> tuple[dt.date, dt.date, int] | None:
    """Over-limit sub-range of one linear segment as (first, last, peak)."""
    if slope == 0:
        if used_at_start > MAX_STAY_DAYS:
            return seg_start, seg_end, used_at_start
        return None

    if slope > 0:
        first = seg_start + timedelta(days=max(0, MAX_STAY_DAYS + 1 - used_at_start))
        if first > seg_end:
            return None
        peak = used_at_start + (seg_end - seg_start).days
        return first, seg_end, peak

    if used_at_start <= MAX_STAY_DAYS:
        return None
    last = min(seg_end, seg_start + timedelta(days=used_at_start - MAX_STAY_DAYS - 1))
    return seg_start, last, used_at_start


def find_violations(
    intervals: Iterable[DayInterval],
    from_date: dt.date,
    to_date: dt.date,
) -> list[ViolationPeriod]:
    if from_date > to_date:
        raise InvalidInterval(f"scan range start {from_date} is after end {to_date}")

    merged = merge_intervals(intervals)
    starts = [item.start for item in merged]
    points = breakpoints(merged, from_date, to_date)

    periods: list[ViolationPeriod] = []
    for idx, seg_start in enumerate(points):
        seg_end = points[idx + 1] - ONE_DAY if idx + 1 < len(points) else to_date
        used = used_days_on(merged, seg_start)
        slope = int(_is_covered(merged, starts, seg_start)) - int(
            _is_covered(merged, starts, seg_start - _SHADOW)
        )
        span = _over_limit_span(seg_start, seg_end, used, slope)
        if span is None:
            continue

        first, last, peak = span
        if periods and periods[-1].end + ONE_DAY == first:
            previous = periods[-1]
            periods[-1] = ViolationPeriod(
                start=previous.start,
                end=last,
                peak_used_days=max(previous.peak_used_days, peak),
            )
        else:
            periods.append(ViolationPeriod(start=first, end=last, peak_used_days=peak))
    return periods


__all__ = ["breakpoints", "find_violations"]
