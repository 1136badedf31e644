"""Application service for Schengen compliance use-cases.

These are the functions the surrounding product calls. They accept raw
mappings or ``VisitRecord`` objects, fill in defaults from settings and the
current date, and delegate to the pure engine in ``domain.compliance``.
"""

from __future__ import annotations

import contextlib
import datetime as dt
import time
from collections.abc import Iterable, Mapping
from typing import Any, Iterator, Union

from schengen_calc.config.settings import EngineSettings, resolve_settings
from schengen_calc.domain.compliance import advisories, safe_window, trip_validator
from schengen_calc.domain.compliance import violations as violation_scanner
from schengen_calc.domain.compliance.normalizer import (
    DayInterval,
    VisitInput,
    coerce_visit,
    merge_intervals,
    normalize,
)
from schengen_calc.domain.compliance.window import evaluate
from schengen_calc.domain.exceptions import DomainError, InvalidInterval
from schengen_calc.domain.membership import SchengenMembership
from schengen_calc.domain.models import (
    ComplianceReport,
    ComplianceStatus,
    FlaggedTrip,
    SafeWindow,
    TripValidationResult,
    ViolationPeriod,
    VisitRecord,
)
from schengen_calc.infrastructure.logging import StructuredLogger, get_logger
from schengen_calc.observability.engine_metrics import observe_operation

TripInput = Union[FlaggedTrip, Mapping[str, Any]]


@contextlib.contextmanager
def _observed(operation: str, **extra: Any) -> Iterator[StructuredLogger]:
    logger = get_logger()
    logger.op_start(operation, **extra)
    started = time.perf_counter()
    try:
        yield logger
    except Exception as exc:
        latency_ms = (time.perf_counter() - started) * 1000
        logger.error(operation, str(exc), error_type=type(exc).__name__)
        logger.op_end(operation, ok=False)
        observe_operation(
            operation=operation,
            latency_ms=latency_ms,
            ok=False,
            error_code=exc.code if isinstance(exc, DomainError) else type(exc).__name__,
        )
        raise
    latency_ms = (time.perf_counter() - started) * 1000
    logger.op_end(operation, ok=True)
    observe_operation(operation=operation, latency_ms=latency_ms, ok=True)


def _membership(membership: SchengenMembership | None, settings: EngineSettings) -> SchengenMembership:
    return settings.membership() if membership is None else membership


def _records(visits: Iterable[VisitInput]) -> list[VisitRecord]:
    return [coerce_visit(raw) for raw in visits]


def is_schengen_member(country: str, *, membership: SchengenMembership | None = None) -> bool:
    return _membership(membership, resolve_settings()).contains(country)


def compute_status(
    visits: Iterable[VisitInput],
    reference_date: dt.date | None = None,
    *,
    membership: SchengenMembership | None = None,
) -> ComplianceStatus:
    settings = resolve_settings()
    reference = reference_date or dt.date.today()
    visits = list(visits)
    with _observed("compute_status", visits=len(visits), reference_date=reference.isoformat()) as logger:
        records = _records(visits)
        intervals = normalize(records, reference, _membership(membership, settings))
        status = evaluate(intervals, reference)
        logger.summary(op="compute_status", used_days=status.used_days, is_compliant=status.is_compliant)
    return status


def compute_report(
    visits: Iterable[VisitInput],
    reference_date: dt.date | None = None,
    *,
    membership: SchengenMembership | None = None,
) -> ComplianceReport:
    settings = resolve_settings()
    reference = reference_date or dt.date.today()
    visits = list(visits)
    with _observed("compute_report", visits=len(visits), reference_date=reference.isoformat()):
        records = _records(visits)
        intervals = normalize(records, reference, _membership(membership, settings))
        report = advisories.build_report(
            intervals,
            reference,
            low_threshold=settings.low_remaining_threshold,
        )
    return report


def find_violations(
    visits: Iterable[VisitInput],
    from_date: dt.date | None = None,
    to_date: dt.date | None = None,
    *,
    today: dt.date | None = None,
    membership: SchengenMembership | None = None,
) -> list[ViolationPeriod]:
    """Violation periods over the whole known history unless a range is given.

    Ongoing visits end on ``today``. ``to_date`` defaults to the later of today
    and the last known exit, so already planned stays are scanned too. A
    defaulted bound never crosses the one the caller gave.
    """
    settings = resolve_settings()
    today = today or dt.date.today()
    visits = list(visits)
    with _observed("find_violations", visits=len(visits)) as logger:
        if from_date is not None and to_date is not None and from_date > to_date:
            raise InvalidInterval(f"scan range start {from_date} is after end {to_date}")
        records = _records(visits)
        intervals = normalize(records, today, _membership(membership, settings))
        if not intervals:
            return []
        if from_date is not None:
            start = from_date
        else:
            start = intervals[0].start if to_date is None else min(intervals[0].start, to_date)
        if to_date is not None:
            end = to_date
        else:
            end = max(today, intervals[-1].end, start)
        periods = violation_scanner.find_violations(intervals, start, end)
        logger.summary(op="find_violations", periods=len(periods))
    return periods


def validate_future_trip(
    visits: Iterable[VisitInput],
    entry_date: dt.date,
    exit_date: dt.date,
    country: str,
    *,
    today: dt.date | None = None,
    membership: SchengenMembership | None = None,
) -> TripValidationResult:
    settings = resolve_settings()
    visits = list(visits)
    with _observed(
        "validate_future_trip",
        visits=len(visits),
        entry_date=entry_date.isoformat(),
        exit_date=exit_date.isoformat(),
        country=country,
    ) as logger:
        records = _records(visits)
        result = trip_validator.validate_future_trip(
            records,
            entry_date,
            exit_date,
            country,
            today=today,
            membership=_membership(membership, settings),
        )
        for warning in result.warnings:
            logger.warning("validate_future_trip", warning)
    return result


def find_safe_window(
    visits: Iterable[VisitInput],
    duration_days: int,
    search_start: dt.date | None = None,
    horizon_days: int | None = None,
    *,
    today: dt.date | None = None,
    membership: SchengenMembership | None = None,
) -> SafeWindow | None:
    settings = resolve_settings()
    horizon = settings.safe_window_horizon_days if horizon_days is None else horizon_days
    visits = list(visits)
    with _observed(
        "find_safe_window",
        visits=len(visits),
        duration_days=duration_days,
        horizon_days=horizon,
    ) as logger:
        records = _records(visits)
        window = safe_window.find_safe_window(
            records,
            duration_days,
            search_start,
            horizon,
            today=today,
            membership=_membership(membership, settings),
        )
        logger.summary(
            op="find_safe_window",
            found=window is not None,
            start_date=window.start_date.isoformat() if window else None,
        )
    return window


def count_schengen_days(
    trips: Iterable[TripInput],
    reference_date: dt.date | None = None,
) -> int:
    """Used days for trip rows that already say whether they were in the Area."""
    reference = reference_date or dt.date.today()
    trips = list(trips)
    with _observed("count_schengen_days", trips=len(trips)):
        rows = [raw if isinstance(raw, FlaggedTrip) else FlaggedTrip.model_validate(raw) for raw in trips]
        intervals: list[DayInterval] = []
        for row in rows:
            if row.exit_date is not None and row.entry_date > row.exit_date:
                raise InvalidInterval(f"trip entry {row.entry_date} is after exit {row.exit_date}")
            if not row.is_schengen:
                continue
            end = row.exit_date if row.exit_date is not None else reference
            if end >= row.entry_date:
                intervals.append(DayInterval(start=row.entry_date, end=end))
        used = evaluate(merge_intervals(intervals), reference).used_days
    return used


__all__ = [
    "compute_report",
    "compute_status",
    "count_schengen_days",
    "find_safe_window",
    "find_violations",
    "is_schengen_member",
    "validate_future_trip",
]
