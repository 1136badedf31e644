"""Status advisories and the combined compliance report."""

from __future__ import annotations

import datetime as dt
from collections.abc import Sequence
from datetime import timedelta

from schengen_calc.domain.compliance.normalizer import DayInterval
from schengen_calc.domain.compliance.trip_validator import trip_is_feasible
from schengen_calc.domain.compliance.window import evaluate
from schengen_calc.domain.constants import (
    COMFORTABLE_REMAINING_DAYS,
    DEFAULT_LOW_REMAINING_THRESHOLD,
    DEFAULT_SEARCH_HORIZON_DAYS,
    MAX_STAY_DAYS,
    PLAN_EXIT_REMAINING_DAYS,
    WINDOW_DAYS,
)
from schengen_calc.domain.enums import IssueCode, Severity
from schengen_calc.domain.models import ComplianceReport, ComplianceStatus, ValidationIssue


def status_warnings(
    status: ComplianceStatus,
    *,
    low_threshold: int = DEFAULT_LOW_REMAINING_THRESHOLD,
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if not status.is_compliant:
        issues.append(
            ValidationIssue(
                code=IssueCode.OVER_LIMIT,
                severity=Severity.HIGH,
                message=(
                    f"{status.used_days} days used in the current {WINDOW_DAYS}-day period "
                    f"(limit: {MAX_STAY_DAYS} days)"
                ),
                date=status.reference_date,
            )
        )
    if 0 < status.remaining_days <= low_threshold:
        issues.append(
            ValidationIssue(
                code=IssueCode.LOW_REMAINING,
                severity=Severity.MEDIUM,
                message=f"Only {status.remaining_days} Schengen day(s) remain",
                date=status.reference_date,
            )
        )
    if status.remaining_days == 0 and status.is_compliant:
        issues.append(
            ValidationIssue(
                code=IssueCode.LIMIT_REACHED,
                severity=Severity.HIGH,
                message="The Schengen stay limit has been reached; no further days are available",
                date=status.reference_date,
            )
        )
    return issues


def next_allowed_entry(intervals: Sequence[DayInterval], reference_date: dt.date) -> dt.date | None:
    """First day after ``reference_date`` on which a one-day stay is allowed.

    ``None`` while days remain on ``reference_date`` itself.
    """
    if evaluate(intervals, reference_date).remaining_days > 0:
        return None
    for offset in range(1, DEFAULT_SEARCH_HORIZON_DAYS + 1):
        day = reference_date + timedelta(days=offset)
        if trip_is_feasible(intervals, day, day):
            return day
    return evaluate(intervals, reference_date).next_reset_date


def _recommendations(status: ComplianceStatus) -> list[str]:
    rows: list[str] = []
    if 0 < status.remaining_days <= PLAN_EXIT_REMAINING_DAYS:
        rows.append("Plan your exit date or review options for a longer stay")
    if status.remaining_days > COMFORTABLE_REMAINING_DAYS:
        rows.append("Your current stay allowance is comfortable")
    if not status.is_compliant:
        rows.append("Leave the Schengen Area immediately or contact the relevant authorities")
    return rows


def build_report(
    intervals: Sequence[DayInterval],
    reference_date: dt.date,
    *,
    low_threshold: int = DEFAULT_LOW_REMAINING_THRESHOLD,
) -> ComplianceReport:
    status = evaluate(intervals, reference_date)
    return ComplianceReport(
        status=status,
        warnings=status_warnings(status, low_threshold=low_threshold),
        recommendations=_recommendations(status),
        next_allowed_entry=next_allowed_entry(intervals, reference_date),
        max_stay_days=status.remaining_days if status.is_compliant else 0,
    )


__all__ = ["build_report", "next_allowed_entry", "status_warnings"]
