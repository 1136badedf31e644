"""Future-trip validator: check a planned stay against the 90/180 rule before booking."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Sequence
from datetime import timedelta

from schengen_calc.domain.compliance.normalizer import (
    DayInterval,
    VisitInput,
    merge_intervals,
    normalize,
)
from schengen_calc.domain.compliance.violations import find_violations
from schengen_calc.domain.compliance.window import evaluate
from schengen_calc.domain.constants import MAX_STAY_DAYS, ONE_DAY, WINDOW_DAYS
from schengen_calc.domain.enums import IssueCode, Severity
from schengen_calc.domain.exceptions import InvalidInterval
from schengen_calc.domain.membership import SchengenMembership, resolve_membership
from schengen_calc.domain.models import TripValidationResult, ValidationIssue, ViolationPeriod


def trip_violations(
    history: Sequence[DayInterval],
    entry: dt.date,
    exit_: dt.date,
) -> list[ViolationPeriod]:
    """Violations inside ``[entry, exit_]`` once the stay is merged into history."""
    hypothetical = merge_intervals((*history, DayInterval(start=entry, end=exit_)))
    return find_violations(hypothetical, entry, exit_)


def trip_is_feasible(history: Sequence[DayInterval], entry: dt.date, exit_: dt.date) -> bool:
    return not trip_violations(history, entry, exit_)


def max_stay_days(history: Sequence[DayInterval], entry: dt.date) -> int:
    """Longest stay starting on ``entry`` that never exceeds the limit, capped at 90."""
    best = 0
    for length in range(1, MAX_STAY_DAYS + 1):
        if not trip_is_feasible(history, entry, entry + timedelta(days=length - 1)):
            break
        best = length
    return best


def _over_limit_issues(
    history: Sequence[DayInterval],
    entry: dt.date,
    exit_: dt.date,
    violations: list[ViolationPeriod],
    max_stay: int,
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    trip_days = (exit_ - entry).days + 1
    first_bad = violations[0].start
    excess = max(v.peak_used_days for v in violations) - MAX_STAY_DAYS

    if trip_days > MAX_STAY_DAYS:
        issues.append(
            ValidationIssue(
                code=IssueCode.TRIP_TOO_LONG,
                severity=Severity.HIGH,
                message=f"A {trip_days}-day stay exceeds the {MAX_STAY_DAYS}-day limit on its own",
                date=entry,
                suggestions=[f"Split the trip so that no stay is longer than {MAX_STAY_DAYS} days"],
            )
        )

    if max_stay == 0:
        issues.append(
            ValidationIssue(
                code=IssueCode.ENTRY_BLOCKED,
                severity=Severity.HIGH,
                message=f"No Schengen days are available on the planned entry date {entry}",
                date=entry,
            )
        )

    suggestions: list[str] = []
    if max_stay > 0:
        safe_exit = entry + timedelta(days=max_stay - 1)
        suggestions.append(f"Shorten the stay to {max_stay} day(s), leaving on {safe_exit}")
    reset = evaluate(history, first_bad).next_reset_date
    if reset is not None:
        suggestions.append(f"Delay entry until {reset}, when the oldest counted days start to expire")

    issues.append(
        ValidationIssue(
            code=IssueCode.OVER_LIMIT,
            severity=Severity.HIGH,
            message=(
                f"The stay exceeds the {MAX_STAY_DAYS}/{WINDOW_DAYS} limit from {first_bad} "
                f"by up to {excess} day(s)"
            ),
            date=first_bad,
            suggestions=suggestions,
        )
    )
    return issues


def _later_stay_issue(
    history: Sequence[DayInterval],
    hypothetical: Sequence[DayInterval],
    exit_: dt.date,
) -> ValidationIssue | None:
    """Flag an already planned later stay that this trip pushes over the limit."""
    lo = exit_ + ONE_DAY
    hi = exit_ + timedelta(days=WINDOW_DAYS)
    before = find_violations(history, lo, hi)
    after = find_violations(hypothetical, lo, hi)
    if sum(v.days for v in after) <= sum(v.days for v in before):
        return None
    first = after[0].start
    return ValidationIssue(
        code=IssueCode.LATER_STAY_AT_RISK,
        severity=Severity.MEDIUM,
        message=f"This trip pushes a later planned stay over the limit from {first}",
        date=first,
        suggestions=["Shorten this trip or move the later stay"],
    )


def validate_future_trip(
    existing_visits: Iterable[VisitInput],
    proposed_entry: dt.date,
    proposed_exit: dt.date,
    proposed_country: str,
    *,
    today: dt.date | None = None,
    membership: SchengenMembership | None = None,
) -> TripValidationResult:
    if proposed_entry > proposed_exit:
        raise InvalidInterval(
            f"planned entry {proposed_entry} is after planned exit {proposed_exit}"
        )

    members = resolve_membership(membership)
    today = today or dt.date.today()
    history = normalize(existing_visits, today, members)

    issues: list[ValidationIssue] = []
    if proposed_entry < today:
        issues.append(
            ValidationIssue(
                code=IssueCode.PAST_ENTRY,
                severity=Severity.LOW,
                message=f"Planned entry {proposed_entry} is before today ({today})",
                date=proposed_entry,
            )
        )

    if not members.contains(proposed_country):
        status = evaluate(history, proposed_exit)
        return TripValidationResult(
            can_travel=True,
            is_schengen=False,
            warnings=[issue.message for issue in issues],
            suggestions=[f"{proposed_country} is not in the Schengen Area; the 90/180 rule does not apply"],
            max_stay_days=None,
            remaining_days_after_trip=status.remaining_days,
            days_used_after_trip=status.used_days,
            issues=issues,
        )

    hypothetical = merge_intervals((*history, DayInterval(start=proposed_entry, end=proposed_exit)))
    violations = find_violations(hypothetical, proposed_entry, proposed_exit)
    max_stay = max_stay_days(history, proposed_entry)
    status = evaluate(hypothetical, proposed_exit)

    suggestions: list[str] = []
    if violations:
        issues.extend(_over_limit_issues(history, proposed_entry, proposed_exit, violations, max_stay))
    else:
        later = _later_stay_issue(history, hypothetical, proposed_exit)
        if later is not None:
            issues.append(later)
        suggestions.append("The planned trip complies with the 90/180 rule")
        suggestions.append(f"{status.remaining_days} day(s) remain after the trip")

    for issue in issues:
        for text in issue.suggestions:
            if text not in suggestions:
                suggestions.append(text)

    return TripValidationResult(
        can_travel=not violations,
        is_schengen=True,
        warnings=[issue.message for issue in issues],
        suggestions=suggestions,
        max_stay_days=max_stay,
        remaining_days_after_trip=status.remaining_days,
        days_used_after_trip=status.used_days,
        issues=issues,
    )


__all__ = [
    "max_stay_days",
    "trip_is_feasible",
    "trip_violations",
    "validate_future_trip",
]
