"""Safe-window search: first compliant stay of a given length within a horizon."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from datetime import timedelta

from schengen_calc.domain.compliance.normalizer import VisitInput, normalize
from schengen_calc.domain.compliance.trip_validator import trip_is_feasible
from schengen_calc.domain.constants import DEFAULT_SEARCH_HORIZON_DAYS, MAX_STAY_DAYS
from schengen_calc.domain.exceptions import InvalidDuration
from schengen_calc.domain.membership import SchengenMembership
from schengen_calc.domain.models import SafeWindow


def find_safe_window(
    existing_visits: Iterable[VisitInput],
    duration_days: int,
    search_start: dt.date | None = None,
    horizon_days: int = DEFAULT_SEARCH_HORIZON_DAYS,
    *,
    today: dt.date | None = None,
    membership: SchengenMembership | None = None,
) -> SafeWindow | None:
    """Scan start dates day by day; ``None`` when the horizon holds no compliant window.

    The check runs against the Area-wide budget, so the destination country
    does not matter.
    """
    if not 1 <= duration_days <= MAX_STAY_DAYS:
        raise InvalidDuration(f"duration_days must be between 1 and {MAX_STAY_DAYS}, got {duration_days}")
    if horizon_days < 1:
        raise InvalidDuration(f"horizon_days must be positive, got {horizon_days}")

    today = today or dt.date.today()
    start = search_start or today
    history = normalize(existing_visits, today, membership)
    span = timedelta(days=duration_days - 1)

    for offset in range(horizon_days):
        candidate = start + timedelta(days=offset)
        if trip_is_feasible(history, candidate, candidate + span):
            return SafeWindow(start_date=candidate, end_date=candidate + span)
    return None


__all__ = ["find_safe_window"]
