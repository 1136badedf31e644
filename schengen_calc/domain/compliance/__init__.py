"""90/180-day compliance engine: normalize -> evaluate -> scan -> validate -> search."""

from schengen_calc.domain.compliance.advisories import build_report, next_allowed_entry, status_warnings
from schengen_calc.domain.compliance.normalizer import (
    DayInterval,
    materialize,
    merge_intervals,
    normalize,
    total_days,
)
from schengen_calc.domain.compliance.safe_window import find_safe_window
from schengen_calc.domain.compliance.trip_validator import (
    max_stay_days,
    trip_is_feasible,
    validate_future_trip,
)
from schengen_calc.domain.compliance.violations import find_violations
from schengen_calc.domain.compliance.window import evaluate, used_days_on, window_start

__all__ = [
    "DayInterval",
    "build_report",
    "evaluate",
    "find_safe_window",
    "find_violations",
    "materialize",
    "max_stay_days",
    "merge_intervals",
    "next_allowed_entry",
    "normalize",
    "status_warnings",
    "total_days",
    "trip_is_feasible",
    "used_days_on",
    "validate_future_trip",
    "window_start",
]
