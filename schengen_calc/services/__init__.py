"""Service layer public exports."""

from schengen_calc.services.compliance_service import (
    compute_report,
    compute_status,
    count_schengen_days,
    find_safe_window,
    find_violations,
    is_schengen_member,
    validate_future_trip,
)

__all__ = [
    "compute_report",
    "compute_status",
    "count_schengen_days",
    "find_safe_window",
    "find_violations",
    "is_schengen_member",
    "validate_future_trip",
]
