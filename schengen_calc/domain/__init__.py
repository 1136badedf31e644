"""Domain package exports."""

from schengen_calc.domain.constants import (
    DEFAULT_SCHENGEN_MEMBERS,
    DEFAULT_SEARCH_HORIZON_DAYS,
    MAX_STAY_DAYS,
    WINDOW_DAYS,
)
from schengen_calc.domain.enums import IssueCode, Severity
from schengen_calc.domain.exceptions import DomainError, InvalidDuration, InvalidInterval
from schengen_calc.domain.membership import (
    DEFAULT_MEMBERSHIP,
    SchengenMembership,
    is_schengen_member,
    resolve_country_code,
)
from schengen_calc.domain.models import (
    ComplianceReport,
    ComplianceStatus,
    ErrorResponse,
    FlaggedTrip,
    SafeWindow,
    TripValidationResult,
    ValidationIssue,
    ViolationPeriod,
    VisitRecord,
)

__all__ = [
    "ComplianceReport",
    "ComplianceStatus",
    "DomainError",
    "ErrorResponse",
    "FlaggedTrip",
    "InvalidDuration",
    "InvalidInterval",
    "IssueCode",
    "SafeWindow",
    "SchengenMembership",
    "Severity",
    "TripValidationResult",
    "ValidationIssue",
    "ViolationPeriod",
    "VisitRecord",
    "DEFAULT_MEMBERSHIP",
    "DEFAULT_SCHENGEN_MEMBERS",
    "DEFAULT_SEARCH_HORIZON_DAYS",
    "MAX_STAY_DAYS",
    "WINDOW_DAYS",
    "is_schengen_member",
    "resolve_country_code",
]
