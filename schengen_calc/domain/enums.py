"""Domain enums."""

from enum import Enum


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class IssueCode(str, Enum):
    PAST_ENTRY = "PAST_ENTRY"
    OVER_LIMIT = "OVER_LIMIT"
    ENTRY_BLOCKED = "ENTRY_BLOCKED"
    TRIP_TOO_LONG = "TRIP_TOO_LONG"
    LATER_STAY_AT_RISK = "LATER_STAY_AT_RISK"
    LOW_REMAINING = "LOW_REMAINING"
    LIMIT_REACHED = "LIMIT_REACHED"
