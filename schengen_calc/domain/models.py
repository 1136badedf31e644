"""Pydantic domain models."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schengen_calc.domain.enums import IssueCode, Severity


class VisitRecord(BaseModel):
    """One stay in one country as supplied by the visit store.

    ``exit_date`` of ``None`` means the stay is ongoing. Order of the two dates
    is checked by the normalizer, not here, so a reversed record surfaces as a
    domain error instead of a schema error.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    country: str = Field(min_length=1)
    entry_date: dt.date = Field(alias="entryDate")
    exit_date: Optional[dt.date] = Field(default=None, alias="exitDate")


class FlaggedTrip(BaseModel):
    """Trip row that already carries its Schengen classification."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    entry_date: dt.date = Field(alias="entryDate")
    exit_date: Optional[dt.date] = Field(default=None, alias="exitDate")
    is_schengen: bool = Field(default=False, alias="isSchengen")


class ComplianceStatus(BaseModel):
    reference_date: dt.date
    used_days: int = 0
    remaining_days: int = 90
    is_compliant: bool = True
    next_reset_date: Optional[dt.date] = None


class ViolationPeriod(BaseModel):
    start: dt.date
    end: dt.date
    peak_used_days: int

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1


class ValidationIssue(BaseModel):
    code: IssueCode
    severity: Severity = Severity.MEDIUM
    message: str = ""
    date: Optional[dt.date] = None
    suggestions: list[str] = Field(default_factory=list)


class TripValidationResult(BaseModel):
    can_travel: bool
    is_schengen: bool = True
    warnings: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    # None means the 90/180 rule does not bound the stay.
    max_stay_days: Optional[int] = None
    remaining_days_after_trip: int = 90
    days_used_after_trip: int = 0
    issues: list[ValidationIssue] = Field(default_factory=list)


class SafeWindow(BaseModel):
    start_date: dt.date
    end_date: dt.date

    @property
    def duration_days(self) -> int:
        return (self.end_date - self.start_date).days + 1


class ComplianceReport(BaseModel):
    status: ComplianceStatus
    warnings: list[ValidationIssue] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    next_allowed_entry: Optional[dt.date] = None
    max_stay_days: int = 0


class ErrorResponse(BaseModel):
    error: bool = True
    code: str = "UNKNOWN"
    message: str = ""
    details: list[str] = Field(default_factory=list)
