"""API request/response models."""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, Field

from schengen_calc.domain.models import SafeWindow, ViolationPeriod, VisitRecord


class StatusRequest(BaseModel):
    visits: list[VisitRecord] = Field(default_factory=list, description="Visit history")
    reference_date: Optional[dt.date] = Field(default=None, description="Defaults to today")


class ViolationsRequest(BaseModel):
    visits: list[VisitRecord] = Field(default_factory=list, description="Visit history")
    from_date: Optional[dt.date] = Field(default=None, description="Defaults to the first stay")
    to_date: Optional[dt.date] = Field(default=None, description="Defaults to today or the last exit")
    today: Optional[dt.date] = Field(default=None, description="End date for ongoing stays")


class TripValidationRequest(BaseModel):
    visits: list[VisitRecord] = Field(default_factory=list, description="Visit history")
    entry_date: dt.date = Field(description="Planned entry date")
    exit_date: dt.date = Field(description="Planned exit date")
    country: str = Field(min_length=1, max_length=64, description="Destination code or name")
    today: Optional[dt.date] = None


class SafeWindowRequest(BaseModel):
    visits: list[VisitRecord] = Field(default_factory=list, description="Visit history")
    # Range is checked by the engine so out-of-range values surface as domain errors.
    duration_days: int = Field(description="Requested stay length, 1-90")
    search_start: Optional[dt.date] = None
    horizon_days: Optional[int] = None
    today: Optional[dt.date] = None


class ViolationsResponse(BaseModel):
    violations: list[ViolationPeriod] = Field(default_factory=list)


class SafeWindowResponse(BaseModel):
    found: bool = False
    window: Optional[SafeWindow] = None


class MemberResponse(BaseModel):
    country: str
    code: Optional[str] = None
    is_member: bool = False


class HealthResponse(BaseModel):
    status: str = "ok"


class MetricsResponse(BaseModel):
    total_calls: int = 0
    operations: dict[str, Any] = Field(default_factory=dict)
