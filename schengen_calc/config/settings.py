"""Engine settings resolved from the environment."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from schengen_calc.domain.constants import (
    DEFAULT_LOW_REMAINING_THRESHOLD,
    DEFAULT_SCHENGEN_MEMBERS,
    DEFAULT_SEARCH_HORIZON_DAYS,
)
from schengen_calc.domain.membership import SchengenMembership


def _is_configured(value: str | None) -> bool:
    return bool(value and value.strip())


def _split_codes(value: str | None) -> list[str]:
    if not _is_configured(value):
        return []
    return [part.strip() for part in str(value).split(",") if part.strip()]


def _int_env(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        val = int(raw)
    except ValueError:
        return default
    return val if val >= minimum else default


def resolve_member_codes() -> frozenset[str]:
    explicit = _split_codes(os.getenv("SCHENGEN_MEMBERS"))
    base = SchengenMembership.from_codes(explicit or DEFAULT_SCHENGEN_MEMBERS)
    extra = _split_codes(os.getenv("SCHENGEN_EXTRA_MEMBERS"))
    if extra:
        base = base.with_members(*extra)
    return base.members


class EngineSettings(BaseModel):
    members: frozenset[str] = Field(default_factory=lambda: frozenset(DEFAULT_SCHENGEN_MEMBERS))
    safe_window_horizon_days: int = Field(default=DEFAULT_SEARCH_HORIZON_DAYS, ge=1)
    low_remaining_threshold: int = Field(default=DEFAULT_LOW_REMAINING_THRESHOLD, ge=0)

    def membership(self) -> SchengenMembership:
        return SchengenMembership.from_codes(self.members)


def resolve_settings() -> EngineSettings:
    return EngineSettings(
        members=resolve_member_codes(),
        safe_window_horizon_days=_int_env(
            "SAFE_WINDOW_HORIZON_DAYS", DEFAULT_SEARCH_HORIZON_DAYS, minimum=1
        ),
        low_remaining_threshold=_int_env(
            "LOW_REMAINING_THRESHOLD", DEFAULT_LOW_REMAINING_THRESHOLD, minimum=0
        ),
    )


__all__ = [
    "EngineSettings",
    "resolve_member_codes",
    "resolve_settings",
]
