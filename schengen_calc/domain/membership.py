"""Schengen Area membership lookup."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from schengen_calc.domain.constants import COUNTRY_NAME_ALIASES, DEFAULT_SCHENGEN_MEMBERS


def resolve_country_code(country: object) -> Optional[str]:
    """Map an ISO alpha-2 code or an English country name to an upper-case code."""
    if not isinstance(country, str):
        return None
    text = " ".join(country.split())
    if not text:
        return None
    if len(text) == 2 and text.isalpha():
        return text.upper()
    return COUNTRY_NAME_ALIASES.get(text.casefold())


def _normalize_codes(codes: Iterable[str]) -> frozenset[str]:
    resolved = set()
    for raw in codes:
        code = resolve_country_code(raw)
        if code is not None:
            resolved.add(code)
    return frozenset(resolved)


@dataclass(frozen=True)
class SchengenMembership:
    """Immutable member set; derive a new one for accessions instead of mutating."""

    members: frozenset[str]

    @classmethod
    def from_codes(cls, codes: Iterable[str]) -> "SchengenMembership":
        return cls(members=_normalize_codes(codes))

    @classmethod
    def default(cls) -> "SchengenMembership":
        return DEFAULT_MEMBERSHIP

    def with_members(self, *codes: str) -> "SchengenMembership":
        return SchengenMembership(members=self.members | _normalize_codes(codes))

    def without_members(self, *codes: str) -> "SchengenMembership":
        return SchengenMembership(members=self.members - _normalize_codes(codes))

    def contains(self, country: object) -> bool:
        code = resolve_country_code(country)
        return code is not None and code in self.members

    def __contains__(self, country: object) -> bool:
        return self.contains(country)

    def __len__(self) -> int:
        return len(self.members)


DEFAULT_MEMBERSHIP = SchengenMembership.from_codes(DEFAULT_SCHENGEN_MEMBERS)


def is_schengen_member(country: object, membership: SchengenMembership | None = None) -> bool:
    """Unknown identifiers are treated as outside the Area rather than rejected."""
    return resolve_membership(membership).contains(country)


def resolve_membership(membership: SchengenMembership | None) -> SchengenMembership:
    # An empty member set is falsy, so compare against None explicitly.
    return DEFAULT_MEMBERSHIP if membership is None else membership


__all__ = [
    "DEFAULT_MEMBERSHIP",
    "SchengenMembership",
    "is_schengen_member",
    "resolve_country_code",
    "resolve_membership",
]
