"""Future-trip validator tests."""

from datetime import date, timedelta

import pytest

from schengen_calc.domain.compliance.normalizer import DayInterval
from schengen_calc.domain.compliance.trip_validator import (
    max_stay_days,
    trip_is_feasible,
    validate_future_trip,
)
from schengen_calc.domain.enums import IssueCode
from schengen_calc.domain.exceptions import InvalidInterval

TODAY = date(2024, 6, 1)


def _day(offset: int) -> date:
    return TODAY + timedelta(days=offset)


def _visit(country: str, start: int, end: int | None) -> dict:
    return {
        "country": country,
        "entry_date": _day(start).isoformat(),
        "exit_date": _day(end).isoformat() if end is not None else None,
    }


def _codes(result) -> list[str]:
    return [issue.code for issue in result.issues]


def test_eighty_five_plus_ten_is_rejected():
    """85 天停留截止今天，明天起再去 10 天 → 不可行，最多 5 天"""
    history = [_visit("FR", -84, 0)]
    result = validate_future_trip(history, _day(1), _day(10), "DE", today=TODAY)

    assert result.can_travel is False
    assert result.max_stay_days == 5
    assert result.days_used_after_trip == 95
    assert result.remaining_days_after_trip == 0
    assert IssueCode.OVER_LIMIT in _codes(result)

    over = next(issue for issue in result.issues if issue.code == IssueCode.OVER_LIMIT)
    assert over.date == _day(6)
    assert "by up to 5 day(s)" in over.message
    assert any(f"leaving on {_day(5)}" in text for text in result.suggestions)
    assert any(f"Delay entry until {_day(96)}" in text for text in result.suggestions)


def test_compliant_trip():
    result = validate_future_trip([], _day(10), _day(19), "Italy", today=TODAY)
    assert result.can_travel is True
    assert result.is_schengen is True
    assert result.max_stay_days == 90
    assert result.days_used_after_trip == 10
    assert result.remaining_days_after_trip == 80
    assert result.warnings == []
    assert "80 day(s) remain after the trip" in result.suggestions


def test_non_schengen_destination():
    history = [_visit("FR", -84, 0)]
    result = validate_future_trip(history, _day(1), _day(10), "United Kingdom", today=TODAY)
    assert result.can_travel is True
    assert result.is_schengen is False
    assert result.max_stay_days is None
    assert result.warnings == []
    # existing stay still counts at the planned exit date
    assert result.remaining_days_after_trip == 5
    assert "not in the Schengen Area" in result.suggestions[0]


def test_unknown_destination_is_treated_as_non_schengen():
    result = validate_future_trip([], _day(1), _day(200), "Atlantis", today=TODAY)
    assert result.can_travel is True
    assert result.max_stay_days is None


def test_reversed_trip_is_rejected():
    with pytest.raises(InvalidInterval):
        validate_future_trip([], _day(10), _day(9), "FR", today=TODAY)


def test_reversed_history_is_rejected():
    with pytest.raises(InvalidInterval):
        validate_future_trip([_visit("FR", -5, -10)], _day(10), _day(12), "FR", today=TODAY)


def test_past_entry_is_a_warning_not_an_error():
    result = validate_future_trip([], _day(-20), _day(-10), "ES", today=TODAY)
    assert result.can_travel is True
    assert _codes(result) == [IssueCode.PAST_ENTRY]
    assert len(result.warnings) == 1


def test_trip_longer_than_ninety_days():
    result = validate_future_trip([], _day(1), _day(100), "PT", today=TODAY)
    assert result.can_travel is False
    assert result.max_stay_days == 90
    codes = _codes(result)
    assert IssueCode.TRIP_TOO_LONG in codes
    assert IssueCode.OVER_LIMIT in codes
    # no history to wait out, so only the shorten suggestion applies
    assert not any("Delay entry" in text for text in result.suggestions)


def test_entry_blocked_when_allowance_is_used_up():
    history = [_visit("NL", -89, 0)]
    result = validate_future_trip(history, _day(1), _day(5), "BE", today=TODAY)
    assert result.can_travel is False
    assert result.max_stay_days == 0
    assert IssueCode.ENTRY_BLOCKED in _codes(result)


def test_later_planned_stay_at_risk():
    history = [_visit("AT", 60, 109)]
    result = validate_future_trip(history, _day(1), _day(45), "HU", today=TODAY)
    assert result.can_travel is True
    assert IssueCode.LATER_STAY_AT_RISK in _codes(result)


def test_ongoing_visit_counts_until_today():
    history = [_visit("FR", -84, None)]
    result = validate_future_trip(history, _day(1), _day(10), "DE", today=TODAY)
    assert result.max_stay_days == 5


def test_custom_membership_applies_to_history_and_destination():
    from schengen_calc.domain.membership import DEFAULT_MEMBERSHIP

    widened = DEFAULT_MEMBERSHIP.with_members("CY")
    history = [_visit("CY", -84, 0)]
    assert validate_future_trip(history, _day(1), _day(10), "CY", today=TODAY).max_stay_days is None
    assert validate_future_trip(
        history, _day(1), _day(10), "CY", today=TODAY, membership=widened
    ).max_stay_days == 5


def test_max_stay_days_with_gap_before_entry():
    history = (DayInterval(_day(-100), _day(-20)),)
    assert max_stay_days(history, _day(1)) == 9
    assert trip_is_feasible(history, _day(1), _day(9))
    assert not trip_is_feasible(history, _day(1), _day(10))
