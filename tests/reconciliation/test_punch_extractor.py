import pytest

from src.timeclock.timeclock.reconciliation.punch_extractor import (
    EMPTY_PUNCH,
    PunchTime,
    extract_punch,
    punch_date_token,
)


def test_extracts_time_of_day():
    assert extract_punch("21/07/2025 08:02") == PunchTime(time="08:02", adjusted=False)


def test_zero_pads_and_drops_seconds():
    assert extract_punch("21/07/2025 8:05:59").time == "08:05"


def test_adjustment_marker_is_flagged_and_stripped():
    punch = extract_punch("21/07/2025 12:00*")
    assert punch.time == "12:00"
    assert punch.adjusted is True
    assert punch.display == "12:00*"


@pytest.mark.parametrize("value", ["21/07/2025 25:00", "21/07/2025 12:60", "21/07/2025 abc", "21/07/2025 12:00:61"])
def test_invalid_times_yield_empty(value):
    assert extract_punch(value) == EMPTY_PUNCH


@pytest.mark.parametrize("value", [None, "", "   ", "08:00", "21/07/2025"])
def test_fewer_than_two_tokens_yield_empty(value):
    assert extract_punch(value).is_empty


def test_invalid_time_with_marker_is_empty_not_adjusted():
    punch = extract_punch("21/07/2025 99:99*")
    assert punch.is_empty
    assert punch.adjusted is False


def test_date_token():
    assert punch_date_token(" 21/07/2025 08:02 ") == "21/07/2025"
    assert punch_date_token(None) is None
