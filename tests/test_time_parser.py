from __future__ import annotations

from datetime import datetime, timezone

from roomring.domain.models import ClockTime, DateTimeValue
from roomring.domain.time_parser import (
    clock_to_minutes,
    local_date_key,
    parse_minutes,
    resolve_time_value,
)


def test_parse_minutes_empty_values_return_none() -> None:
    assert parse_minutes(None) is None
    assert parse_minutes("") is None


def test_parse_minutes_reads_clock_time() -> None:
    assert parse_minutes("00:00") == 0
    assert parse_minutes("09:30") == 570
    assert parse_minutes("23:59") == 1439


def test_parse_minutes_reads_datetime_and_drops_date() -> None:
    assert parse_minutes("2024-01-01T13:45:00") == 13 * 60 + 45
    assert parse_minutes("2024-06-30 07:05") == 7 * 60 + 5


def test_parse_minutes_converts_aware_datetime_to_local_time() -> None:
    local = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc).astimezone()
    assert parse_minutes("2024-01-01T09:00:00+00:00") == local.hour * 60 + local.minute


def test_parse_minutes_unparseable_returns_none() -> None:
    assert parse_minutes("abc") is None
    assert parse_minutes("xyz") is None


def test_resolve_time_value_distinguishes_clock_and_datetime() -> None:
    assert resolve_time_value("08:15") == ClockTime(minutes=495)
    assert resolve_time_value("2024-03-05T08:15:00") == DateTimeValue(
        value=datetime(2024, 3, 5, 8, 15)
    )
    assert resolve_time_value("abc") is None


def test_clock_to_minutes_accepts_window_bounds() -> None:
    assert clock_to_minutes("9:05") == 545
    assert clock_to_minutes("17:00") == 1020
    assert clock_to_minutes("24:00") == 1440


def test_clock_to_minutes_rejects_malformed_bounds() -> None:
    assert clock_to_minutes(None) is None
    assert clock_to_minutes("") is None
    assert clock_to_minutes("10:60") is None
    assert clock_to_minutes("25:00") is None
    assert clock_to_minutes("ten") is None
    assert clock_to_minutes("2024-01-01T10:00") is None


def test_local_date_key_is_zero_padded() -> None:
    assert local_date_key(datetime(2024, 3, 5, 23, 59)) == "2024-03-05"


def test_parse_minutes_ignores_strings_without_a_date() -> None:
    """Relative keywords and date-less clock strings must not pick up today's date."""
    for value in ("now", "today", "9:00", "10:00 AM", "09:00\n"):
        assert parse_minutes(value) is None
        assert resolve_time_value(value) is None


def test_date_only_string_parses_as_midnight() -> None:
    assert parse_minutes("2024-01-01") == 0
