"""Conversion of booking time strings into minute-of-day values."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

import pandas as pd

from roomring.domain.models import ClockTime, DateTimeValue, TimeValue


MINUTES_PER_DAY = 24 * 60

HHMM_PATTERN = re.compile(r"^\d{2}:\d{2}$")
WINDOW_BOUND_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
# Strings without a leading YYYY-MM-DD date never reach the timestamp parser.
DATE_PREFIX_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}")


def _parse_datetime(value: str) -> Optional[datetime]:
    if DATE_PREFIX_PATTERN.match(value) is None:
        return None
    try:
        timestamp = pd.Timestamp(value)
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(timestamp):
        return None

    parsed = timestamp.to_pydatetime()
    if parsed.tzinfo is not None:
        # Bookings are compared on the local minute scale of the process.
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def resolve_time_value(value: Optional[str]) -> Optional[TimeValue]:
    """Classify a raw time string as a wall-clock time or a full date-time.

    ``HH:MM`` strings become :class:`ClockTime`; anything else is handed to
    pandas' timestamp parser. Returns None for empty or unparseable input.
    """
    if not value:
        return None

    if HHMM_PATTERN.fullmatch(value):
        try:
            hours, minutes = (int(part) for part in value.split(":"))
        except ValueError:
            return None
        return ClockTime(minutes=hours * 60 + minutes)

    parsed = _parse_datetime(value)
    if parsed is None:
        return None
    return DateTimeValue(value=parsed)


def parse_minutes(value: Optional[str]) -> Optional[int]:
    """Return minutes since local midnight, or None when no time can be read."""
    resolved = resolve_time_value(value)
    if resolved is None:
        return None
    if isinstance(resolved, ClockTime):
        return resolved.minutes
    return resolved.value.hour * 60 + resolved.value.minute


def clock_to_minutes(value: Optional[str]) -> Optional[int]:
    """Parse an ``H:MM``/``HH:MM`` window bound; 24:00 marks the end of day."""
    if not value:
        return None
    match = WINDOW_BOUND_PATTERN.fullmatch(value.strip())
    if match is None:
        return None

    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes > 59:
        return None
    total = hours * 60 + minutes
    if total > MINUTES_PER_DAY:
        return None
    return total


def local_date_key(value: datetime) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
