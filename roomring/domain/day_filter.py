"""Calendar-day membership test for booking records."""

from __future__ import annotations

from typing import Any, Optional

from roomring.domain.models import DateTimeValue, read_booking
from roomring.domain.time_parser import local_date_key, resolve_time_value


def belongs_to_day(booking: Any, target_day: Optional[str]) -> bool:
    """Return False only when the booking provably falls on another day.

    An explicit ``date`` field wins. Without one, the start time is consulted;
    bare clock times and unparseable values keep the booking.
    """
    if not target_day:
        return True

    record = read_booking(booking)
    if record.date:
        return record.date[:10] == target_day

    start = resolve_time_value(record.start_time)
    if not isinstance(start, DateTimeValue):
        return True
    return local_date_key(start.value) == target_day
