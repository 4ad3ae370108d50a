"""Window resolution and per-booking interval extraction shared by services."""

from __future__ import annotations

from typing import Any, Optional

from roomring.domain.day_filter import belongs_to_day
from roomring.domain.intervals import clamp_interval
from roomring.domain.models import MinuteInterval, ResolvedWindow, read_booking
from roomring.domain.time_parser import clock_to_minutes, parse_minutes
from roomring.utils.config import Settings


def resolve_window(
    window_start: Optional[str],
    window_end: Optional[str],
    settings: Settings,
) -> ResolvedWindow:
    """Turn caller window bounds into minutes.

    A missing bound falls back to the configured bookable default. When both
    effective bounds equal the bookable defaults exactly, the business-day
    window is used instead of parsing them.
    """
    start = settings.bookable_start if window_start is None else window_start
    end = settings.bookable_end if window_end is None else window_end

    if start == settings.bookable_start and end == settings.bookable_end:
        return ResolvedWindow(
            start_min=settings.business_start_minutes,
            end_min=settings.business_end_minutes,
        )
    return ResolvedWindow(start_min=clock_to_minutes(start), end_min=clock_to_minutes(end))


def booking_interval(
    booking: Any,
    day: Optional[str],
    window: ResolvedWindow,
) -> Optional[MinuteInterval]:
    """Window-clamped interval of one booking, or None if it contributes nothing."""
    if window.start_min is None or window.end_min is None:
        return None
    if not belongs_to_day(booking, day):
        return None

    record = read_booking(booking)
    start_min = parse_minutes(record.start_time)
    end_min = parse_minutes(record.end_time)
    if start_min is None or end_min is None or end_min <= start_min:
        return None

    return clamp_interval(
        MinuteInterval(start_min=start_min, end_min=end_min),
        window.start_min,
        window.end_min,
    )
