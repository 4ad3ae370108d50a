"""Tone-aware busy segments for rings that distinguish own and other bookings.

A plain interval merge would lose ownership, so the window is split at every
booking boundary and each covered sub-range is classified on its own. Own
bookings dominate wherever they overlap bookings of other parties.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from roomring.domain.models import TONE_OTHER, TONE_OWN, MinuteInterval, RoomBusySegment, Tone
from roomring.domain.segments import merge_adjacent_segments, to_ring_position
from roomring.services.windowing import booking_interval, resolve_window
from roomring.utils.config import Settings, get_settings
from roomring.utils.logger import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class BusySegmentOptions:
    day: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    is_own_booking: Optional[Callable[[Any], bool]] = None


@dataclass(frozen=True)
class TonedInterval:
    interval: MinuteInterval
    tone: Tone


def _tone_for(booking: Any, options: BusySegmentOptions) -> Tone:
    if options.is_own_booking is not None and options.is_own_booking(booking):
        return TONE_OWN
    return TONE_OTHER


def compute_room_busy_segments(
    bookings: Iterable[Any],
    options: Optional[BusySegmentOptions] = None,
    *,
    settings: Optional[Settings] = None,
) -> list[RoomBusySegment]:
    resolved_settings = settings or get_settings()
    resolved_options = options or BusySegmentOptions()
    window = resolve_window(resolved_options.start, resolved_options.end, resolved_settings)
    if window.is_degenerate:
        logger.debug(
            "Degenerate busy-segment window start=%r end=%r",
            resolved_options.start,
            resolved_options.end,
        )
        return []

    toned: list[TonedInterval] = []
    for booking in bookings:
        interval = booking_interval(booking, resolved_options.day, window)
        if interval is None:
            continue
        toned.append(TonedInterval(interval=interval, tone=_tone_for(booking, resolved_options)))
    if not toned:
        return []

    win_start = window.start_min
    window_minutes = window.window_minutes
    bounds = sorted(
        {item.interval.start_min for item in toned} | {item.interval.end_min for item in toned}
    )

    raw_segments: list[RoomBusySegment] = []
    for sub_start, sub_end in zip(bounds, bounds[1:]):
        covering = [
            item
            for item in toned
            if item.interval.start_min < sub_end and item.interval.end_min > sub_start
        ]
        if not covering:
            continue
        tone = TONE_OWN if any(item.tone == TONE_OWN for item in covering) else TONE_OTHER
        raw_segments.append(
            RoomBusySegment(
                p0=to_ring_position(sub_start, win_start, window_minutes),
                p1=to_ring_position(sub_end, win_start, window_minutes),
                tone=tone,
            )
        )

    return merge_adjacent_segments(raw_segments, resolved_settings.segment_merge_tolerance)
