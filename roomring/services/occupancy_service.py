"""Occupied/free metrics for a room's bookable window."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Hashable, Iterable, Optional

import pandas as pd

from roomring.domain.intervals import invert_intervals, merge_intervals, total_minutes
from roomring.domain.models import MinuteInterval, RingSegment, RoomOccupancyMetrics
from roomring.domain.segments import intervals_to_segments
from roomring.services.windowing import booking_interval, resolve_window
from roomring.utils.config import Settings, get_settings
from roomring.utils.logger import get_logger


logger = get_logger(__name__)

FLOOR_SUMMARY_COLUMNS = [
    "room_id",
    "occupied_minutes",
    "free_minutes",
    "window_minutes",
    "occupied_ratio",
    "status",
]


def compute_room_occupancy(
    bookings: Iterable[Any],
    day: Optional[str] = None,
    window_start: Optional[str] = None,
    window_end: Optional[str] = None,
    *,
    settings: Optional[Settings] = None,
) -> RoomOccupancyMetrics:
    """Compute occupied and free structure of the window for one room.

    Bookings that fall on another day, carry unreadable times, have no
    positive length or lie outside the window are dropped silently. A window
    without positive length yields ``RoomOccupancyMetrics.empty()``.
    """
    resolved_settings = settings or get_settings()
    window = resolve_window(window_start, window_end, resolved_settings)
    if window.is_degenerate:
        logger.debug(
            "Degenerate occupancy window start=%r end=%r", window_start, window_end
        )
        return RoomOccupancyMetrics.empty()

    win_start, win_end = window.start_min, window.end_min
    records = list(bookings)
    candidates = [booking_interval(booking, day, window) for booking in records]
    present: list[MinuteInterval] = [item for item in candidates if item is not None]
    if len(present) < len(records):
        logger.debug(
            "Dropped %d of %d bookings outside day=%s window=%d-%d",
            len(records) - len(present),
            len(records),
            day,
            win_start,
            win_end,
        )

    intervals = merge_intervals(present)
    free_intervals = invert_intervals(win_start, win_end, intervals)
    window_minutes = window.window_minutes
    occupied_minutes = total_minutes(intervals)

    return RoomOccupancyMetrics(
        intervals=intervals,
        segments=intervals_to_segments(win_start, win_end, intervals),
        free_intervals=free_intervals,
        free_segments=intervals_to_segments(win_start, win_end, free_intervals),
        occupied_minutes=occupied_minutes,
        free_minutes=max(0, window_minutes - occupied_minutes),
        window_minutes=window_minutes,
        occupied_ratio=min(1.0, max(0.0, occupied_minutes / window_minutes)),
    )


def compute_room_occupancy_segments(
    bookings: Iterable[Any],
    day: Optional[str] = None,
    window_start: Optional[str] = None,
    window_end: Optional[str] = None,
    *,
    settings: Optional[Settings] = None,
) -> list[RingSegment]:
    return compute_room_occupancy(
        bookings,
        day,
        window_start,
        window_end,
        settings=settings,
    ).segments


def compute_floor_occupancy(
    bookings_by_room: Mapping[Hashable, Iterable[Any]],
    day: Optional[str] = None,
    window_start: Optional[str] = None,
    window_end: Optional[str] = None,
    *,
    settings: Optional[Settings] = None,
) -> dict[Hashable, RoomOccupancyMetrics]:
    """Run the occupancy computation once per room over a shared window."""
    resolved_settings = settings or get_settings()
    return {
        room_id: compute_room_occupancy(
            bookings,
            day,
            window_start,
            window_end,
            settings=resolved_settings,
        )
        for room_id, bookings in bookings_by_room.items()
    }


def occupancy_status(metrics: RoomOccupancyMetrics) -> str:
    if metrics.occupied_ratio >= 1.0:
        return "booked"
    if metrics.occupied_ratio > 0.0:
        return "partial"
    return "free"


def summarize_floor_occupancy(
    bookings_by_room: Mapping[Hashable, Iterable[Any]],
    day: Optional[str] = None,
    window_start: Optional[str] = None,
    window_end: Optional[str] = None,
    *,
    settings: Optional[Settings] = None,
) -> pd.DataFrame:
    """Tabulate per-room occupancy, busiest rooms first."""
    metrics_by_room = compute_floor_occupancy(
        bookings_by_room,
        day,
        window_start,
        window_end,
        settings=settings,
    )
    if not metrics_by_room:
        return pd.DataFrame(columns=FLOOR_SUMMARY_COLUMNS)

    frame = pd.DataFrame(
        [
            {
                "room_id": room_id,
                "occupied_minutes": metrics.occupied_minutes,
                "free_minutes": metrics.free_minutes,
                "window_minutes": metrics.window_minutes,
                "occupied_ratio": metrics.occupied_ratio,
                "status": occupancy_status(metrics),
            }
            for room_id, metrics in metrics_by_room.items()
        ],
        columns=FLOOR_SUMMARY_COLUMNS,
    )
    # Room ids may mix types (int and str); ties are broken on their text form.
    return (
        frame.assign(_room_key=frame["room_id"].astype(str))
        .sort_values(
            by=["occupied_ratio", "_room_key"],
            ascending=[False, True],
            kind="mergesort",
        )
        .drop(columns="_room_key")
        .reset_index(drop=True)
    )
