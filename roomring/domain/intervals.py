"""Interval algebra over half-open minute ranges."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from roomring.domain.models import MinuteInterval


def clamp_interval(
    interval: MinuteInterval,
    win_start: int,
    win_end: int,
) -> Optional[MinuteInterval]:
    """Intersect ``interval`` with the window; None when nothing remains."""
    start_min = max(interval.start_min, win_start)
    end_min = min(interval.end_min, win_end)
    if end_min <= start_min:
        return None
    return MinuteInterval(start_min=start_min, end_min=end_min)


def merge_intervals(intervals: Iterable[MinuteInterval]) -> list[MinuteInterval]:
    """Collapse overlapping or touching intervals into a start-ordered list."""
    ordered = sorted(intervals, key=lambda item: (item.start_min, item.end_min))
    if not ordered:
        return []

    merged: list[MinuteInterval] = [ordered[0]]
    for interval in ordered[1:]:
        previous = merged[-1]
        if interval.start_min <= previous.end_min:
            merged[-1] = MinuteInterval(
                start_min=previous.start_min,
                end_min=max(previous.end_min, interval.end_min),
            )
            continue
        merged.append(interval)
    return merged


def invert_intervals(
    win_start: int,
    win_end: int,
    intervals: Sequence[MinuteInterval],
) -> list[MinuteInterval]:
    """Return the free gaps of the window.

    ``intervals`` must already be merged and sorted (see ``merge_intervals``).
    """
    free: list[MinuteInterval] = []
    cursor = win_start
    for interval in intervals:
        if interval.start_min > cursor:
            free.append(MinuteInterval(start_min=cursor, end_min=interval.start_min))
        cursor = max(cursor, interval.end_min)
    if win_end > cursor:
        free.append(MinuteInterval(start_min=cursor, end_min=win_end))
    return free


def total_minutes(intervals: Iterable[MinuteInterval]) -> int:
    return sum(interval.length for interval in intervals)
