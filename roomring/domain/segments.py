"""Mapping of minute intervals onto normalized ring positions."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence, TypeVar

from roomring.domain.models import MinuteInterval, RingSegment, RoomBusySegment


DEFAULT_MERGE_TOLERANCE = 1e-6

BusySegmentT = TypeVar("BusySegmentT", bound=RoomBusySegment)


def to_ring_position(minute: int, win_start: int, window_minutes: int) -> float:
    return (minute - win_start) / window_minutes


def intervals_to_segments(
    win_start: int,
    win_end: int,
    intervals: Iterable[MinuteInterval],
) -> list[RingSegment]:
    """Express window-clamped intervals as fractions of the window length.

    The window must have positive length; callers reject degenerate windows
    before mapping.
    """
    window_minutes = win_end - win_start
    return [
        RingSegment(
            p0=to_ring_position(interval.start_min, win_start, window_minutes),
            p1=to_ring_position(interval.end_min, win_start, window_minutes),
        )
        for interval in intervals
    ]


def merge_adjacent_segments(
    segments: Sequence[BusySegmentT],
    tolerance: float = DEFAULT_MERGE_TOLERANCE,
) -> list[BusySegmentT]:
    """Join left-to-right neighbours that share a tone and touch within ``tolerance``."""
    if not segments:
        return []

    merged: list[BusySegmentT] = [segments[0]]
    for segment in segments[1:]:
        previous = merged[-1]
        if segment.tone == previous.tone and abs(segment.p0 - previous.p1) < tolerance:
            merged[-1] = replace(previous, p1=segment.p1)
            continue
        merged.append(segment)
    return merged
