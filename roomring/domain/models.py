"""Domain models for booking occupancy and ring segments."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal, Optional, Union


Tone = Literal["own", "other"]

TONE_OWN: Tone = "own"
TONE_OTHER: Tone = "other"


@dataclass(frozen=True)
class MinuteInterval:
    """Half-open range ``[start_min, end_min)`` in minutes since local midnight."""

    start_min: int
    end_min: int

    @property
    def length(self) -> int:
        return self.end_min - self.start_min

    def to_dict(self) -> dict[str, int]:
        return {"start_min": self.start_min, "end_min": self.end_min}


@dataclass(frozen=True)
class RingSegment:
    """Sub-arc of the bookable window as fractions of its length."""

    p0: float
    p1: float

    def to_dict(self) -> dict[str, Any]:
        return {"p0": self.p0, "p1": self.p1}


@dataclass(frozen=True)
class RoomBusySegment(RingSegment):
    tone: Tone

    def to_dict(self) -> dict[str, Any]:
        return {"p0": self.p0, "p1": self.p1, "tone": self.tone}


@dataclass(frozen=True)
class RoomOccupancyMetrics:
    intervals: list[MinuteInterval] = field(default_factory=list)
    segments: list[RingSegment] = field(default_factory=list)
    free_intervals: list[MinuteInterval] = field(default_factory=list)
    free_segments: list[RingSegment] = field(default_factory=list)
    occupied_minutes: int = 0
    free_minutes: int = 0
    window_minutes: int = 0
    occupied_ratio: float = 0.0

    @classmethod
    def empty(cls) -> RoomOccupancyMetrics:
        """Result for a window that is non-finite or has no positive length."""
        return cls()

    def to_dict(self) -> dict[str, Any]:
        return {
            "intervals": [item.to_dict() for item in self.intervals],
            "segments": [item.to_dict() for item in self.segments],
            "free_intervals": [item.to_dict() for item in self.free_intervals],
            "free_segments": [item.to_dict() for item in self.free_segments],
            "occupied_minutes": self.occupied_minutes,
            "free_minutes": self.free_minutes,
            "window_minutes": self.window_minutes,
            "occupied_ratio": self.occupied_ratio,
        }


@dataclass(frozen=True)
class ResolvedWindow:
    """Bookable window in minutes; bounds are None when they failed to parse."""

    start_min: Optional[int]
    end_min: Optional[int]

    @property
    def window_minutes(self) -> int:
        if self.start_min is None or self.end_min is None:
            return 0
        return max(0, self.end_min - self.start_min)

    @property
    def is_degenerate(self) -> bool:
        return self.window_minutes <= 0


@dataclass(frozen=True)
class ClockTime:
    """Bare ``HH:MM`` wall-clock value without a date."""

    minutes: int


@dataclass(frozen=True)
class DateTimeValue:
    """Full date-time already converted to naive local time."""

    value: datetime


TimeValue = Union[ClockTime, DateTimeValue]


@dataclass(frozen=True)
class BookingInput:
    """Read-only booking record as supplied by the caller."""

    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


_FIELD_ALIASES = {
    "date": ("date",),
    "start_time": ("start_time", "startTime"),
    "end_time": ("end_time", "endTime"),
}


def _read_field(booking: Any, name: str) -> Optional[str]:
    for alias in _FIELD_ALIASES[name]:
        if isinstance(booking, Mapping):
            value = booking.get(alias)
        else:
            value = getattr(booking, alias, None)
        if value is not None:
            return value if isinstance(value, str) else str(value)
    return None


def read_booking(booking: Any) -> BookingInput:
    """Project any booking-shaped object onto ``BookingInput`` without mutating it."""
    if isinstance(booking, BookingInput):
        return booking
    return BookingInput(
        date=_read_field(booking, "date"),
        start_time=_read_field(booking, "start_time"),
        end_time=_read_field(booking, "end_time"),
    )
