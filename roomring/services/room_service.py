"""Settings-bound facade used by the HTTP layer."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Hashable, Iterable, Optional

import pandas as pd

from roomring.domain.models import RingSegment, RoomBusySegment, RoomOccupancyMetrics
from roomring.services.busy_segment_service import BusySegmentOptions, compute_room_busy_segments
from roomring.services.occupancy_service import (
    compute_room_occupancy,
    compute_room_occupancy_segments,
    summarize_floor_occupancy,
)
from roomring.utils.config import Settings, get_settings


class RoomOccupancyService:
    """Binds one ``Settings`` instance to the occupancy computations."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()

    @property
    def settings(self) -> Settings:
        return self._settings

    def occupancy(
        self,
        bookings: Iterable[Any],
        *,
        day: Optional[str] = None,
        window_start: Optional[str] = None,
        window_end: Optional[str] = None,
    ) -> RoomOccupancyMetrics:
        return compute_room_occupancy(
            bookings, day, window_start, window_end, settings=self._settings
        )

    def occupancy_segments(
        self,
        bookings: Iterable[Any],
        *,
        day: Optional[str] = None,
        window_start: Optional[str] = None,
        window_end: Optional[str] = None,
    ) -> list[RingSegment]:
        return compute_room_occupancy_segments(
            bookings, day, window_start, window_end, settings=self._settings
        )

    def busy_segments(
        self,
        bookings: Iterable[Any],
        options: Optional[BusySegmentOptions] = None,
    ) -> list[RoomBusySegment]:
        return compute_room_busy_segments(bookings, options, settings=self._settings)

    def floor_summary(
        self,
        bookings_by_room: Mapping[Hashable, Iterable[Any]],
        *,
        day: Optional[str] = None,
        window_start: Optional[str] = None,
        window_end: Optional[str] = None,
    ) -> pd.DataFrame:
        return summarize_floor_occupancy(
            bookings_by_room, day, window_start, window_end, settings=self._settings
        )
