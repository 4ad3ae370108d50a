"""HTTP controller layer for room occupancy rings."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import AliasChoices, BaseModel, Field

from roomring.controllers.dependencies import get_occupancy_service
from roomring.domain.models import Tone
from roomring.services.busy_segment_service import BusySegmentOptions
from roomring.services.room_service import RoomOccupancyService
from roomring.utils.logger import get_logger


logger = get_logger(__name__)

router = APIRouter(tags=["occupancy"])

DAY_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
WINDOW_BOUND_PATTERN = r"^\d{1,2}:\d{2}$"


class BookingPayload(BaseModel):
    """Booking snapshot; time fields stay free-form and are filtered downstream."""

    date: str | None = None
    start_time: str | None = Field(
        default=None,
        validation_alias=AliasChoices("start_time", "startTime"),
    )
    end_time: str | None = Field(
        default=None,
        validation_alias=AliasChoices("end_time", "endTime"),
    )
    owner_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("owner_id", "ownerId"),
    )


class WindowRequest(BaseModel):
    day: str | None = Field(default=None, pattern=DAY_PATTERN)
    window_start: str | None = Field(default=None, pattern=WINDOW_BOUND_PATTERN)
    window_end: str | None = Field(default=None, pattern=WINDOW_BOUND_PATTERN)


class RoomOccupancyRequest(WindowRequest):
    bookings: list[BookingPayload] = Field(default_factory=list)


class RoomBusySegmentsRequest(RoomOccupancyRequest):
    viewer_id: str | None = None


class FloorOccupancyRequest(WindowRequest):
    rooms: dict[str, list[BookingPayload]] = Field(default_factory=dict)


class MinuteIntervalResponse(BaseModel):
    start_min: int
    end_min: int


class RingSegmentResponse(BaseModel):
    p0: float = Field(ge=0.0, le=1.0)
    p1: float = Field(ge=0.0, le=1.0)


class BusySegmentResponse(RingSegmentResponse):
    tone: Tone


class RoomOccupancyResponse(BaseModel):
    intervals: list[MinuteIntervalResponse]
    segments: list[RingSegmentResponse]
    free_intervals: list[MinuteIntervalResponse]
    free_segments: list[RingSegmentResponse]
    occupied_minutes: int = Field(ge=0)
    free_minutes: int = Field(ge=0)
    window_minutes: int = Field(ge=0)
    occupied_ratio: float = Field(ge=0.0, le=1.0)


class RoomSegmentsResponse(BaseModel):
    segments: list[RingSegmentResponse]


class RoomBusySegmentsResponse(BaseModel):
    segments: list[BusySegmentResponse]


class FloorOccupancyRowResponse(BaseModel):
    room_id: str
    occupied_minutes: int = Field(ge=0)
    free_minutes: int = Field(ge=0)
    window_minutes: int = Field(ge=0)
    occupied_ratio: float = Field(ge=0.0, le=1.0)
    status: str


class FloorOccupancyResponse(BaseModel):
    rooms: list[FloorOccupancyRowResponse]


class HealthResponse(BaseModel):
    status: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health(
    service: RoomOccupancyService = Depends(get_occupancy_service),
) -> HealthResponse:
    return HealthResponse(status="ok", version=service.settings.app_version)


@router.post(
    "/room_occupancy",
    response_model=RoomOccupancyResponse,
    status_code=status.HTTP_200_OK,
)
async def room_occupancy(
    payload: RoomOccupancyRequest,
    service: RoomOccupancyService = Depends(get_occupancy_service),
) -> RoomOccupancyResponse:
    """Occupied and free structure of one room's window."""
    try:
        metrics = service.occupancy(
            payload.bookings,
            day=payload.day,
            window_start=payload.window_start,
            window_end=payload.window_end,
        )
        return RoomOccupancyResponse(**metrics.to_dict())
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected occupancy failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compute room occupancy",
        ) from exc


@router.post(
    "/room_occupancy/segments",
    response_model=RoomSegmentsResponse,
    status_code=status.HTTP_200_OK,
)
async def room_occupancy_segments(
    payload: RoomOccupancyRequest,
    service: RoomOccupancyService = Depends(get_occupancy_service),
) -> RoomSegmentsResponse:
    try:
        segments = service.occupancy_segments(
            payload.bookings,
            day=payload.day,
            window_start=payload.window_start,
            window_end=payload.window_end,
        )
        return RoomSegmentsResponse(
            segments=[RingSegmentResponse(**segment.to_dict()) for segment in segments]
        )
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected occupancy segment failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compute occupancy segments",
        ) from exc


@router.post(
    "/room_busy_segments",
    response_model=RoomBusySegmentsResponse,
    status_code=status.HTTP_200_OK,
)
async def room_busy_segments(
    payload: RoomBusySegmentsRequest,
    service: RoomOccupancyService = Depends(get_occupancy_service),
) -> RoomBusySegmentsResponse:
    """Busy arcs split into the viewer's own bookings and everyone else's."""
    viewer_id = payload.viewer_id

    def is_own_booking(booking: BookingPayload) -> bool:
        return viewer_id is not None and booking.owner_id == viewer_id

    try:
        segments = service.busy_segments(
            payload.bookings,
            BusySegmentOptions(
                day=payload.day,
                start=payload.window_start,
                end=payload.window_end,
                is_own_booking=is_own_booking,
            ),
        )
        return RoomBusySegmentsResponse(
            segments=[BusySegmentResponse(**segment.to_dict()) for segment in segments]
        )
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected busy segment failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compute busy segments",
        ) from exc


@router.post(
    "/floor_occupancy",
    response_model=FloorOccupancyResponse,
    status_code=status.HTTP_200_OK,
)
async def floor_occupancy(
    payload: FloorOccupancyRequest,
    service: RoomOccupancyService = Depends(get_occupancy_service),
) -> FloorOccupancyResponse:
    """Per-room occupancy summary for a floorplan, busiest rooms first."""
    try:
        frame = service.floor_summary(
            payload.rooms,
            day=payload.day,
            window_start=payload.window_start,
            window_end=payload.window_end,
        )
        return FloorOccupancyResponse(
            rooms=[
                FloorOccupancyRowResponse(
                    room_id=str(row.room_id),
                    occupied_minutes=int(row.occupied_minutes),
                    free_minutes=int(row.free_minutes),
                    window_minutes=int(row.window_minutes),
                    occupied_ratio=float(row.occupied_ratio),
                    status=str(row.status),
                )
                for row in frame.itertuples(index=False)
            ]
        )
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected floor occupancy failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compute floor occupancy",
        ) from exc
