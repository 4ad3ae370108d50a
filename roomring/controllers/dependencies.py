"""Shared FastAPI dependency providers for controller layer."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from roomring.services.room_service import RoomOccupancyService


def get_occupancy_service(request: Request) -> RoomOccupancyService:
    service = getattr(request.app.state, "occupancy_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Occupancy service is not initialized",
        )
    return service
