"""
app.py — FastAPI application factory and startup lifecycle.

This is the ASGI application object imported by uvicorn.
It wires the occupancy service, registers routers, and logs the resolved
window configuration at startup.

Usage (via launcher):
    python main.py

Usage (direct uvicorn):
    uvicorn app:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from roomring.controllers.occupancy_controller import router as occupancy_router
from roomring.services.room_service import RoomOccupancyService
from roomring.utils.config import Settings, get_settings
from roomring.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build and wire the FastAPI application.

    The occupancy service is stored on app.state and resolved per request by
    the controller dependencies.
    """
    resolved_settings = settings or get_settings()
    occupancy_service = RoomOccupancyService(settings=resolved_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Report the effective window before accepting requests."""
        _startup(app)
        yield

    app = FastAPI(
        title=resolved_settings.app_name,
        version=resolved_settings.app_version,
        lifespan=lifespan,
    )

    app.include_router(occupancy_router)

    app.state.occupancy_service = occupancy_service

    return app


def _startup(app: FastAPI) -> None:
    service: RoomOccupancyService = app.state.occupancy_service
    settings = service.settings
    logger.info(
        "Startup: bookable window %s-%s maps to business window %d-%d minutes",
        settings.bookable_start,
        settings.bookable_end,
        settings.business_start_minutes,
        settings.business_end_minutes,
    )
    logger.info("Startup complete — system ready")


# Module-level app object for uvicorn
app = create_app()
