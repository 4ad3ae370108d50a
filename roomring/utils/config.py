"""Runtime configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from roomring.domain.constraints import WindowConfig, validate_window_config


@dataclass(frozen=True)
class Settings:
    app_name: str = "Room Occupancy Ring"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    # Default bookable window shown on the ring. Passing exactly these bounds
    # selects the business-day window below.
    bookable_start: str = "06:00"
    bookable_end: str = "22:00"
    business_start_minutes: int = 7 * 60
    business_end_minutes: int = 19 * 60
    segment_merge_tolerance: float = 1e-6

    @property
    def window_config(self) -> WindowConfig:
        return WindowConfig(
            bookable_start=self.bookable_start,
            bookable_end=self.bookable_end,
            business_start_minutes=self.business_start_minutes,
            business_end_minutes=self.business_end_minutes,
            segment_merge_tolerance=self.segment_merge_tolerance,
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings once per process and validate the window configuration."""
    defaults = Settings()
    settings = Settings(
        app_name=os.getenv("ROOMRING_APP_NAME", defaults.app_name),
        app_version=os.getenv("ROOMRING_APP_VERSION", defaults.app_version),
        log_level=os.getenv("ROOMRING_LOG_LEVEL", defaults.log_level),
        bookable_start=os.getenv("ROOMRING_BOOKABLE_START", defaults.bookable_start),
        bookable_end=os.getenv("ROOMRING_BOOKABLE_END", defaults.bookable_end),
        business_start_minutes=_env_int(
            "ROOMRING_BUSINESS_START_MINUTES", defaults.business_start_minutes
        ),
        business_end_minutes=_env_int(
            "ROOMRING_BUSINESS_END_MINUTES", defaults.business_end_minutes
        ),
        segment_merge_tolerance=_env_float(
            "ROOMRING_SEGMENT_MERGE_TOLERANCE", defaults.segment_merge_tolerance
        ),
    )
    validate_window_config(settings.window_config)
    return settings
