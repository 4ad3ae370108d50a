"""Domain-level validation rules for the bookable window configuration."""

from __future__ import annotations

from dataclasses import dataclass

from roomring.domain.time_parser import MINUTES_PER_DAY, clock_to_minutes


@dataclass(frozen=True)
class WindowConfig:
    bookable_start: str
    bookable_end: str
    business_start_minutes: int
    business_end_minutes: int
    segment_merge_tolerance: float


def validate_window_config(config: WindowConfig) -> None:
    bookable_start = clock_to_minutes(config.bookable_start)
    bookable_end = clock_to_minutes(config.bookable_end)
    if bookable_start is None or bookable_end is None:
        raise ValueError("bookable_start and bookable_end must follow HH:MM format")
    if bookable_start >= bookable_end:
        raise ValueError("bookable_start must be earlier than bookable_end")
    if not 0 <= config.business_start_minutes <= MINUTES_PER_DAY:
        raise ValueError("business_start_minutes must be between 0 and 1440")
    if not 0 <= config.business_end_minutes <= MINUTES_PER_DAY:
        raise ValueError("business_end_minutes must be between 0 and 1440")
    if config.business_start_minutes >= config.business_end_minutes:
        raise ValueError("business_start_minutes must be less than business_end_minutes")
    if config.segment_merge_tolerance <= 0.0:
        raise ValueError("segment_merge_tolerance must be > 0")
