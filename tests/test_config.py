from __future__ import annotations

import pytest

from roomring.utils.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_without_environment(monkeypatch) -> None:
    for name in (
        "ROOMRING_BOOKABLE_START",
        "ROOMRING_BOOKABLE_END",
        "ROOMRING_BUSINESS_START_MINUTES",
        "ROOMRING_BUSINESS_END_MINUTES",
        "ROOMRING_SEGMENT_MERGE_TOLERANCE",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()
    assert settings.bookable_start == Settings.bookable_start
    assert settings.business_start_minutes == 420
    assert settings.business_end_minutes == 1140
    assert settings.segment_merge_tolerance == 1e-6


def test_environment_overrides_window(monkeypatch) -> None:
    monkeypatch.setenv("ROOMRING_BUSINESS_START_MINUTES", "480")
    monkeypatch.setenv("ROOMRING_BUSINESS_END_MINUTES", "1020")
    monkeypatch.setenv("ROOMRING_BOOKABLE_END", "23:00")

    settings = get_settings()
    assert settings.business_start_minutes == 480
    assert settings.business_end_minutes == 1020
    assert settings.bookable_end == "23:00"


def test_invalid_environment_fails_fast(monkeypatch) -> None:
    monkeypatch.setenv("ROOMRING_BUSINESS_START_MINUTES", "1200")
    monkeypatch.setenv("ROOMRING_BUSINESS_END_MINUTES", "600")

    with pytest.raises(ValueError):
        get_settings()


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()
