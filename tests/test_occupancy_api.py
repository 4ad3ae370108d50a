from __future__ import annotations

from dataclasses import replace

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app import create_app
from roomring.controllers.occupancy_controller import router
from roomring.utils.config import get_settings


DAY = "2024-01-01"


def _build_test_client(**overrides) -> TestClient:
    settings = replace(get_settings(), **overrides)
    return TestClient(create_app(settings))


def test_health_reports_version() -> None:
    client = _build_test_client(app_version="9.9.9")
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": "9.9.9"}


def test_room_occupancy_endpoint_returns_metrics() -> None:
    client = _build_test_client()
    response = client.post(
        "/room_occupancy",
        json={
            "day": DAY,
            "window_start": "09:00",
            "window_end": "17:00",
            "bookings": [
                {"date": DAY, "startTime": "09:00", "endTime": "10:00"},
                {"date": DAY, "start_time": "09:30", "end_time": "11:00"},
                {"date": DAY, "startTime": "abc", "endTime": "12:00"},
            ],
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["intervals"] == [{"start_min": 540, "end_min": 660}]
    assert body["free_intervals"] == [{"start_min": 660, "end_min": 1020}]
    assert body["occupied_minutes"] == 120
    assert body["free_minutes"] == 360
    assert body["window_minutes"] == 480
    assert body["occupied_ratio"] == pytest.approx(0.25)


def test_room_occupancy_endpoint_empty_window() -> None:
    client = _build_test_client()
    response = client.post(
        "/room_occupancy",
        json={"day": DAY, "window_start": "10:00", "window_end": "10:00", "bookings": []},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["window_minutes"] == 0
    assert body["segments"] == []
    assert body["free_segments"] == []


def test_room_occupancy_segments_endpoint() -> None:
    client = _build_test_client()
    response = client.post(
        "/room_occupancy/segments",
        json={
            "window_start": "09:00",
            "window_end": "17:00",
            "bookings": [{"startTime": "13:00", "endTime": "17:00"}],
        },
    )
    assert response.status_code == 200
    assert response.json() == {"segments": [{"p0": 0.5, "p1": 1.0}]}


def test_room_busy_segments_endpoint_marks_viewer_bookings() -> None:
    client = _build_test_client()
    response = client.post(
        "/room_busy_segments",
        json={
            "day": DAY,
            "window_start": "00:00",
            "window_end": "02:30",
            "viewer_id": "u-1",
            "bookings": [
                {"date": DAY, "startTime": "00:00", "endTime": "01:40", "ownerId": "u-1"},
                {"date": DAY, "startTime": "00:50", "endTime": "02:30", "owner_id": "u-2"},
            ],
        },
    )

    assert response.status_code == 200
    segments = response.json()["segments"]
    assert [item["tone"] for item in segments] == ["own", "other"]
    assert segments[0]["p1"] == pytest.approx(100 / 150)


def test_room_busy_segments_without_viewer_are_other() -> None:
    client = _build_test_client()
    response = client.post(
        "/room_busy_segments",
        json={
            "window_start": "00:00",
            "window_end": "02:30",
            "bookings": [{"startTime": "00:00", "endTime": "01:00", "ownerId": "u-1"}],
        },
    )
    assert response.status_code == 200
    assert [item["tone"] for item in response.json()["segments"]] == ["other"]


def test_floor_occupancy_endpoint_orders_rooms() -> None:
    client = _build_test_client()
    response = client.post(
        "/floor_occupancy",
        json={
            "day": DAY,
            "window_start": "09:00",
            "window_end": "17:00",
            "rooms": {
                "desk-1": [],
                "desk-2": [{"date": DAY, "startTime": "09:00", "endTime": "17:00"}],
            },
        },
    )
    assert response.status_code == 200
    rows = response.json()["rooms"]
    assert [row["room_id"] for row in rows] == ["desk-2", "desk-1"]
    assert [row["status"] for row in rows] == ["booked", "free"]


def test_invalid_day_format_rejected() -> None:
    client = _build_test_client()
    response = client.post("/room_occupancy", json={"day": "01.01.2024", "bookings": []})
    assert response.status_code == 422


def test_invalid_window_bound_rejected() -> None:
    client = _build_test_client()
    response = client.post("/room_occupancy", json={"window_start": "nine", "bookings": []})
    assert response.status_code == 422


def test_missing_service_returns_503() -> None:
    app = FastAPI()
    app.include_router(router)
    client = TestClient(app)
    response = client.post("/room_occupancy", json={"bookings": []})
    assert response.status_code == 503


def test_busy_segment_tone_schema_lists_both_tones() -> None:
    schema = create_app(get_settings()).openapi()
    tone = schema["components"]["schemas"]["BusySegmentResponse"]["properties"]["tone"]
    assert sorted(tone["enum"]) == ["other", "own"]
