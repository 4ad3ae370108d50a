#!/usr/bin/env python3
"""Validate local occupancy ring environment readiness."""

from __future__ import annotations

import importlib
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from roomring.services.busy_segment_service import BusySegmentOptions, compute_room_busy_segments
from roomring.services.occupancy_service import compute_room_occupancy
from roomring.utils.config import get_settings

SEPARATOR_LINE = "=" * 44

SMOKE_BOOKINGS = [
    {"date": "2024-01-01", "startTime": "09:00", "endTime": "10:00", "owner": "me"},
    {"date": "2024-01-01", "startTime": "09:30", "endTime": "11:00", "owner": "team"},
]


def _print_result(name: str, success: bool, detail: str = "") -> tuple[bool, str]:
    if success:
        return True, f"[PASS] {name}{detail}"
    return False, f"[FAIL] {name}: {detail}"


def main() -> int:
    results: list[str] = []
    all_passed = True

    # CHECK 1 — Python version >= 3.11
    if sys.version_info >= (3, 11):
        ok, line = _print_result("Python " + sys.version.split()[0], True)
    else:
        ok, line = _print_result(
            "Python version >= 3.11",
            False,
            f"found {sys.version.split()[0]}",
        )
    results.append(line)
    all_passed = all_passed and ok

    # CHECK 2 — Required packages importable
    package_specs = [
        ("fastapi", "fastapi"),
        ("uvicorn", "uvicorn"),
        ("pydantic", "pydantic"),
        ("pandas", "pandas"),
        ("httpx", "httpx"),
        ("pytest", "pytest"),
    ]
    import_errors: list[str] = []
    for module_name, dist_name in package_specs:
        try:
            importlib.import_module(module_name)
            _ = version(dist_name)
        except (ImportError, PackageNotFoundError) as exc:
            import_errors.append(f"{module_name} ({exc})")
    if import_errors:
        ok, line = _print_result(
            "Required packages",
            False,
            "missing/unimportable -> " + "; ".join(import_errors),
        )
    else:
        ok, line = _print_result("Required packages: all importable", True)
    results.append(line)
    all_passed = all_passed and ok

    # CHECK 3 — Window configuration
    try:
        settings = get_settings()
        ok, line = _print_result(
            "Window configuration",
            True,
            f": {settings.bookable_start}-{settings.bookable_end}",
        )
    except ValueError as exc:
        settings = None
        ok, line = _print_result("Window configuration", False, str(exc))
    results.append(line)
    all_passed = all_passed and ok

    if settings is not None:
        # CHECK 4 — Occupancy smoke computation
        metrics = compute_room_occupancy(
            SMOKE_BOOKINGS,
            day="2024-01-01",
            window_start="09:00",
            window_end="17:00",
            settings=settings,
        )
        detail = f"occupied_ratio={metrics.occupied_ratio:.4f}"
        success = abs(metrics.occupied_ratio - 0.25) < 1e-9
        ok, line = _print_result(
            "Occupancy computation",
            success,
            f": {detail}" if success else detail,
        )
        results.append(line)
        all_passed = all_passed and ok

        # CHECK 5 — Busy segment smoke computation
        segments = compute_room_busy_segments(
            SMOKE_BOOKINGS,
            BusySegmentOptions(
                day="2024-01-01",
                start="09:00",
                end="17:00",
                is_own_booking=lambda booking: booking["owner"] == "me",
            ),
            settings=settings,
        )
        tones = [segment.tone for segment in segments]
        success = tones == ["own", "other"]
        ok, line = _print_result(
            "Busy segment classification",
            success,
            f": tones={tones}" if success else f"tones={tones}",
        )
        results.append(line)
        all_passed = all_passed and ok

    print(SEPARATOR_LINE)
    print(" Occupancy Ring Environment Validation")
    print(SEPARATOR_LINE)
    for line in results:
        print(f" {line}")
    print(SEPARATOR_LINE)
    if all_passed:
        print(" All checks passed. Environment is ready.")
        print(SEPARATOR_LINE)
        return 0
    print(" One or more checks failed.")
    print(SEPARATOR_LINE)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
