"""Tests for sunrise/sunset clock formatting and rounding."""

from __future__ import annotations

from typing import Any

import pytest

from weather_planner.weather.formatting import format_clock_time, round_half_up


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2024-05-25T05:30", "5:30 AM"),
        ("2024-05-25T00:15", "12:15 AM"),
        ("2024-05-25T13:05", "1:05 PM"),
        ("2024-05-25T12:00", "12:00 PM"),
        ("2024-05-25T23:59", "11:59 PM"),
        ("2024-05-25T11:07:42", "11:07 AM"),
    ],
)
def test_formats_local_iso_time_as_twelve_hour_clock(raw: str, expected: str) -> None:
    assert format_clock_time(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "2024-05-25 05:30",
        "",
        "2024-05-25T",
        "2024-05-25Tab:30",
        "2024-05-25T05:xx",
        "2024-05-25T0530",
        "2024-05-25T25:00",
        None,
        1716615000,
    ],
)
def test_malformed_times_format_as_not_available(raw: Any) -> None:
    assert format_clock_time(raw) == "N/A"


def test_round_half_up_matches_browser_rounding() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(-2.6) == -3
    assert round_half_up(0.49) == 0
