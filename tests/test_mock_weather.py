"""Tests for deterministic offline weather generation."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from weather_planner.weather.mock import (
    HISTORY_DAYS,
    city_seed,
    generate_mock_history,
    generate_mock_weather,
)

CITIES = ["Honolulu", "paris", "São Paulo", "x", "New York City", "Reykjavík", "東京"]


def test_city_seed_is_case_insensitive_sum_of_code_points() -> None:
    assert city_seed("Honolulu") == 886
    assert city_seed("HONOLULU") == city_seed("honolulu")
    assert city_seed("") == 0


def test_honolulu_snapshot_matches_formula() -> None:
    snapshot = generate_mock_weather("Honolulu")

    assert snapshot.city == "Honolulu"
    assert snapshot.temperature == 6
    assert snapshot.feels_like == 5
    assert snapshot.humidity == 76
    assert snapshot.wind_speed == 16
    assert snapshot.pressure == 996
    assert snapshot.visibility == 6
    assert snapshot.uv_index == 7
    assert snapshot.condition == "Thunderstorm"
    assert snapshot.sunrise == "06:14 AM"
    assert snapshot.sunset == "07:14 PM"


def test_lowercase_input_is_capitalized_for_display() -> None:
    assert generate_mock_weather("honolulu").city == "Honolulu"
    assert generate_mock_weather("").city == ""


@pytest.mark.parametrize("city", CITIES)
def test_mock_weather_is_deterministic_and_case_insensitive(city: str) -> None:
    first = generate_mock_weather(city)
    second = generate_mock_weather(city)
    shouted = generate_mock_weather(city.upper())

    assert first == second
    assert first.model_dump(exclude={"city"}) == shouted.model_dump(exclude={"city"})


@pytest.mark.parametrize("city", CITIES)
def test_mock_weather_values_stay_in_range(city: str) -> None:
    snapshot = generate_mock_weather(city)

    assert -5 <= snapshot.temperature <= 29
    assert snapshot.condition in {
        "Clear",
        "Partly cloudy",
        "Cloudy",
        "Rainy",
        "Snowy",
        "Thunderstorm",
    }
    assert 40 <= snapshot.humidity <= 89
    assert 990 <= snapshot.pressure <= 1029


def test_mock_weather_sleeps_for_configured_latency(monkeypatch: pytest.MonkeyPatch) -> None:
    delays: list[float] = []
    monkeypatch.setattr("weather_planner.weather.mock.time.sleep", delays.append)

    generate_mock_weather("Honolulu", latency_seconds=0.5)
    generate_mock_weather("Honolulu")

    assert delays == [0.5]


def test_mock_history_walks_backward_from_today() -> None:
    today = date(2026, 10, 18)
    history = generate_mock_history("Honolulu", today)

    assert len(history) == HISTORY_DAYS == 14
    assert [day.date for day in history] == [
        (today - timedelta(days=offset)).isoformat() for offset in range(14)
    ]
    assert history[0].day_of_week == "Sunday"
    assert history[1].day_of_week == "Saturday"


def test_mock_history_values_follow_day_seed() -> None:
    history = generate_mock_history("Honolulu", date(2026, 10, 18))

    assert (history[0].temp_max, history[0].temp_min, history[0].condition) == (
        10,
        5,
        "Thunderstorm",
    )
    assert (history[1].temp_max, history[1].temp_min, history[1].condition) == (
        11,
        6,
        "Snowy",
    )


def test_mock_history_is_deterministic() -> None:
    today = date(2026, 1, 1)
    assert generate_mock_history("Lima", today) == generate_mock_history("LIMA", today)
