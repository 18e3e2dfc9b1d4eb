"""Tests for the assistant seed prompt."""

from __future__ import annotations

import pytest

from weather_planner.assistant.prompts import (
    OFF_TOPIC_REFUSAL,
    SYSTEM_INSTRUCTION,
    build_initial_prompt,
    is_known_landlocked,
)
from weather_planner.weather.mock import generate_mock_weather
from weather_planner.weather.models import WeatherSnapshot


def _snapshot(city: str) -> WeatherSnapshot:
    return WeatherSnapshot(
        city=city,
        temperature=27,
        feels_like=29,
        humidity=70,
        wind_speed=32,
        pressure=1013,
        visibility=16,
        uv_index=9,
        condition="Partly cloudy",
        sunrise="6:14 AM",
        sunset="7:02 PM",
    )


def test_prompt_embeds_every_weather_field() -> None:
    prompt = build_initial_prompt(_snapshot("Honolulu"))

    assert "weather data for Honolulu" in prompt
    for line in (
        "- Temperature: 27°C",
        "- Feels Like: 29°C",
        "- Condition: Partly cloudy",
        "- Humidity: 70%",
        "- Wind Speed: 32 km/h",
        "- Pressure: 1013 hPa",
        "- Visibility: 16 km",
        "- Sunrise: 6:14 AM",
        "- Sunset: 7:02 PM",
        "- UV Index: 9",
    ):
        assert line in prompt


def test_coastal_city_prompt_includes_surfing_point() -> None:
    prompt = build_initial_prompt(_snapshot("Honolulu"))

    assert "4. If the city is known to be coastal" in prompt
    assert ">25 km/h" in prompt
    assert "surfing" in prompt


@pytest.mark.parametrize("city", ["Denver", "paris", "  Salt Lake City "])
def test_landlocked_city_prompt_omits_surfing_point(city: str) -> None:
    prompt = build_initial_prompt(_snapshot(city))

    assert "surfing" not in prompt
    assert "3. Recommend a couple of suitable outdoor or indoor activities." in prompt
    assert "4." not in prompt


def test_landlocked_lookup_is_case_insensitive() -> None:
    assert is_known_landlocked("DENVER")
    assert not is_known_landlocked("Sydney")


def test_prompt_works_for_mock_snapshot() -> None:
    prompt = build_initial_prompt(generate_mock_weather("honolulu"))

    assert "- Condition: Thunderstorm" in prompt
    assert "- Sunrise: 06:14 AM" in prompt


def test_system_instruction_carries_exact_refusal_phrase() -> None:
    assert f"'{OFF_TOPIC_REFUSAL}'" in SYSTEM_INSTRUCTION
    assert OFF_TOPIC_REFUSAL == "Sorry, I am just a weather Assistant powered by Google"
