"""Deterministic offline weather used when live data is unavailable."""

from __future__ import annotations

import time
from datetime import date, timedelta

from .conditions import MOCK_CONDITIONS
from .models import HistoricalDay, WeatherSnapshot

HISTORY_DAYS = 14
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def city_seed(city: str) -> int:
    """Sum of the code points of the lowercased city name."""
    return sum(ord(ch) for ch in city.lower())


def weekday_name(day: date) -> str:
    return WEEKDAY_NAMES[day.weekday()]


def generate_mock_weather(city: str, latency_seconds: float = 0.0) -> WeatherSnapshot:
    """Build a synthetic snapshot from the city seed.

    The numbers depend only on the lowercased name, so "Paris" and "PARIS"
    produce the same weather. ``latency_seconds`` imitates a network round
    trip so the UI behaves the same with live and offline data.
    """
    if latency_seconds > 0:
        time.sleep(latency_seconds)

    seed = city_seed(city)
    temperature = seed % 35 - 5
    minutes = 10 + seed % 49
    return WeatherSnapshot(
        city=city[:1].upper() + city[1:],
        temperature=temperature,
        feels_like=temperature + seed % 5 - 2,
        humidity=40 + seed % 50,
        wind_speed=5 + seed % 25,
        pressure=990 + seed % 40,
        visibility=5 + seed % 15,
        uv_index=1 + seed % 10,
        condition=MOCK_CONDITIONS[seed % 6],
        sunrise=f"0{5 + seed % 3}:{minutes} AM",
        sunset=f"0{6 + seed % 3}:{minutes} PM",
    )


def generate_mock_history(city: str, today: date) -> list[HistoricalDay]:
    """Build 14 synthetic days walking backward from ``today``."""
    seed = city_seed(city)
    history: list[HistoricalDay] = []
    for offset in range(HISTORY_DAYS):
        day = today - timedelta(days=offset)
        day_seed = seed + offset
        history.append(
            HistoricalDay(
                date=day.isoformat(),
                day_of_week=weekday_name(day),
                temp_max=seed % 15 + 10 + day_seed % 5 - 2,
                temp_min=seed % 10 + day_seed % 5 - 2,
                condition=MOCK_CONDITIONS[day_seed % 6],
            )
        )
    return history
