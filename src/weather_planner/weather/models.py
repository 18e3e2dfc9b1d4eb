"""Typed models for normalized weather snapshots and history."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import FailureKind
from .conditions import Condition

DataSource = Literal["live", "mock"]


class GeoLocation(BaseModel):
    """Resolved geocoding match for a city query."""

    model_config = ConfigDict(frozen=True)

    name: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class WeatherSnapshot(BaseModel):
    """Current conditions for one city at fetch time."""

    model_config = ConfigDict(frozen=True)

    city: str
    temperature: int
    feels_like: int
    humidity: int
    wind_speed: int
    pressure: int
    visibility: int
    uv_index: int
    condition: Condition
    sunrise: str
    sunset: str


class HistoricalDay(BaseModel):
    """One day's summary within the 14-day history window."""

    model_config = ConfigDict(frozen=True)

    date: str
    day_of_week: str
    temp_max: int
    temp_min: int
    condition: Condition


class WeatherFetchResult(BaseModel):
    """Snapshot plus where it came from."""

    model_config = ConfigDict(frozen=True)

    snapshot: WeatherSnapshot
    source: DataSource
    fallback_reason: FailureKind | None = None


class HistoryFetchResult(BaseModel):
    """Fourteen history days, most recent first, plus where they came from."""

    model_config = ConfigDict(frozen=True)

    days: list[HistoricalDay]
    source: DataSource
    fallback_reason: FailureKind | None = None
