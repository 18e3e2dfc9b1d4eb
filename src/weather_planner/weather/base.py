"""Provider-agnostic weather interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from .models import GeoLocation, HistoricalDay, WeatherSnapshot


class WeatherProvider(ABC):
    """Base contract for live weather sources used by the weather service."""

    @abstractmethod
    def geocode(self, city: str) -> GeoLocation:
        """Resolve a city name to coordinates."""

    @abstractmethod
    def fetch_current(self, location: GeoLocation) -> WeatherSnapshot:
        """Fetch and normalize current conditions at a location."""

    @abstractmethod
    def fetch_history(self, location: GeoLocation, *, start: date, end: date) -> list[HistoricalDay]:
        """Fetch daily summaries for an inclusive date window, oldest first."""

    @abstractmethod
    def close(self) -> None:
        """Release provider resources."""
