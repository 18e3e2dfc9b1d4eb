"""Weather and history fetchers with deterministic offline fallback."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, timedelta

from ..exceptions import FailureKind, WeatherProviderError
from .base import WeatherProvider
from .mock import HISTORY_DAYS, generate_mock_history, generate_mock_weather
from .models import HistoricalDay, HistoryFetchResult, WeatherFetchResult, WeatherSnapshot


class WeatherService:
    """Front door for weather data: live provider first, mock data on any failure.

    Neither fetch method raises. Failures are logged with their kind
    (``geocoding_miss``, ``transport`` or ``malformed``) and reported on the
    returned result as ``fallback_reason``.
    """

    def __init__(
        self,
        provider: WeatherProvider,
        logger: logging.Logger,
        *,
        mock_latency_seconds: float = 0.0,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.provider = provider
        self.logger = logger
        self.mock_latency_seconds = mock_latency_seconds
        self._today = today

    def fetch_current(self, city: str) -> WeatherFetchResult:
        """Return current weather for ``city``, substituting mock data on failure."""
        self.logger.info("Fetching current weather for %s", city)
        try:
            location = self.provider.geocode(city)
            snapshot = self.provider.fetch_current(location)
        except Exception as exc:
            kind = self._log_fallback("current weather", city, exc)
            snapshot = generate_mock_weather(city, latency_seconds=self.mock_latency_seconds)
            return WeatherFetchResult(snapshot=snapshot, source="mock", fallback_reason=kind)
        return WeatherFetchResult(snapshot=snapshot, source="live")

    def fetch_weather(self, city: str) -> WeatherSnapshot:
        return self.fetch_current(city).snapshot

    def fetch_history_result(self, city: str) -> HistoryFetchResult:
        """Return 14 days of history for ``city``, most recent first."""
        self.logger.info("Fetching %d-day history for %s", HISTORY_DAYS, city)
        today = self._today()
        try:
            location = self.provider.geocode(city)
            days = self.provider.fetch_history(
                location,
                start=today - timedelta(days=HISTORY_DAYS - 1),
                end=today,
            )
            if len(days) != HISTORY_DAYS:
                raise WeatherProviderError(
                    f"Expected {HISTORY_DAYS} history days, provider returned {len(days)}."
                )
        except Exception as exc:
            kind = self._log_fallback("history", city, exc)
            return HistoryFetchResult(
                days=generate_mock_history(city, today),
                source="mock",
                fallback_reason=kind,
            )
        return HistoryFetchResult(days=list(reversed(days)), source="live")

    def fetch_history(self, city: str) -> list[HistoricalDay]:
        return self.fetch_history_result(city).days

    def close(self) -> None:
        self.provider.close()

    def _log_fallback(self, what: str, city: str, exc: Exception) -> FailureKind:
        if isinstance(exc, WeatherProviderError):
            self.logger.warning(
                "Live %s unavailable for %s (%s): %s; using mock data",
                what, city, exc.kind, exc,
                extra={"city": city, "kind": exc.kind, "source": "mock"},
            )
            return exc.kind
        self.logger.warning(
            "Live %s for %s failed with %s: %s; using mock data",
            what, city, type(exc).__name__, exc,
            exc_info=True,
            extra={"city": city, "kind": "malformed", "source": "mock"},
        )
        return "malformed"
