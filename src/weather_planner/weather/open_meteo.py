"""Open-Meteo (open-meteo.com) weather provider implementation."""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any

import httpx

from ..config import Settings
from ..exceptions import WeatherProviderError
from ..redaction import sanitize_text
from .base import WeatherProvider
from .conditions import Condition, map_weather_code
from .formatting import format_clock_time, round_half_up
from .mock import weekday_name
from .models import GeoLocation, HistoricalDay, WeatherSnapshot

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "pressure_msl",
    "weather_code",
    "wind_speed_10m",
    "visibility",
)
DAILY_FIELDS = ("sunrise", "sunset", "uv_index_max")
ARCHIVE_FIELDS = ("weather_code", "temperature_2m_max", "temperature_2m_min")


class OpenMeteoWeatherProvider(WeatherProvider):
    """Fetches geocoding, current conditions and daily archives from Open-Meteo."""

    provider_name = "open-meteo"

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger,
        client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger
        self._client = client or httpx.Client(
            timeout=settings.weather_timeout_seconds,
            headers={
                "Accept": "application/json",
                "User-Agent": settings.weather_user_agent,
            },
        )

    def __enter__(self) -> OpenMeteoWeatherProvider:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def geocode(self, city: str) -> GeoLocation:
        """Resolve ``city`` to its best geocoding match."""
        payload = self._request_json(
            str(self.settings.geocoding_url),
            params={"name": city, "count": 1, "language": "en", "format": "json"},
            context="geocoding lookup",
        )
        results = payload.get("results")
        if not isinstance(results, list) or not results:
            raise WeatherProviderError(f'City "{city}" not found.', kind="geocoding_miss")

        match = results[0]
        if not isinstance(match, dict):
            raise WeatherProviderError("Geocoding result is not an object.")
        latitude = self._require_number(match.get("latitude"), "results[0].latitude")
        longitude = self._require_number(match.get("longitude"), "results[0].longitude")
        name = match.get("name")
        if not isinstance(name, str) or not name.strip():
            raise WeatherProviderError("Geocoding result missing 'name'.")
        if not (-90 <= latitude <= 90) or not (-180 <= longitude <= 180):
            raise WeatherProviderError(
                f"Geocoding returned out-of-range coordinates ({latitude}, {longitude})."
            )
        return GeoLocation(name=name.strip(), latitude=latitude, longitude=longitude)

    def fetch_current(self, location: GeoLocation) -> WeatherSnapshot:
        """Fetch current conditions plus today's sunrise, sunset and UV maximum."""
        payload = self._request_json(
            str(self.settings.forecast_url),
            params={
                "latitude": location.latitude,
                "longitude": location.longitude,
                "current": ",".join(CURRENT_FIELDS),
                "daily": ",".join(DAILY_FIELDS),
                "timezone": "auto",
            },
            context="current conditions",
        )
        return self._normalize_current(payload, city=location.name)

    def fetch_history(self, location: GeoLocation, *, start: date, end: date) -> list[HistoricalDay]:
        """Fetch daily archive summaries for ``start``..``end`` (inclusive), oldest first."""
        if start > end:
            raise WeatherProviderError(
                f"Invalid history window: {start.isoformat()} is after {end.isoformat()}."
            )
        payload = self._request_json(
            str(self.settings.archive_url),
            params={
                "latitude": location.latitude,
                "longitude": location.longitude,
                "start_date": start.isoformat(),
                "end_date": end.isoformat(),
                "daily": ",".join(ARCHIVE_FIELDS),
                "timezone": "auto",
            },
            context="archive lookup",
        )
        return self._normalize_history(payload)

    def _request_json(self, url: str, params: dict[str, Any], context: str) -> dict[str, Any]:
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise WeatherProviderError(
                f"Open-Meteo {context} failed with status {status} "
                f"at {url}: {sanitize_text(exc.response.text[:300])}",
                kind="transport",
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            raise WeatherProviderError(
                f"Open-Meteo {context} request failed at {url}: "
                f"{type(exc).__name__}: {sanitize_text(str(exc))}",
                kind="transport",
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise WeatherProviderError(
                f"Open-Meteo {context} returned non-JSON response at {url}."
            ) from exc

        if not isinstance(payload, dict):
            raise WeatherProviderError(
                f"Open-Meteo {context} returned unexpected payload type "
                f"{type(payload).__name__} at {url}."
            )
        return payload

    def _normalize_current(self, payload: dict[str, Any], *, city: str) -> WeatherSnapshot:
        current = payload.get("current")
        if not isinstance(current, dict):
            raise WeatherProviderError("Open-Meteo forecast payload missing 'current' object.")
        daily = payload.get("daily")
        if not isinstance(daily, dict):
            raise WeatherProviderError("Open-Meteo forecast payload missing 'daily' object.")

        visibility_m = self._require_number(current.get("visibility"), "current.visibility")
        return WeatherSnapshot(
            city=city,
            temperature=self._rounded(current.get("temperature_2m"), "current.temperature_2m"),
            feels_like=self._rounded(
                current.get("apparent_temperature"), "current.apparent_temperature"
            ),
            humidity=self._rounded(
                current.get("relative_humidity_2m"), "current.relative_humidity_2m"
            ),
            wind_speed=self._rounded(current.get("wind_speed_10m"), "current.wind_speed_10m"),
            pressure=self._rounded(current.get("pressure_msl"), "current.pressure_msl"),
            visibility=round_half_up(visibility_m / 1000),
            uv_index=self._rounded(self._first(daily, "uv_index_max"), "daily.uv_index_max[0]"),
            condition=map_weather_code(
                self._require_code(current.get("weather_code"), "current.weather_code")
            ),
            sunrise=format_clock_time(self._first(daily, "sunrise")),
            sunset=format_clock_time(self._first(daily, "sunset")),
        )

    def _normalize_history(self, payload: dict[str, Any]) -> list[HistoricalDay]:
        daily = payload.get("daily")
        if not isinstance(daily, dict):
            raise WeatherProviderError("Open-Meteo archive payload missing 'daily' object.")

        columns: dict[str, list[Any]] = {}
        for key in ("time", *ARCHIVE_FIELDS):
            values = daily.get(key)
            if not isinstance(values, list):
                raise WeatherProviderError(f"Open-Meteo archive payload missing 'daily.{key}' list.")
            columns[key] = values

        lengths = {len(values) for values in columns.values()}
        if len(lengths) != 1:
            raise WeatherProviderError("Open-Meteo archive daily arrays have mismatched lengths.")

        days: list[HistoricalDay] = []
        for index, raw_date in enumerate(columns["time"]):
            try:
                day = date.fromisoformat(raw_date)
            except (TypeError, ValueError) as exc:
                raise WeatherProviderError(
                    f"Open-Meteo archive returned invalid date {raw_date!r}."
                ) from exc
            days.append(
                HistoricalDay(
                    date=day.isoformat(),
                    day_of_week=weekday_name(day),
                    temp_max=self._daily_rounded(
                        columns["temperature_2m_max"][index],
                        f"daily.temperature_2m_max[{index}]",
                    ),
                    temp_min=self._daily_rounded(
                        columns["temperature_2m_min"][index],
                        f"daily.temperature_2m_min[{index}]",
                    ),
                    condition=self._daily_condition(
                        columns["weather_code"][index], f"daily.weather_code[{index}]"
                    ),
                )
            )
        return days

    @staticmethod
    def _first(daily: dict[str, Any], key: str) -> Any:
        values = daily.get(key)
        if not isinstance(values, list) or not values:
            raise WeatherProviderError(f"Open-Meteo forecast payload missing 'daily.{key}' list.")
        return values[0]

    @staticmethod
    def _require_number(value: Any, field: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise WeatherProviderError(f"Open-Meteo field '{field}' is missing or not numeric.")
        if not math.isfinite(value):
            raise WeatherProviderError(f"Open-Meteo field '{field}' is not finite.")
        return float(value)

    @classmethod
    def _rounded(cls, value: Any, field: str) -> int:
        return round_half_up(cls._require_number(value, field))

    @classmethod
    def _require_code(cls, value: Any, field: str) -> int:
        return int(cls._require_number(value, field))

    # The archive lags a few days behind, so the newest days in a window
    # ending today come back as null. Those days read 0 degrees and "Cloudy".
    @classmethod
    def _daily_rounded(cls, value: Any, field: str) -> int:
        if value is None:
            return 0
        return cls._rounded(value, field)

    @classmethod
    def _daily_condition(cls, value: Any, field: str) -> Condition:
        if value is None:
            return "Cloudy"
        return map_weather_code(cls._require_code(value, field))
