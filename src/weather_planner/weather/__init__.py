"""Weather acquisition with live Open-Meteo data and offline fallback."""

from .base import WeatherProvider
from .conditions import Condition, map_weather_code
from .formatting import format_clock_time
from .mock import generate_mock_history, generate_mock_weather
from .models import (
    GeoLocation,
    HistoricalDay,
    HistoryFetchResult,
    WeatherFetchResult,
    WeatherSnapshot,
)
from .open_meteo import OpenMeteoWeatherProvider
from .service import WeatherService

__all__ = [
    "Condition",
    "GeoLocation",
    "HistoricalDay",
    "HistoryFetchResult",
    "OpenMeteoWeatherProvider",
    "WeatherFetchResult",
    "WeatherProvider",
    "WeatherService",
    "WeatherSnapshot",
    "format_clock_time",
    "generate_mock_history",
    "generate_mock_weather",
    "map_weather_code",
]
