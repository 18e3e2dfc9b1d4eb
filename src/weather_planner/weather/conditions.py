"""WMO weather-code to condition-label mapping."""

from __future__ import annotations

from typing import Literal

Condition = Literal["Clear", "Partly cloudy", "Cloudy", "Rainy", "Snowy", "Thunderstorm"]

# Order matters: mock generators index into this list by seed.
MOCK_CONDITIONS: tuple[Condition, ...] = (
    "Clear",
    "Partly cloudy",
    "Cloudy",
    "Rainy",
    "Thunderstorm",
    "Snowy",
)


def map_weather_code(code: int) -> Condition:
    """Map a WMO weather interpretation code to a condition label.

    Rules are checked in priority order and the first match wins; codes
    outside every range (including fog, 45-48) fall back to "Cloudy".
    """
    if code == 0:
        return "Clear"
    if code in (1, 2):
        return "Partly cloudy"
    if code == 3:
        return "Cloudy"
    if 95 <= code <= 99:
        return "Thunderstorm"
    if 51 <= code <= 67 or 80 <= code <= 82:
        return "Rainy"
    if 71 <= code <= 77 or 85 <= code <= 86:
        return "Snowy"
    if 45 <= code <= 48:
        return "Cloudy"
    return "Cloudy"
