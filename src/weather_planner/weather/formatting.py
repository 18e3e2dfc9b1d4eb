"""Formatting helpers for provider timestamps and numbers."""

from __future__ import annotations

import math
from typing import Any

NOT_AVAILABLE = "N/A"


def format_clock_time(iso_string: Any) -> str:
    """Format a local ISO date-time ("2024-05-25T05:30") as "5:30 AM".

    The hour and minute are read straight from the string so the provider's
    local time is never shifted into the process timezone.
    """
    if not isinstance(iso_string, str) or "T" not in iso_string:
        return NOT_AVAILABLE
    time_part = iso_string.split("T", 1)[1]
    pieces = time_part.split(":")
    if len(pieces) < 2:
        return NOT_AVAILABLE
    try:
        hour = int(pieces[0])
        minute = int(pieces[1][:2])
    except ValueError:
        return NOT_AVAILABLE
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return NOT_AVAILABLE

    suffix = "PM" if hour >= 12 else "AM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minute:02d} {suffix}"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going toward positive infinity."""
    return math.floor(value + 0.5)
