"""Unit conversions for weather fields.

Pure functions with no external dependencies.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime, tzinfo
from typing import Literal

# 16-point compass, clockwise from north
COMPASS_POINTS: tuple[str, ...] = (
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
)  # fmt: skip

DEGREES_PER_POINT = 360 / len(COMPASS_POINTS)  # 22.5

Clock = Literal["24h", "12h"]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Matches the provider's display convention (15.5 -> 16, -2.5 -> -2)
    rather than Python's banker's rounding.
    """
    return math.floor(value + 0.5)


def meters_to_km(meters: float) -> float:
    """Convert metres to kilometres."""
    return meters / 1000


def degrees_to_compass(degrees: float) -> str:
    """
    Convert a wind direction in degrees to a 16-point compass label.

    Any finite input is accepted: values below 0 or above 360 wrap around,
    so -22.5 is "NNW" and 360 is "N".
    """
    index = round_half_up(degrees / DEGREES_PER_POINT) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def unix_to_local_time(
    timestamp: int,
    tz: tzinfo | None = None,
    clock: Clock = "24h",
) -> str:
    """
    Format a Unix timestamp (seconds) as an hour:minute label.

    Args:
        timestamp: Seconds since the epoch.
        tz: Display time zone (UTC when omitted).
        clock: ``"24h"`` for ``14:05``, ``"12h"`` for ``02:05 PM``.
    """
    dt = datetime.fromtimestamp(timestamp, tz=tz or UTC)
    if clock == "12h":
        return dt.strftime("%I:%M %p")
    return dt.strftime("%H:%M")
