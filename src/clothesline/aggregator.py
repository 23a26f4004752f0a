"""
Weather aggregation.

``aggregate`` issues the four coordinate lookups (current conditions, UV
index, air quality, forecast) concurrently, waits for all of them and merges
the results into a single ``WeatherSnapshot``.  Aggregation is all or
nothing: if any lookup fails, the caller gets one ``UpstreamFetchError``
listing the status and body of every lookup.

``aggregate_by_name`` is the city-search variant: a single lookup by name.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from clothesline.analysis.snapshot import build_city_snapshot, build_snapshot
from clothesline.config import Settings, get_settings
from clothesline.datasources.openweather import (
    fetch_air_quality,
    fetch_city_weather,
    fetch_current,
    fetch_forecast,
    fetch_uv_index,
)
from clothesline.errors import CityNotFound, InvalidCoordinates, UpstreamFetchError

if TYPE_CHECKING:
    from clothesline.datasources.openweather import LookupResponse
    from clothesline.schemas import CitySnapshot, WeatherSnapshot

logger = logging.getLogger(__name__)

LOOKUP_COUNT = 4


def validate_coordinates(latitude: float, longitude: float) -> None:
    """Raise ``InvalidCoordinates`` unless both values are finite and in range."""
    if (
        math.isnan(latitude)
        or math.isnan(longitude)
        or not -90 <= latitude <= 90
        or not -180 <= longitude <= 180
    ):
        raise InvalidCoordinates(latitude, longitude)


def describe_failure(responses: list[LookupResponse]) -> str:
    """Compose one diagnostic line covering every lookup, in dispatch order."""
    statuses = ", ".join(str(r.status) for r in responses)
    bodies = " | ".join(r.body for r in responses)
    return f"Failed to fetch weather data. Statuses: {statuses}. Details: {bodies}"


def aggregate(
    latitude: float,
    longitude: float,
    *,
    settings: Settings | None = None,
) -> WeatherSnapshot:
    """
    Fetch and merge current conditions, UV, air quality and forecast.

    Args:
        latitude: Decimal degrees, -90..90.
        longitude: Decimal degrees, -180..180.
        settings: Overrides ``get_settings()``.

    Raises:
        InvalidCoordinates: Before any request is made.
        UpstreamFetchError: Any of the four lookups failed or was malformed.
    """
    validate_coordinates(latitude, longitude)
    cfg = settings or get_settings()
    base, key = cfg.openweather_base_url, cfg.openweather_api_key
    timeout = cfg.http_timeout

    logger.info("Aggregating weather for (%s, %s)", latitude, longitude)
    with ThreadPoolExecutor(max_workers=LOOKUP_COUNT, thread_name_prefix="lookup") as pool:
        futures = [
            pool.submit(
                fetch_current, base, latitude, longitude, key, units=cfg.units, timeout=timeout
            ),
            pool.submit(fetch_uv_index, base, latitude, longitude, key, timeout=timeout),
            pool.submit(fetch_air_quality, base, latitude, longitude, key, timeout=timeout),
            pool.submit(
                fetch_forecast, base, latitude, longitude, key, units=cfg.units, timeout=timeout
            ),
        ]
        responses = [f.result() for f in futures]

    if not all(r.ok for r in responses):
        details = describe_failure(responses)
        logger.warning(details)
        raise UpstreamFetchError(details)

    current, uv, air, forecast = (r.payload for r in responses)
    return build_snapshot(
        current, uv, air, forecast, tz=ZoneInfo(cfg.timezone), clock=cfg.clock
    )


def aggregate_by_name(city: str, *, settings: Settings | None = None) -> CitySnapshot:
    """
    Look up current weather for a city name.

    Raises:
        ValueError: ``city`` is blank.
        CityNotFound: The provider answered 404.
        UpstreamFetchError: Any other failure.
    """
    name = city.strip()
    if not name:
        raise ValueError("City name must not be blank")
    cfg = settings or get_settings()

    resp = fetch_city_weather(
        cfg.openweather_base_url,
        name,
        cfg.openweather_api_key,
        units=cfg.units,
        timeout=cfg.http_timeout,
    )
    if resp.status == 404:
        raise CityNotFound(name)
    if not resp.ok:
        raise UpstreamFetchError(
            f"Failed to fetch weather for {name}. Status: {resp.status}. Details: {resp.body}"
        )
    return build_city_snapshot(resp.payload)
