"""Coordinate-keyed lookups: current conditions, UV index, air quality, forecast."""

from __future__ import annotations

from clothesline.datasources.openweather.client import (
    AIR_POLLUTION_PATH,
    CURRENT_PATH,
    FORECAST_PATH,
    UV_PATH,
    LookupResponse,
    lookup,
)


def _params(
    lat: float, lon: float, api_key: str, units: str | None = None
) -> dict[str, str | int | float]:
    params: dict[str, str | int | float] = {"lat": lat, "lon": lon, "appid": api_key}
    if units:
        params["units"] = units
    return params


def fetch_current(
    base_url: str,
    lat: float,
    lon: float,
    api_key: str,
    *,
    units: str = "metric",
    timeout: float | None = None,
) -> LookupResponse:
    """Current conditions (temperature, wind, clouds, sunrise/sunset)."""
    return lookup(base_url, CURRENT_PATH, _params(lat, lon, api_key, units), timeout)


def fetch_uv_index(
    base_url: str, lat: float, lon: float, api_key: str, *, timeout: float | None = None
) -> LookupResponse:
    """Current UV index; the endpoint takes no ``units``."""
    return lookup(base_url, UV_PATH, _params(lat, lon, api_key), timeout)


def fetch_air_quality(
    base_url: str, lat: float, lon: float, api_key: str, *, timeout: float | None = None
) -> LookupResponse:
    """Current air pollution; ``list[0].main.aqi`` is the 1-5 index."""
    return lookup(base_url, AIR_POLLUTION_PATH, _params(lat, lon, api_key), timeout)


def fetch_forecast(
    base_url: str,
    lat: float,
    lon: float,
    api_key: str,
    *,
    units: str = "metric",
    timeout: float | None = None,
) -> LookupResponse:
    """
    5-day forecast in 3-hour steps.

    Returns:
        Lookup whose payload has a chronological ``list`` of steps.
    """
    return lookup(base_url, FORECAST_PATH, _params(lat, lon, api_key, units), timeout)
