"""Current conditions looked up by city name."""

from __future__ import annotations

from clothesline.datasources.openweather.client import CURRENT_PATH, LookupResponse, lookup


def fetch_city_weather(
    base_url: str,
    city: str,
    api_key: str,
    *,
    units: str = "metric",
    timeout: float | None = None,
) -> LookupResponse:
    """Current weather for ``city``; the provider answers 404 for unknown names."""
    params: dict[str, str | int | float] = {"q": city, "units": units, "appid": api_key}
    return lookup(base_url, CURRENT_PATH, params, timeout)
