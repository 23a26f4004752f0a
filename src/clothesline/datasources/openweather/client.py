"""OpenWeatherMap 2.5 API client constants and the shared lookup helper.

API docs:
  - Current weather: https://openweathermap.org/current
  - 5 day / 3 hour forecast: https://openweathermap.org/forecast5
  - Air pollution: https://openweathermap.org/api/air-pollution
  - UV index (legacy): https://openweathermap.org/api/uvi

Lookups never raise on HTTP or transport failure; they return a
``LookupResponse`` so the aggregator can report every endpoint's status
in one diagnostic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import requests

from clothesline.services.http import session

logger = logging.getLogger(__name__)

CURRENT_PATH = "/weather"
UV_PATH = "/uvi"
AIR_POLLUTION_PATH = "/air_pollution"
FORECAST_PATH = "/forecast"

#: Number of forecast steps shown on the dashboard
FORECAST_STEPS = 5


@dataclass(frozen=True)
class LookupResponse:
    """Outcome of one provider request.

    ``status`` is ``None`` when no HTTP response arrived at all.
    ``payload`` is only set when the body parsed as JSON.
    """

    endpoint: str
    status: int | None
    body: str
    payload: Any = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        """2xx with a parseable JSON body."""
        return self.status is not None and 200 <= self.status < 300 and self.payload is not None


def lookup(
    base_url: str,
    path: str,
    params: dict[str, str | int | float],
    timeout: float | None = None,
) -> LookupResponse:
    """
    GET ``base_url + path`` and capture status, body and JSON payload.

    Args:
        base_url: Provider root, e.g. ``https://api.openweathermap.org/data/2.5``.
        path: Endpoint path such as ``/weather``.
        params: Query parameters (``appid`` included).
        timeout: Per-request timeout; session default when omitted.
    """
    url = base_url.rstrip("/") + path
    kwargs: dict[str, Any] = {"params": params}
    if timeout is not None:
        kwargs["timeout"] = timeout

    try:
        resp = session.get(url, **kwargs)
    except requests.RequestException as exc:
        logger.warning("Request to %s failed: %s", path, exc)
        return LookupResponse(endpoint=path, status=None, body=f"request failed: {exc}")

    try:
        body = resp.text
    except (requests.RequestException, UnicodeDecodeError) as exc:
        body = f"unreadable body: {exc}"

    payload: Any = None
    if 200 <= resp.status_code < 300:
        try:
            payload = resp.json()
        except ValueError:
            logger.warning("Non-JSON body from %s", path)

    logger.debug("GET %s -> %s", path, resp.status_code)
    return LookupResponse(endpoint=path, status=resp.status_code, body=body, payload=payload)
