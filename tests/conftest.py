"""Shared fixtures: settings, provider payloads and a routed fake ``session.get``."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import Mock
from urllib.parse import urlparse

import pytest

from clothesline.config import Settings

BASE_URL = "https://api.test/data/2.5"


def make_response(status: int = 200, payload: Any = None, text: str | None = None) -> Mock:
    """Mock ``requests.Response`` with status, text and json()."""
    resp = Mock()
    resp.status_code = status
    resp.text = text if text is not None else ("" if payload is None else str(payload))
    if payload is None:
        resp.json.side_effect = ValueError("No JSON")
    else:
        resp.json.return_value = payload
    return resp


def current_payload(
    main: str = "Rain",
    clouds: int = 40,
    temp: float = 15.4,
    **overrides: Any,
) -> dict[str, Any]:
    """Minimal ``/weather`` body."""
    payload: dict[str, Any] = {
        "name": "London",
        "sys": {"country": "GB", "sunrise": 1717300800, "sunset": 1717358400},
        "weather": [{"main": main, "description": f"light {main.lower()}"}],
        "main": {"temp": temp, "feels_like": 14.6, "humidity": 82, "pressure": 1012},
        "wind": {"speed": 4.1, "deg": 230},
        "clouds": {"all": clouds},
        "visibility": 10000,
    }
    payload.update(overrides)
    return payload


def forecast_payload(count: int = 8) -> dict[str, Any]:
    """``/forecast`` body with ``count`` 3-hour steps starting 2024-06-02 03:00 UTC."""
    start = 1717297200
    return {
        "list": [
            {
                "dt": start + i * 10800,
                "weather": [{"main": "Clouds" if i % 2 else "Rain"}],
                "main": {"temp": 10.0 + i + 0.5},
            }
            for i in range(count)
        ]
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openweather_api_key="test-key",
        openweather_base_url=BASE_URL,
        timezone="UTC",
        clock="24h",
        device_base_url="http://esp32.test",
        lat=None,
        lon=None,
    )


@pytest.fixture
def provider_routes() -> dict[str, Mock]:
    """Successful responses for the four coordinate endpoints, keyed by path."""
    return {
        "/weather": make_response(200, current_payload()),
        "/uvi": make_response(200, {"value": 3.2}),
        "/air_pollution": make_response(200, {"list": [{"main": {"aqi": 2}}]}),
        "/forecast": make_response(200, forecast_payload()),
    }


@pytest.fixture
def routed_get(provider_routes: dict[str, Mock]) -> Callable[..., Mock]:
    """``session.get`` replacement that answers by URL path suffix."""

    def _get(url: str, **_kwargs: Any) -> Mock:
        path = urlparse(url).path
        for suffix, response in provider_routes.items():
            if path.endswith(suffix):
                return response
        return make_response(404, {"cod": "404", "message": "not found"})

    return _get
