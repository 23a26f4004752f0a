"""One-shot position providers.

Each provider answers ``locate()`` with ``Coordinates`` or raises one of
``GeolocationDenied``, ``GeolocationUnavailable`` or ``GeolocationTimeout``.
No position is cached between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import requests
from pydantic import ValidationError

from clothesline.errors import GeolocationDenied, GeolocationTimeout, GeolocationUnavailable
from clothesline.schemas import Coordinates
from clothesline.services.http import session

logger = logging.getLogger(__name__)

IP_API_URL = "http://ip-api.com/json/"


@dataclass(frozen=True)
class GeolocationOptions:
    """Request options for a position lookup.

    ``high_accuracy`` is advisory: an IP lookup has a single precision and
    ignores it, while a provider with a precise mode may honour it.
    """

    high_accuracy: bool = True
    timeout: float = 5.0  # seconds
    maximum_age: float = 0  # seconds a cached position may be reused


class GeolocationProvider(Protocol):
    """Anything that can produce the current position."""

    def locate(self) -> Coordinates: ...


class StaticGeolocation:
    """Position fixed in configuration."""

    def __init__(self, lat: float | None, lon: float | None) -> None:
        self.lat = lat
        self.lon = lon

    def locate(self) -> Coordinates:
        if self.lat is None or self.lon is None:
            raise GeolocationUnavailable("No position configured")
        return Coordinates(lat=self.lat, lon=self.lon)


class IPGeolocation:
    """Approximate position from the public IP address via ip-api.com."""

    def __init__(
        self, options: GeolocationOptions | None = None, url: str = IP_API_URL
    ) -> None:
        self.options = options or GeolocationOptions()
        self.url = url

    def locate(self) -> Coordinates:
        params = {"fields": "status,message,lat,lon"}
        headers = {"Cache-Control": "no-cache"} if self.options.maximum_age == 0 else {}
        try:
            resp = session.get(
                self.url, params=params, headers=headers, timeout=self.options.timeout
            )
        except requests.Timeout as exc:
            raise GeolocationTimeout(f"No position within {self.options.timeout}s") from exc
        except requests.RequestException as exc:
            raise GeolocationUnavailable(str(exc)) from exc

        if resp.status_code in (401, 403):
            raise GeolocationDenied(f"Position lookup refused (HTTP {resp.status_code})")
        if not 200 <= resp.status_code < 300:
            raise GeolocationUnavailable(f"Position lookup failed (HTTP {resp.status_code})")

        try:
            data = resp.json()
        except ValueError as exc:
            raise GeolocationUnavailable("Position lookup returned no JSON") from exc

        if not isinstance(data, dict):
            raise GeolocationUnavailable("Position lookup returned no coordinates")
        if data.get("status") != "success":
            raise GeolocationUnavailable(data.get("message") or "Position unavailable")

        try:
            coords = Coordinates(lat=data["lat"], lon=data["lon"])
        except (KeyError, ValidationError) as exc:
            raise GeolocationUnavailable("Position lookup returned no coordinates") from exc

        logger.debug("Located at (%s, %s)", coords.lat, coords.lon)
        return coords
