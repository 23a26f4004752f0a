"""ESP32 drying-line controller HTTP client.

The device exposes three GET endpoints under its base URL:

    /on    start the line (plain-text acknowledgement)
    /off   stop the line
    /data  JSON sensor report: clothStatus, dryPercent, rainStatus

Every failure (transport, non-2xx, bad JSON) raises ``DeviceUnreachable``.
"""

from __future__ import annotations

import logging

import requests
from pydantic import ValidationError

from clothesline.errors import DeviceUnreachable
from clothesline.schemas import DeviceStatus
from clothesline.services.http import session

logger = logging.getLogger(__name__)

ON_PATH = "/on"
OFF_PATH = "/off"
DATA_PATH = "/data"

DEFAULT_TIMEOUT = 5.0


class DeviceClient:
    """Thin wrapper over the device's three endpoints."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get(self, path: str) -> requests.Response:
        url = self.base_url + path
        try:
            resp = session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise DeviceUnreachable(f"{url}: {exc}") from exc
        if not 200 <= resp.status_code < 300:
            raise DeviceUnreachable(f"HTTP error! status: {resp.status_code}")
        return resp

    def switch_on(self) -> str:
        """Turn the line on; returns the device's acknowledgement text."""
        text = self._get(ON_PATH).text
        logger.info("Device response to on: %s", text)
        return text

    def switch_off(self) -> str:
        """Turn the line off; returns the device's acknowledgement text."""
        text = self._get(OFF_PATH).text
        logger.info("Device response to off: %s", text)
        return text

    def switch(self, on: bool) -> str:
        """``switch_on`` or ``switch_off``."""
        return self.switch_on() if on else self.switch_off()

    def fetch_status(self) -> DeviceStatus:
        """Read the sensor report from ``/data``."""
        resp = self._get(DATA_PATH)
        try:
            return DeviceStatus.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise DeviceUnreachable(f"Malformed device data: {exc}") from exc
