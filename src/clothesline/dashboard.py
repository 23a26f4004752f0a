"""
Dashboard session.

Wires geolocation, aggregation and presentation together and owns the
device toggle, the status poller, the city widget and the diary.

Each weather request is tagged with a sequence number from
``LatestRequestGuard``.  Both its loading state and its final view are
applied only if no newer request has been issued since.  Late results are
dropped silently.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from clothesline.aggregator import aggregate, aggregate_by_name
from clothesline.config import Settings, get_settings
from clothesline.datasources.device import DeviceClient
from clothesline.datasources.geolocation import (
    GeolocationOptions,
    IPGeolocation,
    StaticGeolocation,
)
from clothesline.device import DevicePoller, DeviceToggle
from clothesline.diary import Diary
from clothesline.errors import CityNotFound, ClotheslineError, DeviceUnreachable
from clothesline.presenter import (
    WeatherView,
    initial_view,
    loading_view,
    present_error,
    present_snapshot,
)
from clothesline.renderers.city import (
    CITY_NOT_FOUND,
    LOADING,
    build_city_html,
    build_city_message_html,
)
from clothesline.renderers.device import build_device_error_html, build_device_status_html
from clothesline.renderers.diary import build_diary_html
from clothesline.renderers.page import build_page_html

if TYPE_CHECKING:
    from clothesline.datasources.geolocation import GeolocationProvider
    from clothesline.device import ToggleOutcome
    from clothesline.schemas import DeviceStatus, DiaryEntry

logger = logging.getLogger(__name__)


class LatestRequestGuard:
    """Monotonic request counter implementing "last request wins"."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._latest = 0

    def begin(self) -> int:
        """Issue the next sequence number."""
        with self._lock:
            self._latest += 1
            return self._latest

    def is_current(self, seq: int) -> bool:
        with self._lock:
            return seq == self._latest

    def run_if_current(self, seq: int, apply: Callable[[], None]) -> bool:
        """Run ``apply`` atomically if ``seq`` is still the latest request."""
        with self._lock:
            if seq != self._latest:
                return False
            apply()
            return True


def default_geolocation(settings: Settings) -> GeolocationProvider:
    """Configured position when set, otherwise IP geolocation."""
    if settings.lat is not None and settings.lon is not None:
        return StaticGeolocation(settings.lat, settings.lon)
    return IPGeolocation(GeolocationOptions(timeout=settings.geolocation_timeout))


class Dashboard:
    """State of one dashboard session."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        geolocation: GeolocationProvider | None = None,
        device_client: DeviceClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.geolocation = geolocation or default_geolocation(self.settings)
        self.device_client = device_client or DeviceClient(
            self.settings.device_base_url, timeout=self.settings.device_timeout
        )
        self.toggle = DeviceToggle(self.device_client)
        self.diary = Diary()

        self.weather_view: WeatherView = initial_view()
        self.city_html = ""
        self.device_html = ""
        self.popup: str | None = None

        self._weather_guard = LatestRequestGuard()
        self._city_guard = LatestRequestGuard()
        self._poller: DevicePoller | None = None

    # -------------------------------------------------------------------------
    # Weather
    # -------------------------------------------------------------------------

    def _show_loading(self, seq: int) -> None:
        view = loading_view()

        def _set() -> None:
            self.weather_view = view

        # A newer request may already have begun or finished
        self._weather_guard.run_if_current(seq, _set)

    def _apply_weather(self, seq: int, view: WeatherView) -> bool:
        def _set() -> None:
            self.weather_view = view

        applied = self._weather_guard.run_if_current(seq, _set)
        if not applied:
            logger.debug("Discarding stale weather result #%d", seq)
        return applied

    def _fetch_view(self, latitude: float, longitude: float) -> WeatherView:
        try:
            snapshot = aggregate(latitude, longitude, settings=self.settings)
        except ClotheslineError as exc:
            logger.error("Weather fetch error: %s", exc)
            return present_error(exc)
        return present_snapshot(snapshot)

    def check_live_weather(self) -> WeatherView:
        """Locate, aggregate and show the result (or an error view)."""
        seq = self._weather_guard.begin()
        self._show_loading(seq)
        try:
            coords = self.geolocation.locate()
        except ClotheslineError as exc:
            logger.error("Geolocation error: %s", exc)
            view = present_error(exc)
        else:
            view = self._fetch_view(coords.lat, coords.lon)
        self._apply_weather(seq, view)
        return view

    def show_weather_at(self, latitude: float, longitude: float) -> WeatherView:
        """Aggregate for explicit coordinates, skipping geolocation."""
        seq = self._weather_guard.begin()
        self._show_loading(seq)
        view = self._fetch_view(latitude, longitude)
        self._apply_weather(seq, view)
        return view

    # -------------------------------------------------------------------------
    # City search
    # -------------------------------------------------------------------------

    def search_city(self, name: str) -> str | None:
        """Fill the city widget; blank input leaves it untouched."""
        if not name.strip():
            return None
        seq = self._city_guard.begin()
        loading = build_city_message_html(LOADING)

        def _set_loading() -> None:
            self.city_html = loading

        self._city_guard.run_if_current(seq, _set_loading)
        try:
            city = aggregate_by_name(name, settings=self.settings)
        except CityNotFound:
            html = build_city_message_html(CITY_NOT_FOUND)
        except ClotheslineError as exc:
            logger.error("City weather error: %s", exc)
            html = build_city_message_html(f"Weather service unavailable: {exc}")
        else:
            html = build_city_html(city)

        def _set() -> None:
            self.city_html = html

        self._city_guard.run_if_current(seq, _set)
        return html

    # -------------------------------------------------------------------------
    # Device
    # -------------------------------------------------------------------------

    def toggle_device(self, on: bool) -> ToggleOutcome:
        """Switch the line and show the outcome popup."""
        outcome = self.toggle.switch(on)
        self.popup = outcome.message
        return outcome

    def _show_device_status(self, status: DeviceStatus) -> None:
        self.device_html = build_device_status_html(status)

    def _show_device_error(self, exc: DeviceUnreachable) -> None:
        self.device_html = build_device_error_html(str(exc))

    def _make_poller(self) -> DevicePoller:
        return DevicePoller(
            self.device_client,
            interval=self.settings.device_poll_interval,
            on_status=self._show_device_status,
            on_error=self._show_device_error,
        )

    def poll_device(self) -> DeviceStatus | None:
        """Read the sensor report once."""
        return self._make_poller().poll_once()

    def start_device_polling(self) -> None:
        if self._poller is None:
            self._poller = self._make_poller()
        self._poller.start()

    def stop_device_polling(self) -> None:
        if self._poller is not None:
            self._poller.stop()

    # -------------------------------------------------------------------------
    # Diary and page
    # -------------------------------------------------------------------------

    def add_diary_entry(self, text: str) -> DiaryEntry | None:
        return self.diary.add(text)

    def render_page(self, now: datetime | None = None) -> str:
        """Full HTML page for the current session state."""
        updated = (now or datetime.now()).strftime("%Y-%m-%d %H:%M")
        return build_page_html(
            self.weather_view,
            updated=updated,
            device_html=self.device_html,
            city_html=self.city_html,
            diary_html=build_diary_html(self.diary.entries) if len(self.diary) else "",
        )
