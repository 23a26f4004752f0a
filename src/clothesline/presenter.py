"""
Presentation of weather results.

Turns a ``WeatherSnapshot`` or an error into a ``WeatherView``: the full set
of texts and HTML fragments the dashboard shows.  A view always replaces the
previous one as a whole.
"""

from __future__ import annotations

from dataclasses import dataclass

from clothesline.conditions import ICON_URLS
from clothesline.errors import (
    ClotheslineError,
    GeolocationDenied,
    GeolocationUnavailable,
    InvalidCoordinates,
)
from clothesline.renderers.weather import (
    build_alerts_html,
    build_error_modal_html,
    build_forecast_html,
    build_modal_html,
)
from clothesline.schemas import BackgroundCategory, IconCategory, WeatherSnapshot

CHECK_BUTTON = "Check Live Weather →"
NO_TEMPERATURE = "--°C"
FETCH_HINT = "Please check your internet connection or API key."


@dataclass(frozen=True)
class WeatherView:
    """Everything the status strip, modal, forecast and alerts display."""

    location_text: str
    temperature_text: str
    description_text: str
    button_text: str
    button_enabled: bool = True
    background: BackgroundCategory = BackgroundCategory.DEFAULT
    icon: IconCategory = IconCategory.DEFAULT
    modal_html: str = ""
    forecast_html: str = ""
    alerts_html: str = ""
    error: str | None = None

    @property
    def icon_url(self) -> str:
        return ICON_URLS[self.icon]


def initial_view() -> WeatherView:
    """Before the first request."""
    return WeatherView(
        location_text="Your Location",
        temperature_text=NO_TEMPERATURE,
        description_text="Press the button to check the weather",
        button_text=CHECK_BUTTON,
    )


def loading_view() -> WeatherView:
    """While geolocation and aggregation are in flight."""
    return WeatherView(
        location_text="Locating...",
        temperature_text="Loading...",
        description_text="Fetching data...",
        button_text="Loading...",
        button_enabled=False,
    )


def present_snapshot(snapshot: WeatherSnapshot) -> WeatherView:
    """Successful aggregation."""
    presentation = snapshot.presentation
    return WeatherView(
        location_text=snapshot.place.display,
        temperature_text=f"{snapshot.temperature_c}°C",
        description_text=snapshot.condition_description,
        button_text=CHECK_BUTTON,
        background=presentation.background,
        icon=presentation.icon,
        modal_html=build_modal_html(snapshot),
        forecast_html=build_forecast_html(snapshot.forecast),
        alerts_html=build_alerts_html(),
    )


def present_error(exc: ClotheslineError) -> WeatherView:
    """
    Error state for a failed geolocation or aggregation.

    The button stays enabled so the user can retry.
    """
    if isinstance(exc, GeolocationDenied):
        return WeatherView(
            location_text="Location Denied",
            temperature_text=NO_TEMPERATURE,
            description_text="Location access needed",
            button_text="Enable Location",
            modal_html=build_error_modal_html(
                "Location access denied.",
                "Please enable location services to get weather data.",
            ),
            error=str(exc),
        )
    if isinstance(exc, GeolocationUnavailable):
        return WeatherView(
            location_text="Geolocation N/A",
            temperature_text=NO_TEMPERATURE,
            description_text="Location unavailable",
            button_text="Retry Location",
            modal_html=build_error_modal_html(
                f"Could not determine your location ({exc}).",
                "Set a fixed position in the settings or try again.",
            ),
            error=str(exc),
        )
    if isinstance(exc, InvalidCoordinates):
        return WeatherView(
            location_text="Invalid Location",
            temperature_text=NO_TEMPERATURE,
            description_text="Coordinates out of range",
            button_text="Retry Weather",
            modal_html=build_error_modal_html(str(exc)),
            error=str(exc),
        )
    return WeatherView(
        location_text="Location Error",
        temperature_text=NO_TEMPERATURE,
        description_text="Failed to fetch weather",
        button_text="Retry Weather",
        modal_html=build_error_modal_html(str(exc), FETCH_HINT),
        error=str(exc),
    )
