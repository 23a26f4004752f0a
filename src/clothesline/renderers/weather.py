"""Weather renderers: detail modal, forecast list and alerts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from clothesline.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Sequence

    from clothesline.schemas import ForecastEntry, WeatherSnapshot

FORECAST_UNAVAILABLE = "Forecast unavailable. Please try again later."
NO_ALERTS = "No active alerts"


def _format_number(value: float) -> str:
    """Drop a trailing ``.0`` so 10.0 km reads as ``10``."""
    return f"{value:g}"


def build_modal_html(snapshot: WeatherSnapshot) -> str:
    """Detail rows for the weather modal."""
    rows = [
        ("Location", snapshot.place.display),
        ("Condition", snapshot.condition_description),
        (
            "Temperature",
            f"{snapshot.temperature_c}°C (Feels like {snapshot.feels_like_c}°C)",
        ),
        ("Humidity", f"{snapshot.humidity_pct}%"),
        (
            "Wind",
            f"{_format_number(snapshot.wind_speed_ms)} m/s ({snapshot.wind_direction})",
        ),
        ("Visibility", f"{_format_number(snapshot.visibility_km)} km"),
        ("Cloud Cover", f"{snapshot.cloudiness_pct}%"),
        ("Pressure", f"{snapshot.pressure_hpa} hPa"),
        ("UV Index", _format_number(snapshot.uv_index)),
        (
            "Air Quality",
            f"{snapshot.air_quality_label} (AQI {snapshot.air_quality_index})",
        ),
        ("Sunrise", snapshot.sunrise_local),
        ("Sunset", snapshot.sunset_local),
    ]
    return render_template("weather_modal.html.j2", rows=rows)


def build_forecast_html(forecast: Sequence[ForecastEntry]) -> str:
    """One line per forecast step, or the unavailable notice."""
    lines = [f"{e.time_label}: {e.condition_main}, {e.temperature_c}°C" for e in forecast]
    return render_template("messages.html.j2", lines=lines or [FORECAST_UNAVAILABLE])


def build_alerts_html() -> str:
    """Alerts section; the provider's 2.5 API carries no alerts."""
    return render_template("messages.html.j2", lines=[NO_ALERTS])


def build_error_modal_html(message: str, hint: str | None = None) -> str:
    """Error block for the modal, with an optional follow-up hint."""
    return render_template("error.html.j2", message=message, hint=hint)
