"""Normalise raw OpenWeatherMap payloads into snapshots.

Inputs are the decoded JSON bodies of the four coordinate lookups (or the
single city lookup). No I/O happens here.
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Any

from pydantic import ValidationError

from clothesline.conditions import advice, aqi_label, city_visual
from clothesline.datasources.openweather.client import FORECAST_STEPS
from clothesline.errors import UpstreamFetchError
from clothesline.schemas import CitySnapshot, ForecastEntry, Place, WeatherSnapshot
from clothesline.units import (
    Clock,
    degrees_to_compass,
    meters_to_km,
    round_half_up,
    unix_to_local_time,
)

_MALFORMED = (AttributeError, KeyError, IndexError, TypeError, ValueError, ValidationError)


def build_forecast(
    forecast: dict[str, Any], tz: tzinfo | None = None, clock: Clock = "24h"
) -> tuple[ForecastEntry, ...]:
    """First five forecast steps, in the order the provider returned them."""
    steps = forecast.get("list") or []
    return tuple(
        ForecastEntry(
            time_label=unix_to_local_time(step["dt"], tz, clock),
            condition_main=step["weather"][0]["main"],
            temperature_c=round_half_up(step["main"]["temp"]),
        )
        for step in steps[:FORECAST_STEPS]
    )


def build_snapshot(
    current: dict[str, Any],
    uv: dict[str, Any],
    air: dict[str, Any],
    forecast: dict[str, Any],
    *,
    tz: tzinfo | None = None,
    clock: Clock = "24h",
) -> WeatherSnapshot:
    """
    Merge the four lookups into one ``WeatherSnapshot``.

    Raises:
        UpstreamFetchError: A payload is missing a required field.
    """
    try:
        condition = current["weather"][0]
        main = current["main"]
        aqi = int(air["list"][0]["main"]["aqi"])
        return WeatherSnapshot(
            place=Place(name=current["name"], country=current["sys"]["country"]),
            temperature_c=round_half_up(main["temp"]),
            feels_like_c=round_half_up(main["feels_like"]),
            humidity_pct=main["humidity"],
            cloudiness_pct=current["clouds"]["all"],
            wind_speed_ms=current["wind"]["speed"],
            wind_direction=degrees_to_compass(current["wind"].get("deg", 0)),
            visibility_km=meters_to_km(current["visibility"]),
            pressure_hpa=main["pressure"],
            condition_main=condition["main"],
            condition_description=condition["description"],
            uv_index=uv["value"],
            air_quality_index=aqi,
            air_quality_label=aqi_label(aqi),
            sunrise_local=unix_to_local_time(current["sys"]["sunrise"], tz, clock),
            sunset_local=unix_to_local_time(current["sys"]["sunset"], tz, clock),
            forecast=build_forecast(forecast, tz, clock),
        )
    except _MALFORMED as exc:
        raise UpstreamFetchError(f"Malformed weather data: {exc!r}") from exc


def build_city_snapshot(payload: dict[str, Any]) -> CitySnapshot:
    """
    Build the city widget's snapshot from a current-weather payload.

    Raises:
        UpstreamFetchError: The payload is missing a required field.
    """
    try:
        condition = payload["weather"][0]
        keyword = condition["main"].lower()
        return CitySnapshot(
            place=Place(name=payload["name"], country=payload["sys"]["country"]),
            condition_main=condition["main"],
            condition_description=condition["description"],
            temperature_c=round_half_up(payload["main"]["temp"]),
            humidity_pct=payload["main"]["humidity"],
            advisory=advice(keyword),
            visual=city_visual(keyword),
        )
    except _MALFORMED as exc:
        raise UpstreamFetchError(f"Malformed weather data: {exc!r}") from exc
