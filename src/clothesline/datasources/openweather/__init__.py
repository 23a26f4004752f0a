"""OpenWeatherMap weather data source.

Public API:
  - coordinates: fetch_current, fetch_uv_index, fetch_air_quality, fetch_forecast
  - city: fetch_city_weather
  - client: LookupResponse, endpoint paths, FORECAST_STEPS
"""

from clothesline.datasources.openweather.city import fetch_city_weather
from clothesline.datasources.openweather.client import FORECAST_STEPS, LookupResponse
from clothesline.datasources.openweather.coordinates import (
    fetch_air_quality,
    fetch_current,
    fetch_forecast,
    fetch_uv_index,
)

__all__ = [
    "FORECAST_STEPS",
    "LookupResponse",
    "fetch_air_quality",
    "fetch_city_weather",
    "fetch_current",
    "fetch_forecast",
    "fetch_uv_index",
]
