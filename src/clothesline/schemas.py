"""
Domain models for the clothesline dashboard.

Pydantic models for normalized provider data and presentation hints.
These define the canonical schema - analysis/ normalizes API responses to these.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Presentation hints
# =============================================================================


class BackgroundCategory(StrEnum):
    """Page background derived from the current condition."""

    RAINY = "rainy"
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    DEFAULT = "default"


class IconCategory(StrEnum):
    """Weather icon derived from the current condition."""

    RAIN = "rain"
    CLEAR = "clear"
    CLOUD = "cloud"
    DEFAULT = "default"


class Presentation(BaseModel):
    """Non-content styling for the presentation surface."""

    model_config = ConfigDict(frozen=True)

    background: BackgroundCategory
    icon: IconCategory


# =============================================================================
# Location
# =============================================================================


class Coordinates(BaseModel):
    """Geographic point."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class Place(BaseModel):
    """Display name and ISO country code reported by the provider."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str

    @property
    def display(self) -> str:
        """``"London, GB"``."""
        return f"{self.name}, {self.country}"


# =============================================================================
# Weather
# =============================================================================


class ForecastEntry(BaseModel):
    """One 3-hour forecast step."""

    model_config = ConfigDict(frozen=True)

    time_label: str
    condition_main: str
    temperature_c: int


class WeatherSnapshot(BaseModel):
    """Aggregated weather for one location at one point in time.

    Only built when all four provider lookups succeed.
    """

    model_config = ConfigDict(frozen=True)

    place: Place
    temperature_c: int
    feels_like_c: int
    humidity_pct: int = Field(..., ge=0, le=100)
    cloudiness_pct: int = Field(..., ge=0, le=100)
    wind_speed_ms: float = Field(..., ge=0)
    wind_direction: str
    visibility_km: float = Field(..., ge=0)
    pressure_hpa: int = Field(..., gt=0)
    condition_main: str
    condition_description: str
    uv_index: float = Field(..., ge=0)
    air_quality_index: int
    air_quality_label: str
    sunrise_local: str
    sunset_local: str
    forecast: tuple[ForecastEntry, ...] = Field(default=(), max_length=5)

    @property
    def presentation(self) -> Presentation:
        """Background and icon categories for this snapshot."""
        # Local import: conditions imports Presentation from this module
        from clothesline.conditions import classify

        return classify(self.condition_main, self.cloudiness_pct)


class CitySnapshot(BaseModel):
    """Result of a search by city name."""

    model_config = ConfigDict(frozen=True)

    place: Place
    condition_main: str
    condition_description: str
    temperature_c: int
    humidity_pct: int = Field(..., ge=0, le=100)
    advisory: str
    visual: str = ""


# =============================================================================
# Device
# =============================================================================


class DeviceState(StrEnum):
    """Drying-line toggle state."""

    OFF = "off"
    TURNING_ON = "turning_on"
    ON = "on"
    TURNING_OFF = "turning_off"
    ERROR = "error"


class DeviceStatus(BaseModel):
    """Sensor report from the ESP32 ``/data`` endpoint.

    Every field is optional; the device omits what it cannot measure.
    """

    cloth_status: str | None = Field(default=None, alias="clothStatus")
    dry_percent: float | None = Field(default=None, alias="dryPercent")
    rain_status: str | None = Field(default=None, alias="rainStatus")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# =============================================================================
# Diary
# =============================================================================


class DiaryEntry(BaseModel):
    """A single diary line kept for the running session."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    created_at: datetime = Field(default_factory=datetime.now)
    text: str = Field(..., min_length=1)
