"""Condition classification.

Maps provider condition families (``"Rain"``, ``"Clear"``, ``"Clouds"``...)
to presentation categories, air-quality labels and city advisories.
"""

from __future__ import annotations

from clothesline.schemas import BackgroundCategory, IconCategory, Presentation

PRECIPITATION_KEYWORDS: tuple[str, ...] = ("rain", "drizzle", "thunderstorm")

#: Cloud cover above this percentage selects the sunny background.
SUNNY_CLOUDINESS_THRESHOLD = 30

ICON_URLS: dict[IconCategory, str] = {
    IconCategory.RAIN: "https://cdn-icons-png.flaticon.com/512/1163/1163657.png",
    IconCategory.CLEAR: "https://cdn-icons-png.flaticon.com/512/869/869869.png",
    IconCategory.CLOUD: "https://cdn-icons-png.flaticon.com/512/414/414825.png",
    IconCategory.DEFAULT: "https://cdn-icons-png.flaticon.com/512/1163/1163624.png",
}

# OpenWeatherMap AQI scale, index 1..5
AQI_LABELS: tuple[str, ...] = ("Good", "Fair", "Moderate", "Poor", "Very Poor")
AQI_UNKNOWN = "Unknown"

ADVICE: dict[str, str] = {
    "rain": "Don't forget your umbrella!",
    "clear": "Great day to be outdoors!",
    "snow": "Bundle up, it's cold!",
}
DEFAULT_ADVICE = "Stay weather-wise!"

CITY_VISUALS: dict[str, str] = {
    "clear": "\u2600\ufe0f",
    "rain": "\U0001f327\ufe0f",
    "snow": "\u2744\ufe0f",
}


def is_precipitation(condition_main: str) -> bool:
    """True for rain, drizzle and thunderstorm families (case-insensitive)."""
    lowered = condition_main.lower()
    return any(keyword in lowered for keyword in PRECIPITATION_KEYWORDS)


def select_icon(condition_main: str) -> IconCategory:
    """Pick the weather icon for a condition family."""
    lowered = condition_main.lower()
    if is_precipitation(lowered):
        return IconCategory.RAIN
    if "clear" in lowered:
        return IconCategory.CLEAR
    if "cloud" in lowered:
        return IconCategory.CLOUD
    return IconCategory.DEFAULT


def classify(condition_main: str, cloudiness_pct: int) -> Presentation:
    """
    Derive background and icon categories, first match wins.

    1. Precipitation in the condition text -> rainy.
    2. Cloud cover above 30% -> sunny.
    3. Otherwise -> cloudy.

    The cloud-cover mapping is a product decision and is intentionally
    not "more cloud means less sun".
    """
    icon = select_icon(condition_main)
    if is_precipitation(condition_main):
        return Presentation(background=BackgroundCategory.RAINY, icon=icon)
    if cloudiness_pct > SUNNY_CLOUDINESS_THRESHOLD:
        return Presentation(background=BackgroundCategory.SUNNY, icon=icon)
    return Presentation(background=BackgroundCategory.CLOUDY, icon=icon)


def aqi_label(index: int) -> str:
    """Label for an AQI index; anything outside 1..5 is ``"Unknown"``."""
    if 1 <= index <= len(AQI_LABELS):
        return AQI_LABELS[index - 1]
    return AQI_UNKNOWN


def advice(keyword: str) -> str:
    """Short advisory for a lowercased condition family."""
    return ADVICE.get(keyword.lower(), DEFAULT_ADVICE)


def city_visual(keyword: str) -> str:
    """Emoji for the city widget, empty when the family has none."""
    return CITY_VISUALS.get(keyword.lower(), "")
