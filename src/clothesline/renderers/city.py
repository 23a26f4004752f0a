"""City search widget renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from clothesline.renderers import render_template

if TYPE_CHECKING:
    from clothesline.schemas import CitySnapshot

CITY_NOT_FOUND = "City not found!"
LOADING = "Loading..."

# Families with a dedicated background colour in the widget stylesheet
_VISUAL_CLASSES = frozenset({"clear", "rain", "snow"})


def build_city_html(city: CitySnapshot) -> str:
    """Name, visual, description, temperature/humidity and advisory."""
    keyword = city.condition_main.lower()
    return render_template(
        "city.html.j2",
        title=city.place.display,
        visual=city.visual,
        visual_class=keyword if keyword in _VISUAL_CLASSES else "",
        description=city.condition_description,
        summary=f"{city.temperature_c}°C, Humidity: {city.humidity_pct}%",
        advisory=city.advisory,
    )


def build_city_message_html(message: str) -> str:
    """Plain-text state for the widget (loading, not found, errors)."""
    return render_template("messages.html.j2", lines=[message])
