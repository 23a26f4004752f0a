"""Full dashboard page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from clothesline.renderers import render_template

if TYPE_CHECKING:
    from clothesline.presenter import WeatherView


def build_page_html(
    view: WeatherView,
    *,
    updated: str,
    device_html: str = "",
    city_html: str = "",
    diary_html: str = "",
) -> str:
    """Assemble the static page from the current view and widget fragments."""
    return render_template(
        "base.html.j2",
        view=view,
        updated=updated,
        device_html=device_html,
        city_html=city_html,
        diary_html=diary_html,
    )
