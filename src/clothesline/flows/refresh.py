"""
Prefect flow that aggregates weather and writes the static dashboard page.

Run locally:
    python -m clothesline.flows.refresh

Run with Prefect dashboard:
    prefect server start &
    python -m clothesline.flows.refresh
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

from prefect import flow, task

from clothesline.aggregator import aggregate
from clothesline.config import get_settings
from clothesline.errors import ClotheslineError
from clothesline.presenter import WeatherView, present_error, present_snapshot
from clothesline.renderers.page import build_page_html


@task(name="fetch-snapshot")
def fetch_view(lat: float, lon: float) -> WeatherView:
    """Aggregate the four lookups; failures become an error view."""
    try:
        snapshot = aggregate(lat, lon)
    except ClotheslineError as exc:
        print(f"Weather fetch failed: {exc}")
        return present_error(exc)
    print(f"Fetched weather for {snapshot.place.display}: {snapshot.temperature_c}°C")
    return present_snapshot(snapshot)


@task(name="build-page")
def build_page(view: WeatherView) -> str:
    """Render the full page for ``view``."""
    settings = get_settings()
    updated = datetime.now(ZoneInfo(settings.timezone)).strftime("%Y-%m-%d %H:%M")
    return build_page_html(view, updated=updated)


@task(name="write-page")
def write_page(html: str, site_dir: Path) -> Path:
    """Write ``index.html`` to the site directory."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


@flow(name="refresh-dashboard", log_prints=True)
def refresh_dashboard(lat: float, lon: float, site_dir: Path | None = None) -> dict[str, Any]:
    """
    Fetch weather for one position and publish the page.

    A failed aggregation still publishes the page, showing the error state.
    """
    out_dir = site_dir or get_settings().site_dir
    print(f"Fetching weather for ({lat}, {lon})...")
    view = fetch_view(lat, lon)

    print("Building page...")
    html = build_page(view)

    output_path = write_page(html, out_dir)
    print(f"Page written: {output_path}")
    return {"ok": view.error is None, "location": view.location_text, "output": str(output_path)}


if __name__ == "__main__":
    cfg = get_settings()
    if cfg.lat is None or cfg.lon is None:
        raise SystemExit("Set CLOTHESLINE_LAT and CLOTHESLINE_LON first.")
    result = refresh_dashboard(cfg.lat, cfg.lon)
    print(f"Flow complete: {result}")
