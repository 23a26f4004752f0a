"""ESP32 sensor panel renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from clothesline.renderers import render_template

if TYPE_CHECKING:
    from clothesline.schemas import DeviceStatus

NOT_AVAILABLE = "N/A"


def _or_na(value: object) -> str:
    if value is None or value == "":
        return NOT_AVAILABLE
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def device_status_rows(status: DeviceStatus) -> list[tuple[str, str]]:
    """Label/value pairs shared by the HTML panel and the CLI."""
    dryness = _or_na(status.dry_percent)
    return [
        ("Cloth Status", _or_na(status.cloth_status)),
        ("Dryness Level", dryness if dryness == NOT_AVAILABLE else f"{dryness}%"),
        ("Rain Status", _or_na(status.rain_status)),
    ]


def build_device_status_html(status: DeviceStatus) -> str:
    """Sensor rows; fields the device did not report show ``N/A``."""
    return render_template("device_status.html.j2", rows=device_status_rows(status))


def build_device_error_html(message: str) -> str:
    """Panel content when the last poll failed."""
    return render_template("error.html.j2", message=message, hint=None)
