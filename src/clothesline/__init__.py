"""Clothesline - weather dashboard and smart drying-line controller.

Architecture::

    datasources/   External APIs (OpenWeatherMap, ESP32 device, geolocation)
    analysis/      Pure normalisation (raw provider payloads -> snapshots)
    aggregator.py  Concurrent fan-out of the four weather lookups
    conditions.py  Condition classifier, AQI labels, city advisories
    units.py       Time, compass and rounding conversions
    presenter.py   Snapshot/error -> WeatherView
    renderers/     Pure data -> HTML (status, modal, forecast, device, diary)
    dashboard.py   Session wiring with "last request wins" guard
    device.py      Toggle state machine and fixed-interval status poller
    flows/         Prefect orchestration (refresh writes the static page)
    services/      Shared utilities (HTTP session)

Data flow: geolocation -> aggregator -> analysis -> presenter -> renderers
"""

__version__ = "0.1.0"

from clothesline.config import Settings
from clothesline.schemas import CitySnapshot, WeatherSnapshot

__all__ = ["CitySnapshot", "Settings", "WeatherSnapshot", "__version__"]
