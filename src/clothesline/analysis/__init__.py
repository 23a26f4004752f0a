"""Cross-datasource normalisation.

Dependency rule: analysis/ never fetches data or produces HTML. It turns
decoded provider payloads into the models in ``clothesline.schemas``.

Modules:
  - snapshot: current + UV + air quality + forecast -> WeatherSnapshot;
    city lookup -> CitySnapshot
"""

from clothesline.analysis.snapshot import build_city_snapshot, build_forecast, build_snapshot

__all__ = ["build_city_snapshot", "build_forecast", "build_snapshot"]
