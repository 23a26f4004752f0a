"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # URLs, constants, request helper
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Sources:
  - openweather/   OpenWeatherMap 2.5 (current, UV, air quality, forecast, city)
  - device/        ESP32 drying-line controller (/on, /off, /data)
  - geolocation/   Current position (configured or IP based)

Fetch functions talk HTTP through ``clothesline.services.http.session`` and
return provider data; normalisation lives in ``analysis/``.
"""
