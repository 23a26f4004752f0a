"""Current-position providers.

Public API:
  - providers: GeolocationOptions, GeolocationProvider, StaticGeolocation, IPGeolocation
"""

from clothesline.datasources.geolocation.providers import (
    GeolocationOptions,
    GeolocationProvider,
    IPGeolocation,
    StaticGeolocation,
)

__all__ = ["GeolocationOptions", "GeolocationProvider", "IPGeolocation", "StaticGeolocation"]
