"""Exception hierarchy.

Every error is recovered at the boundary where it occurs (dashboard, device
toggle, CLI command) and turned into a user-visible message.
"""

from __future__ import annotations


class ClotheslineError(Exception):
    """Base class for all dashboard errors."""


class InvalidCoordinates(ClotheslineError, ValueError):
    """Latitude or longitude outside the valid range."""

    def __init__(self, latitude: float, longitude: float) -> None:
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(f"Invalid coordinates: ({latitude}, {longitude})")


class UpstreamFetchError(ClotheslineError):
    """One or more weather provider lookups failed.

    ``details`` enumerates the status and body of every lookup in the
    aggregation, not only the one that failed.
    """

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(details)


class CityNotFound(ClotheslineError):
    """The provider has no weather for the requested city name."""

    def __init__(self, city: str) -> None:
        self.city = city
        super().__init__(f"City not found: {city}")


class GeolocationDenied(ClotheslineError):
    """Position lookup refused by the provider."""


class GeolocationUnavailable(ClotheslineError):
    """Position could not be determined."""


class GeolocationTimeout(GeolocationUnavailable):
    """Position lookup did not answer within the configured timeout."""


class DeviceUnreachable(ClotheslineError):
    """The ESP32 controller did not answer or answered with an error."""


class InvalidTransition(ClotheslineError):
    """Device toggle asked to move between states that are not connected."""
