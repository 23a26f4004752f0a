"""Tests for the position providers."""

from __future__ import annotations

from unittest.mock import patch

import pytest
import requests
from conftest import make_response

from clothesline.datasources.geolocation import (
    GeolocationOptions,
    IPGeolocation,
    StaticGeolocation,
)
from clothesline.errors import (
    GeolocationDenied,
    GeolocationTimeout,
    GeolocationUnavailable,
)
from clothesline.schemas import Coordinates

GET = "clothesline.datasources.geolocation.providers.session.get"


class TestStaticGeolocation:
    def test_configured(self) -> None:
        assert StaticGeolocation(45.5, -122.6).locate() == Coordinates(lat=45.5, lon=-122.6)

    def test_missing_coordinate(self) -> None:
        with pytest.raises(GeolocationUnavailable):
            StaticGeolocation(45.5, None).locate()


class TestIPGeolocation:
    """ip-api.com lookups and their failure mapping."""

    def test_success(self) -> None:
        body = {"status": "success", "lat": 51.51, "lon": -0.13}
        with patch(GET, return_value=make_response(200, body)) as mock_get:
            coords = IPGeolocation().locate()

        assert coords == Coordinates(lat=51.51, lon=-0.13)
        kwargs = mock_get.call_args.kwargs
        assert kwargs["timeout"] == 5.0
        assert kwargs["params"]["fields"] == "status,message,lat,lon"

    def test_high_accuracy_does_not_change_request(self) -> None:
        body = {"status": "success", "lat": 1, "lon": 2}
        sent: list[object] = []
        for precise in (True, False):
            with patch(GET, return_value=make_response(200, body)) as mock_get:
                coords = IPGeolocation(GeolocationOptions(high_accuracy=precise)).locate()
            assert coords == Coordinates(lat=1, lon=2)
            sent.append(mock_get.call_args)
        assert sent[0] == sent[1]

    def test_fresh_position_requested(self) -> None:
        body = {"status": "success", "lat": 1, "lon": 2}
        with patch(GET, return_value=make_response(200, body)) as mock_get:
            IPGeolocation(GeolocationOptions(maximum_age=0)).locate()
        assert mock_get.call_args.kwargs["headers"] == {"Cache-Control": "no-cache"}

    def test_cached_position_allowed(self) -> None:
        body = {"status": "success", "lat": 1, "lon": 2}
        with patch(GET, return_value=make_response(200, body)) as mock_get:
            IPGeolocation(GeolocationOptions(maximum_age=60)).locate()
        assert mock_get.call_args.kwargs["headers"] == {}

    def test_timeout(self) -> None:
        with (
            patch(GET, side_effect=requests.ReadTimeout("slow")),
            pytest.raises(GeolocationTimeout),
        ):
            IPGeolocation(GeolocationOptions(timeout=1)).locate()

    def test_timeout_is_unavailable(self) -> None:
        assert issubclass(GeolocationTimeout, GeolocationUnavailable)

    def test_connection_error(self) -> None:
        with (
            patch(GET, side_effect=requests.ConnectionError("offline")),
            pytest.raises(GeolocationUnavailable, match="offline"),
        ):
            IPGeolocation().locate()

    @pytest.mark.parametrize("status", [401, 403])
    def test_refused(self, status: int) -> None:
        with (
            patch(GET, return_value=make_response(status, text="forbidden")),
            pytest.raises(GeolocationDenied),
        ):
            IPGeolocation().locate()

    def test_server_error(self) -> None:
        with (
            patch(GET, return_value=make_response(500, text="oops")),
            pytest.raises(GeolocationUnavailable, match="HTTP 500"),
        ):
            IPGeolocation().locate()

    def test_lookup_failed_status(self) -> None:
        body = {"status": "fail", "message": "private range"}
        with (
            patch(GET, return_value=make_response(200, body)),
            pytest.raises(GeolocationUnavailable, match="private range"),
        ):
            IPGeolocation().locate()

    @pytest.mark.parametrize(
        "body",
        [
            {"status": "success"},
            {"status": "success", "lat": 95.0, "lon": 0},
            ["not", "a", "dict"],
        ],
    )
    def test_unusable_body(self, body: object) -> None:
        with (
            patch(GET, return_value=make_response(200, body)),
            pytest.raises(GeolocationUnavailable),
        ):
            IPGeolocation().locate()

    def test_not_json(self) -> None:
        with (
            patch(GET, return_value=make_response(200, None, text="<html>")),
            pytest.raises(GeolocationUnavailable),
        ):
            IPGeolocation().locate()
