"""Tests for unit conversions."""

from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest

from clothesline.units import (
    COMPASS_POINTS,
    degrees_to_compass,
    meters_to_km,
    round_half_up,
    unix_to_local_time,
)


class TestDegreesToCompass:
    """Wind direction labels."""

    @pytest.mark.parametrize(
        ("degrees", "label"),
        [
            (0, "N"),
            (90, "E"),
            (180, "S"),
            (270, "W"),
            (360, "N"),
            (22.5, "NNE"),
            (11.24, "N"),
            (11.25, "NNE"),
            (348.75, "N"),
            (230, "SW"),
        ],
    )
    def test_known_directions(self, degrees: float, label: str) -> None:
        assert degrees_to_compass(degrees) == label

    def test_negative_degrees_wrap(self) -> None:
        assert degrees_to_compass(-22.5) == "NNW"
        assert degrees_to_compass(-90) == "W"

    def test_large_degrees_wrap(self) -> None:
        assert degrees_to_compass(720 + 45) == "NE"

    def test_always_valid_label(self) -> None:
        for deg in range(-1080, 1081, 7):
            assert degrees_to_compass(deg) in COMPASS_POINTS

    def test_table_has_sixteen_points_clockwise_from_north(self) -> None:
        assert len(COMPASS_POINTS) == 16
        assert COMPASS_POINTS[0] == "N"
        assert COMPASS_POINTS[4] == "E"


class TestRoundHalfUp:
    """Temperature rounding."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(15.4, 15), (15.5, 16), (15.6, 16), (-2.5, -2), (-2.6, -3), (0.0, 0), (12.5, 13)],
    )
    def test_rounding(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected

    @pytest.mark.parametrize("value", [-40.5, -0.49, 0.5, 7.5, 21.49, 39.99])
    def test_idempotent(self, value: float) -> None:
        once = round_half_up(value)
        assert round_half_up(once) == once


class TestMetersToKm:
    def test_visibility(self) -> None:
        assert meters_to_km(10000) == 10.0
        assert meters_to_km(2500) == 2.5


class TestUnixToLocalTime:
    """Sunrise/sunset/forecast time labels."""

    def test_utc_24h(self) -> None:
        assert unix_to_local_time(1717300800) == "04:00"

    def test_time_zone(self) -> None:
        # 04:00 UTC is 05:00 BST
        assert unix_to_local_time(1717300800, ZoneInfo("Europe/London")) == "05:00"

    def test_12h_clock(self) -> None:
        label = unix_to_local_time(1717358400, ZoneInfo("UTC"), clock="12h")
        assert label.startswith("08:00")

    def test_epoch(self) -> None:
        assert unix_to_local_time(0) == "00:00"
