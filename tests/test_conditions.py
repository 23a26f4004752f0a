"""Tests for condition classification, AQI labels and advisories."""

from __future__ import annotations

import pytest

from clothesline.conditions import (
    ICON_URLS,
    advice,
    aqi_label,
    city_visual,
    classify,
    select_icon,
)
from clothesline.schemas import BackgroundCategory, IconCategory

NON_PRECIPITATING = ["Clear", "Clouds", "Mist", "Snow", "Haze", "Fog", "Smoke"]
PRECIPITATING = ["Rain", "Drizzle", "Thunderstorm", "rain", "THUNDERSTORM", "Freezing Rain"]


class TestClassifyBackground:
    """Background category rules, first match wins."""

    @pytest.mark.parametrize("condition", NON_PRECIPITATING)
    def test_cloudiness_partitions_sunny_and_cloudy(self, condition: str) -> None:
        for cloudiness in range(101):
            background = classify(condition, cloudiness).background
            if cloudiness > 30:
                assert background is BackgroundCategory.SUNNY
            else:
                assert background is BackgroundCategory.CLOUDY

    @pytest.mark.parametrize("condition", NON_PRECIPITATING)
    def test_never_rainy_or_default_without_precipitation(self, condition: str) -> None:
        backgrounds = {classify(condition, c).background for c in range(101)}
        assert backgrounds == {BackgroundCategory.SUNNY, BackgroundCategory.CLOUDY}

    @pytest.mark.parametrize("condition", PRECIPITATING)
    def test_precipitation_is_rainy_regardless_of_cloudiness(self, condition: str) -> None:
        for cloudiness in (0, 30, 31, 100):
            result = classify(condition, cloudiness)
            assert result.background is BackgroundCategory.RAINY
            assert result.icon is IconCategory.RAIN

    def test_threshold_boundary(self) -> None:
        assert classify("Clear", 30).background is BackgroundCategory.CLOUDY
        assert classify("Clear", 31).background is BackgroundCategory.SUNNY


class TestSelectIcon:
    """Icon selection over the same condition text."""

    @pytest.mark.parametrize(
        ("condition", "icon"),
        [
            ("Rain", IconCategory.RAIN),
            ("Drizzle", IconCategory.RAIN),
            ("Thunderstorm", IconCategory.RAIN),
            ("Clear", IconCategory.CLEAR),
            ("Clouds", IconCategory.CLOUD),
            ("Snow", IconCategory.DEFAULT),
            ("Mist", IconCategory.DEFAULT),
        ],
    )
    def test_icons(self, condition: str, icon: IconCategory) -> None:
        assert select_icon(condition) is icon

    def test_every_icon_has_url(self) -> None:
        assert set(ICON_URLS) == set(IconCategory)

    def test_classify_carries_icon(self) -> None:
        assert classify("Clouds", 80).icon is IconCategory.CLOUD
        assert classify("Clear", 0).icon is IconCategory.CLEAR


class TestAqiLabel:
    """Air quality label lookup with guarded bounds."""

    @pytest.mark.parametrize(
        ("index", "label"),
        [(1, "Good"), (2, "Fair"), (3, "Moderate"), (4, "Poor"), (5, "Very Poor")],
    )
    def test_scale(self, index: int, label: str) -> None:
        assert aqi_label(index) == label

    @pytest.mark.parametrize("index", [0, 6, -1, 100])
    def test_out_of_range_is_unknown(self, index: int) -> None:
        assert aqi_label(index) == "Unknown"


class TestAdvice:
    """City advisory strings."""

    def test_known_keywords(self) -> None:
        assert advice("rain") == "Don't forget your umbrella!"
        assert advice("clear") == "Great day to be outdoors!"
        assert "cold" in advice("snow")

    def test_default(self) -> None:
        assert advice("clouds") == "Stay weather-wise!"
        assert advice("") == "Stay weather-wise!"

    def test_case_insensitive(self) -> None:
        assert advice("Rain") == advice("rain")

    def test_visual(self) -> None:
        assert city_visual("clear")
        assert city_visual("mist") == ""
