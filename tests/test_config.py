"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from clothesline.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)  # no stray .env
        cfg = Settings()
        assert cfg.units == "metric"
        assert cfg.clock == "24h"
        assert cfg.lat is None
        assert cfg.device_base_url == "http://192.168.230.214"
        assert cfg.site_dir == Path("site")

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CLOTHESLINE_OPENWEATHER_API_KEY", "abc123")
        monkeypatch.setenv("CLOTHESLINE_LAT", "45.5")
        monkeypatch.setenv("CLOTHESLINE_CLOCK", "12h")
        cfg = Settings()
        assert cfg.openweather_api_key == "abc123"
        assert cfg.lat == 45.5
        assert cfg.clock == "12h"

    def test_out_of_range_position_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(lat=91.0)

    def test_timeouts_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(device_timeout=0)
