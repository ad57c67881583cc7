from __future__ import annotations

import pytest
from pydantic import ValidationError

from wms_analytics.main.config import AppSettings, RouteSettings, get_settings
from wms_analytics.shared.consts import EnumEnvironment


def test_get_settings_loads_defaults(monkeypatch) -> None:
    monkeypatch.delenv("FORECAST_RANDOM_SEED", raising=False)
    settings = get_settings()

    assert settings.environment == EnumEnvironment.DEVELOPMENT
    assert settings.service.port == 8000
    assert settings.forecast.jitter_enabled is True
    assert settings.forecast.random_seed is None
    assert settings.route.default_start_point == "A-01-01"
    assert settings.cache.duration_ttl_seconds == 300
    assert settings.cache.forecast_ttl_seconds == 3600
    assert settings.cache.route_ttl_seconds == 60


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("SERVICE_TITLE", "Testing")
    monkeypatch.setenv("GIT_COMMIT", "deadbeef")
    monkeypatch.setenv("FORECAST_JITTER_ENABLED", "false")
    monkeypatch.setenv("FORECAST_RANDOM_SEED", "42")
    monkeypatch.setenv("ROUTE_DEFAULT_START_POINT", "B-02-03")
    monkeypatch.setenv("CACHE_ENABLED", "false")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.service.title == "Testing"
    assert settings.service.git_commit == "deadbeef"
    assert settings.forecast.jitter_enabled is False
    assert settings.forecast.random_seed == 42
    assert settings.route.default_start_point == "B-02-03"
    assert settings.cache.enabled is False
    assert settings.logging.level.value == "DEBUG"


def test_invalid_default_start_point_is_rejected() -> None:
    with pytest.raises(ValidationError):
        RouteSettings(default_start_point="depot")
