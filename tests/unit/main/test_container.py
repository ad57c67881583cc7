from __future__ import annotations

import pytest

from wms_analytics.application.use_cases.cached_use_case import (
    CachedPredictionUseCase,
)
from wms_analytics.application.use_cases.duration_use_cases import (
    BatchPredictDurationUseCase,
)
from wms_analytics.main.config import AppSettings, ForecastSettings
from wms_analytics.main.container import app_lifespan, get_container, init_container


def test_init_and_get_container() -> None:
    container = init_container(AppSettings())

    assert get_container() is container
    assert container.prediction_cache() is container.prediction_cache()
    assert isinstance(
        container.predict_order_duration_use_case(), CachedPredictionUseCase
    )
    assert isinstance(
        container.batch_predict_duration_use_case(), BatchPredictDurationUseCase
    )
    route_use_case = container.optimize_pick_route_use_case()
    assert route_use_case.namespace == "route"
    assert route_use_case.ttl_seconds == 60
    assert route_use_case.inner.default_start_point == "A-01-01"


def test_forecaster_is_configured_from_settings() -> None:
    settings = AppSettings(
        forecast=ForecastSettings(
            jitter_enabled=False, random_seed=7, calendar_aligned_seasonality=True
        )
    )
    container = init_container(settings)

    forecaster = container.demand_forecaster()

    assert forecaster.jitter_enabled is False
    assert forecaster.calendar_aligned_seasonality is True
    assert container.system_info().forecast_random_seed == 7


@pytest.mark.asyncio
async def test_app_lifespan_clears_prediction_cache() -> None:
    container = init_container(AppSettings())
    cache = container.prediction_cache()

    async with app_lifespan() as yielded:
        assert yielded is container
        cache.set("duration:key", {"value": 1}, 60)

    assert len(cache) == 0


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("wms_analytics.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
