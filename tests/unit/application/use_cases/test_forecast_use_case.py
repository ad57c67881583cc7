from __future__ import annotations

from datetime import date

import pytest

from wms_analytics.application.dtos.forecast_dto import DemandForecastRequestDTO
from wms_analytics.application.use_cases.forecast_use_case import (
    ForecastDemandUseCase,
)


@pytest.mark.asyncio
async def test_forecast_use_case_builds_response(deterministic_forecaster, fixed_today):
    use_case = ForecastDemandUseCase(
        forecaster=deterministic_forecaster, today=lambda: fixed_today
    )
    request = DemandForecastRequestDTO(
        sku_id="SKU-42", historical_data=[10] * 14, forecast_horizon_days=7
    )

    response = await use_case.execute(request)

    payload = response.prediction
    assert response.prediction_id.startswith("forecast-")
    assert response.model_version == "time-series-v1.0"
    assert response.confidence == 0.70
    assert payload.sku_id == "SKU-42"
    assert payload.forecast_horizon_days == 7
    assert [point.forecast_quantity for point in payload.forecasts] == [
        10,
        11,
        10,
        10,
        11,
        7,
        5,
    ]
    assert payload.forecasts[0].forecast_date == date(2024, 1, 4)
    assert payload.statistics.total_demand == 64
    assert payload.moving_average_7 == pytest.approx(10.0)
    assert payload.moving_average_30 is None
    assert response.metadata.extras["historical_days"] == 14
    assert response.metadata.extras["jitter_enabled"] is False


@pytest.mark.asyncio
async def test_forecast_use_case_short_history(seeded_forecaster, fixed_today):
    use_case = ForecastDemandUseCase(
        forecaster=seeded_forecaster, today=lambda: fixed_today
    )
    request = DemandForecastRequestDTO(
        sku_id="SKU-1", historical_data=[10, 12, 11], forecast_horizon_days=5
    )

    response = await use_case.execute(request)

    assert [p.forecast_quantity for p in response.prediction.forecasts] == [11] * 5
    assert response.prediction.statistics.peak_day == 1
