from __future__ import annotations

import pytest
from fastapi import HTTPException

from wms_analytics.application.dtos.forecast_dto import DemandForecastRequestDTO
from wms_analytics.application.dtos.route_dto import PickRouteRequestDTO
from wms_analytics.application.use_cases.errors import PredictionValidationError
from wms_analytics.application.use_cases.forecast_use_case import (
    ForecastDemandUseCase,
)
from wms_analytics.application.use_cases.route_use_case import (
    OptimizePickRouteUseCase,
)
from wms_analytics.presentation.controllers.forecasts_controller import (
    forecast_demand,
)
from wms_analytics.presentation.controllers.routes_controller import (
    optimize_pick_path,
)


class _InvalidLocationUseCase:
    async def execute(self, request):
        raise PredictionValidationError(
            "Invalid bin location(s): 'bad'", {"invalid_locations": ["bad"]}
        )


@pytest.mark.asyncio
async def test_forecast_demand_endpoint(deterministic_forecaster, fixed_today):
    dto = await forecast_demand(
        payload=DemandForecastRequestDTO(
            sku_id="SKU-1", historical_data=[4, 4, 4], forecast_horizon_days=2
        ),
        use_case=ForecastDemandUseCase(
            deterministic_forecaster, today=lambda: fixed_today
        ),
    )
    assert [p.forecast_quantity for p in dto.prediction.forecasts] == [4, 4]


@pytest.mark.asyncio
async def test_optimize_pick_path_endpoint():
    dto = await optimize_pick_path(
        payload=PickRouteRequestDTO(locations=["A-01-02", "A-01-01"]),
        use_case=OptimizePickRouteUseCase(),
    )
    assert dto.prediction.optimized_path == ["A-01-01", "A-01-02"]
    assert dto.prediction.estimated_time_seconds == 61


@pytest.mark.asyncio
async def test_optimize_pick_path_reports_invalid_locations():
    with pytest.raises(HTTPException) as exc_info:
        await optimize_pick_path(
            payload=PickRouteRequestDTO(locations=["A-01-01"]),
            use_case=_InvalidLocationUseCase(),
        )

    assert exc_info.value.status_code == 422
    assert exc_info.value.detail["invalid_locations"] == ["bad"]
