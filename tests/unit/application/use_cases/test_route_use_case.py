from __future__ import annotations

import pytest

from wms_analytics.application.dtos.route_dto import PickRouteRequestDTO
from wms_analytics.application.use_cases.errors import PredictionValidationError
from wms_analytics.application.use_cases.route_use_case import (
    OptimizePickRouteUseCase,
)


@pytest.mark.asyncio
async def test_route_use_case_orders_locations():
    use_case = OptimizePickRouteUseCase()
    request = PickRouteRequestDTO(locations=["B-02-05", "A-01-03", "A-03-01"])

    response = await use_case.execute(request)

    payload = response.prediction
    assert response.prediction_id.startswith("route-")
    assert response.model_version == "tsp-v1.0"
    assert response.confidence == 0.95
    assert payload.locations == ["B-02-05", "A-01-03", "A-03-01"]
    assert payload.optimized_path == ["A-01-03", "A-03-01", "B-02-05"]
    assert payload.start_point == "A-01-01"
    assert payload.total_distance_meters == 152
    assert payload.estimated_time_seconds == 199
    assert payload.estimated_time_minutes == 3
    assert payload.optimization.algorithm == "zone-clustering-nearest-neighbor"
    assert payload.optimization.zones_optimized == 2


@pytest.mark.asyncio
async def test_route_use_case_uses_configured_start_point():
    use_case = OptimizePickRouteUseCase(default_start_point="B-01-01")

    response = await use_case.execute(PickRouteRequestDTO(locations=["B-01-02"]))

    assert response.prediction.start_point == "B-01-01"
    assert response.prediction.total_distance_meters == 2


@pytest.mark.asyncio
async def test_route_use_case_handles_empty_pick_list():
    response = await OptimizePickRouteUseCase().execute(
        PickRouteRequestDTO(locations=[])
    )

    assert response.prediction.optimized_path == []
    assert response.prediction.total_distance_meters == 0
    assert response.prediction.optimization.algorithm == "none"


@pytest.mark.asyncio
async def test_route_use_case_translates_invalid_locations():
    request = PickRouteRequestDTO.model_construct(
        locations=["A-01-01", "bad"], start_point=None
    )

    with pytest.raises(PredictionValidationError) as exc_info:
        await OptimizePickRouteUseCase().execute(request)

    assert exc_info.value.details["invalid_locations"] == ["bad"]
