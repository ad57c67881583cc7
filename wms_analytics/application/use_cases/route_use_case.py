"""
Application Use Case - Pick route

Orders bin locations into a closed pick tour and estimates walking time.
"""

from __future__ import annotations

import structlog

from wms_analytics.application.dtos.prediction_dto import (
    PredictionMetadataDTO,
    new_prediction_id,
)
from wms_analytics.application.dtos.route_dto import (
    PickRoutePayloadDTO,
    PickRouteRequestDTO,
    PickRouteResponseDTO,
)
from wms_analytics.application.use_cases.errors import PredictionValidationError
from wms_analytics.domain.entities.errors import InvalidBinLocationError
from wms_analytics.domain.services.numeric import round_half_up
from wms_analytics.domain.services.route_optimizer import optimize_pick_route
from wms_analytics.shared.consts import DEFAULT_START_POINT, EnumModelVersion

logger = structlog.get_logger(__name__)

ROUTE_CONFIDENCE = 0.95


class OptimizePickRouteUseCase:
    """Computes the visit order for a pick list."""

    def __init__(self, default_start_point: str = DEFAULT_START_POINT) -> None:
        self.default_start_point = default_start_point

    async def execute(self, request: PickRouteRequestDTO) -> PickRouteResponseDTO:
        start_point = request.start_point or self.default_start_point

        try:
            path = optimize_pick_route(request.locations, start_point)
        except InvalidBinLocationError as exc:
            logger.warning(
                "route.optimize.invalid_location", invalid=exc.codes
            )
            raise PredictionValidationError(exc.message, exc.details) from exc

        logger.info(
            "route.optimize.completed",
            stops=len(path.path),
            total_distance=path.total_distance,
            zones=path.zones_optimized,
        )

        return PickRouteResponseDTO(
            prediction_id=new_prediction_id("route"),
            model_version=EnumModelVersion.ROUTE.value,
            confidence=ROUTE_CONFIDENCE,
            prediction=PickRoutePayloadDTO.from_domain(
                locations=request.locations,
                start_point=start_point,
                path=path,
                estimated_time_minutes=round_half_up(path.estimated_time / 60),
            ),
            metadata=PredictionMetadataDTO(
                model_type="route_optimization", algorithm="zone_clustering_nn"
            ),
        )
