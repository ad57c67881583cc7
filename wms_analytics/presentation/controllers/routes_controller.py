"""
Presentation Layer - Routes Controller

Exposes the pick route endpoint.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException

from wms_analytics.application.dtos.route_dto import (
    PickRouteRequestDTO,
    PickRouteResponseDTO,
)
from wms_analytics.application.use_cases.cached_use_case import (
    CachedPredictionUseCase,
)
from wms_analytics.application.use_cases.errors import (
    PredictionError,
    PredictionValidationError,
)
from wms_analytics.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/routes", tags=["Routes"])


@router.post(
    "/pick-path",
    response_model=PickRouteResponseDTO,
    summary="Order bin locations into a pick route",
    description="""
    Sort the requested bin locations by zone, aisle and shelf and estimate the
    distance and time of a closed tour from and back to `start_point`.
    """,
)
@inject
async def optimize_pick_path(
    payload: PickRouteRequestDTO,
    use_case: CachedPredictionUseCase = Depends(
        Provide[AppContainer.optimize_pick_route_use_case]
    ),
) -> PickRouteResponseDTO:
    try:
        return await use_case.execute(payload)
    except PredictionValidationError as exc:
        raise HTTPException(
            status_code=422, detail={"message": str(exc), **exc.details}
        )
    except PredictionError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:  # pragma: no cover
        logger.error("route.optimize.unexpected_error", error=str(exc), exc_info=exc)
        raise HTTPException(status_code=500, detail="Internal server error")
