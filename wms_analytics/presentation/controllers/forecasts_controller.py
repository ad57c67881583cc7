"""
Presentation Layer - Forecasts Controller

Exposes the SKU demand forecast endpoint.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException

from wms_analytics.application.dtos.forecast_dto import (
    DemandForecastRequestDTO,
    DemandForecastResponseDTO,
)
from wms_analytics.application.use_cases.cached_use_case import (
    CachedPredictionUseCase,
)
from wms_analytics.application.use_cases.errors import PredictionError
from wms_analytics.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/forecasts", tags=["Forecasts"])


@router.post(
    "/demand",
    response_model=DemandForecastResponseDTO,
    summary="Forecast daily SKU demand",
    description="""
    Project daily demand for the next `forecast_horizon_days` days from a
    history of daily quantities (oldest first). Fewer than seven days of
    history produce a flat forecast of the historical mean.
    """,
)
@inject
async def forecast_demand(
    payload: DemandForecastRequestDTO,
    use_case: CachedPredictionUseCase = Depends(
        Provide[AppContainer.forecast_demand_use_case]
    ),
) -> DemandForecastResponseDTO:
    try:
        return await use_case.execute(payload)
    except PredictionError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:  # pragma: no cover
        logger.error(
            "forecast.unexpected_error",
            sku_id=payload.sku_id,
            error=str(exc),
            exc_info=exc,
        )
        raise HTTPException(status_code=500, detail="Internal server error")
