"""
Presentation Layer - Predictions Controller

Exposes endpoints predicting order fulfillment durations, one order at a
time or as a batch.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException

from wms_analytics.application.dtos.duration_dto import (
    BatchDurationRequestDTO,
    BatchDurationResponseDTO,
    DurationPredictionResponseDTO,
    OrderFeaturesDTO,
)
from wms_analytics.application.use_cases.cached_use_case import (
    CachedPredictionUseCase,
)
from wms_analytics.application.use_cases.duration_use_cases import (
    BatchPredictDurationUseCase,
)
from wms_analytics.application.use_cases.errors import (
    PredictionError,
    PredictionValidationError,
)
from wms_analytics.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/predictions", tags=["Predictions"])


@router.post(
    "/order-duration",
    response_model=DurationPredictionResponseDTO,
    summary="Predict order fulfillment duration",
    description="""
    Estimate how long an order takes to pick, pack and hand off from its item,
    SKU and zone counts, its priority and when it is released. The response
    includes a picking/packing/travel/overhead breakdown and a fixed heuristic
    confidence score.
    """,
)
@inject
async def predict_order_duration(
    payload: OrderFeaturesDTO,
    use_case: CachedPredictionUseCase = Depends(
        Provide[AppContainer.predict_order_duration_use_case]
    ),
) -> DurationPredictionResponseDTO:
    try:
        return await use_case.execute(payload)
    except PredictionValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except PredictionError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:  # pragma: no cover
        logger.error(
            "duration.predict.unexpected_error", error=str(exc), exc_info=exc
        )
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post(
    "/order-duration/batch",
    response_model=BatchDurationResponseDTO,
    summary="Predict durations for multiple orders at once",
    description="""
    Predict every order of the batch independently. Orders that fail
    validation are listed under `failures` with their position in the request
    and do not prevent the remaining orders from being predicted.
    """,
)
@inject
async def predict_order_duration_batch(
    payload: BatchDurationRequestDTO,
    use_case: BatchPredictDurationUseCase = Depends(
        Provide[AppContainer.batch_predict_duration_use_case]
    ),
) -> BatchDurationResponseDTO:
    try:
        return await use_case.execute(payload)
    except PredictionError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:  # pragma: no cover
        logger.error("duration.batch.unexpected_error", error=str(exc), exc_info=exc)
        raise HTTPException(status_code=500, detail="Internal server error")
