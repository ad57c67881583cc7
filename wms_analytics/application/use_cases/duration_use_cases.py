"""
Application Use Cases - Order duration

Single and batch fulfillment duration predictions wrapped in the standard
prediction envelope.
"""

from __future__ import annotations

from typing import Any, List

import structlog
from pydantic import ValidationError

from wms_analytics.application.dtos.duration_dto import (
    BatchDurationRequestDTO,
    BatchDurationResponseDTO,
    BatchOrderDTO,
    BatchPayloadDTO,
    DurationBreakdownDTO,
    DurationPayloadDTO,
    DurationPredictionResponseDTO,
    OrderFeaturesDTO,
)
from wms_analytics.application.dtos.prediction_dto import (
    PredictionMetadataDTO,
    new_prediction_id,
)
from wms_analytics.domain.entities.order import BatchItemFailure, BatchOrder
from wms_analytics.domain.services.batch_predictor import (
    HIGH_PRIORITY_MAX_LEVEL,
    predict_duration_batch,
)
from wms_analytics.domain.services.duration_predictor import predict_order_duration
from wms_analytics.domain.services.numeric import round_half_up
from wms_analytics.shared.consts import EnumModelVersion

logger = structlog.get_logger(__name__)

UNKNOWN_ORDER_ID = "unknown"
NOT_AN_OBJECT_ERROR = "order must be a JSON object"


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return "; ".join(parts)


class PredictOrderDurationUseCase:
    """Predicts how long a single order takes to fulfil."""

    async def execute(self, request: OrderFeaturesDTO) -> DurationPredictionResponseDTO:
        prediction = predict_order_duration(request.to_domain())

        logger.info(
            "duration.predict.completed",
            item_count=request.order_item_count,
            priority_level=request.priority_level,
            duration_minutes=prediction.duration_minutes,
            confidence=prediction.confidence,
        )

        return DurationPredictionResponseDTO(
            prediction_id=new_prediction_id("pred"),
            model_version=EnumModelVersion.DURATION.value,
            confidence=prediction.confidence,
            prediction=DurationPayloadDTO(
                duration_minutes=prediction.duration_minutes,
                duration_hours=round_half_up(prediction.duration_minutes / 60 * 100)
                / 100,
                breakdown=DurationBreakdownDTO.from_domain(prediction.breakdown),
            ),
            metadata=PredictionMetadataDTO(
                model_type="duration_prediction", algorithm="weighted_heuristic"
            ),
        )


class BatchPredictDurationUseCase:
    """
    Predicts durations for many orders at once.

    Each raw order is validated on its own; invalid orders are returned as
    failures next to the successful predictions. Elements that are not JSON
    objects fail the same way. High priority orders are counted over the
    whole submission; a rejected order counts when its raw
    ``priority_level`` is an integer of at most 2.
    """

    async def execute(self, request: BatchDurationRequestDTO) -> BatchDurationResponseDTO:
        orders: List[BatchOrder] = []
        rejected: List[BatchItemFailure] = []
        high_priority_count = 0

        for index, raw in enumerate(request.orders):
            order_id = self._order_id(raw)
            if not isinstance(raw, dict):
                rejected.append(
                    BatchItemFailure(
                        index=index,
                        order_id=order_id,
                        error=NOT_AN_OBJECT_ERROR,
                    )
                )
                continue
            try:
                dto = BatchOrderDTO.model_validate(raw)
            except ValidationError as exc:
                if self._is_high_priority(raw):
                    high_priority_count += 1
                rejected.append(
                    BatchItemFailure(
                        index=index,
                        order_id=order_id,
                        error=_describe_validation_error(exc),
                    )
                )
                continue
            if dto.priority_level <= HIGH_PRIORITY_MAX_LEVEL:
                high_priority_count += 1
            orders.append(
                BatchOrder(index=index, order_id=order_id, features=dto.to_domain())
            )

        result = predict_duration_batch(orders, rejected, high_priority_count)

        if result.failures:
            logger.warning(
                "duration.batch.items_failed",
                failed=len(result.failures),
                total=result.summary.total_orders,
            )
        logger.info(
            "duration.batch.completed",
            total=result.summary.total_orders,
            average_duration=result.summary.average_duration,
        )

        return BatchDurationResponseDTO(
            prediction_id=new_prediction_id("batch"),
            model_version=EnumModelVersion.DURATION.value,
            prediction=BatchPayloadDTO.from_domain(result),
            metadata=PredictionMetadataDTO(
                model_type="duration_prediction", algorithm="weighted_heuristic"
            ),
        )

    @staticmethod
    def _order_id(raw: Any) -> str:
        if not isinstance(raw, dict):
            return UNKNOWN_ORDER_ID
        order_id = raw.get("order_id")
        return str(order_id) if order_id else UNKNOWN_ORDER_ID

    @staticmethod
    def _is_high_priority(raw: Any) -> bool:
        if not isinstance(raw, dict):
            return False
        level = raw.get("priority_level")
        # JSON true/false arrive as bool, which is an int subclass
        if isinstance(level, bool) or not isinstance(level, int):
            return False
        return level <= HIGH_PRIORITY_MAX_LEVEL
