"""
Application DTOs - Order duration

Request and response payloads for single and batch order fulfillment
duration predictions.
"""

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, Field

from wms_analytics.application.dtos.prediction_dto import PredictionEnvelopeDTO
from wms_analytics.domain.entities.order import (
    BatchDurationResult,
    BatchItemFailure,
    BatchItemPrediction,
    BatchSummary,
    DurationBreakdown,
    OrderFeatures,
)

MAX_BATCH_ORDERS = 1000
MAX_ORDER_ITEMS = 100_000
MAX_ORDER_SKUS = 100_000
# One zone per bin location letter (A-Z)
MAX_ZONE_DIVERSITY = 26


class OrderFeaturesDTO(BaseModel):
    """Order characteristics accepted by the duration predictor."""

    order_item_count: int = Field(
        ge=1,
        le=MAX_ORDER_ITEMS,
        description="Number of items in the order",
        validation_alias=AliasChoices("order_item_count", "item_count"),
    )
    order_total_value: Optional[float] = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        description="Total order value (not used by the heuristic)",
        validation_alias=AliasChoices("order_total_value", "total_value"),
    )
    hour_of_day: int = Field(ge=0, le=23, description="Hour of day (0-23)")
    day_of_week: int = Field(
        ge=0, le=6, description="Day of week (0=Monday, 6=Sunday)"
    )
    sku_count: int = Field(
        ge=1, le=MAX_ORDER_SKUS, description="Number of unique SKUs"
    )
    zone_diversity: int = Field(
        ge=1,
        le=MAX_ZONE_DIVERSITY,
        description="Number of different warehouse zones",
    )
    priority_level: int = Field(
        ge=1, le=4, description="Order priority (1=highest, 4=lowest)"
    )

    def to_domain(self) -> OrderFeatures:
        return OrderFeatures(
            item_count=self.order_item_count,
            hour_of_day=self.hour_of_day,
            day_of_week=self.day_of_week,
            sku_count=self.sku_count,
            zone_diversity=self.zone_diversity,
            priority_level=self.priority_level,
            total_value=self.order_total_value or 0.0,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "order_item_count": 10,
                "order_total_value": 249.9,
                "hour_of_day": 10,
                "day_of_week": 2,
                "sku_count": 5,
                "zone_diversity": 2,
                "priority_level": 3,
            }
        }
    }


class BatchOrderDTO(OrderFeaturesDTO):
    """One order of a batch request."""

    order_id: Optional[str] = Field(default=None, description="Caller order id")


class DurationBreakdownDTO(BaseModel):
    picking: float
    packing: float
    travel: float
    overhead: float

    @classmethod
    def from_domain(cls, breakdown: DurationBreakdown) -> "DurationBreakdownDTO":
        return cls(**breakdown.as_dict())


class DurationPayloadDTO(BaseModel):
    duration_minutes: int = Field(ge=0)
    duration_hours: float = Field(ge=0)
    breakdown: DurationBreakdownDTO


class DurationPredictionResponseDTO(PredictionEnvelopeDTO):
    """DTO returned by the order duration endpoint."""

    prediction: DurationPayloadDTO


class BatchDurationRequestDTO(BaseModel):
    """
    Batch of orders to predict.

    Orders are kept as raw objects here and validated one by one, so that a
    malformed order is reported without rejecting the rest of the batch.
    """

    orders: List[Any] = Field(
        max_length=MAX_BATCH_ORDERS, description="Array of order features"
    )


class BatchItemPredictionDTO(BaseModel):
    order_id: str
    duration_minutes: int
    confidence: float

    @classmethod
    def from_domain(cls, item: BatchItemPrediction) -> "BatchItemPredictionDTO":
        return cls(
            order_id=item.order_id,
            duration_minutes=item.duration_minutes,
            confidence=item.confidence,
        )


class BatchItemFailureDTO(BaseModel):
    index: int = Field(description="Position of the order in the request")
    order_id: str
    error: str

    @classmethod
    def from_domain(cls, failure: BatchItemFailure) -> "BatchItemFailureDTO":
        return cls(index=failure.index, order_id=failure.order_id, error=failure.error)


class BatchSummaryDTO(BaseModel):
    total_orders: int
    successful_orders: int
    failed_orders: int
    average_duration: int
    high_priority_count: int

    @classmethod
    def from_domain(cls, summary: BatchSummary) -> "BatchSummaryDTO":
        return cls(
            total_orders=summary.total_orders,
            successful_orders=summary.successful_orders,
            failed_orders=summary.failed_orders,
            average_duration=summary.average_duration,
            high_priority_count=summary.high_priority_count,
        )


class BatchPayloadDTO(BaseModel):
    count: int
    predictions: List[BatchItemPredictionDTO] = Field(default_factory=list)
    failures: List[BatchItemFailureDTO] = Field(default_factory=list)
    summary: BatchSummaryDTO

    @classmethod
    def from_domain(cls, result: BatchDurationResult) -> "BatchPayloadDTO":
        return cls(
            count=len(result.predictions),
            predictions=[
                BatchItemPredictionDTO.from_domain(item) for item in result.predictions
            ],
            failures=[
                BatchItemFailureDTO.from_domain(item) for item in result.failures
            ],
            summary=BatchSummaryDTO.from_domain(result.summary),
        )


class BatchDurationResponseDTO(PredictionEnvelopeDTO):
    """DTO returned by the batch duration endpoint."""

    prediction: BatchPayloadDTO
