"""Domain entities for order fulfillment duration predictions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True, slots=True)
class OrderFeatures:
    """Shape and timing of a warehouse order."""

    item_count: int
    hour_of_day: int
    day_of_week: int
    sku_count: int
    zone_diversity: int
    priority_level: int
    total_value: float = 0.0


@dataclass(slots=True)
class DurationBreakdown:
    """Split of a predicted duration into warehouse activities (minutes)."""

    picking: float
    packing: float
    travel: float
    overhead: float

    @property
    def total(self) -> float:
        return self.picking + self.packing + self.travel + self.overhead

    def as_dict(self) -> Dict[str, float]:
        return {
            "picking": self.picking,
            "packing": self.packing,
            "travel": self.travel,
            "overhead": self.overhead,
        }


@dataclass(slots=True)
class DurationPrediction:
    duration_minutes: int
    confidence: float
    breakdown: DurationBreakdown


@dataclass(frozen=True, slots=True)
class BatchOrder:
    """An order submitted as part of a batch.

    ``index`` is the position of the order in the submitted batch.
    """

    index: int
    order_id: str
    features: OrderFeatures


@dataclass(slots=True)
class BatchItemPrediction:
    order_id: str
    duration_minutes: int
    confidence: float


@dataclass(slots=True)
class BatchItemFailure:
    """An order of a batch that could not be predicted."""

    index: int
    order_id: str
    error: str


@dataclass(slots=True)
class BatchSummary:
    total_orders: int
    successful_orders: int
    failed_orders: int
    average_duration: int
    high_priority_count: int


@dataclass(slots=True)
class BatchDurationResult:
    summary: BatchSummary
    predictions: List[BatchItemPrediction] = field(default_factory=list)
    failures: List[BatchItemFailure] = field(default_factory=list)
