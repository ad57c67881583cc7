"""
Domain service - order fulfillment duration.

Weighted heuristic estimating how long an order takes from release to
hand-off. All weights are in minutes and reflect typical warehouse
throughput; the function is pure and O(1).
"""

from typing import Dict

from wms_analytics.domain.entities.order import (
    DurationBreakdown,
    DurationPrediction,
    OrderFeatures,
)
from wms_analytics.domain.services.numeric import round_half_up

MINUTES_PER_ITEM = 3.5
MINUTES_PER_SKU = 2.0
MINUTES_PER_ZONE = 5.0
FIXED_OVERHEAD_MINUTES = 15.0

PRIORITY_MULTIPLIERS: Dict[int, float] = {1: 0.8, 2: 0.9, 3: 1.0, 4: 1.2}
PEAK_HOUR_WINDOWS = ((9, 11), (14, 16))
PEAK_HOUR_MULTIPLIER = 1.25
BUSY_DAYS = (0, 4)
BUSY_DAY_MULTIPLIER = 1.15
WEEKEND_DAYS = (5, 6)
WEEKEND_MULTIPLIER = 0.85

BREAKDOWN_SHARES = {"picking": 0.45, "packing": 0.25, "travel": 0.20, "overhead": 0.10}

BASE_CONFIDENCE = 0.85
MIN_CONFIDENCE = 0.5
MAX_CONFIDENCE = 0.95


def is_peak_hour(hour_of_day: int) -> bool:
    return any(start <= hour_of_day <= end for start, end in PEAK_HOUR_WINDOWS)


def _day_multiplier(day_of_week: int) -> float:
    if day_of_week in BUSY_DAYS:
        return BUSY_DAY_MULTIPLIER
    if day_of_week in WEEKEND_DAYS:
        return WEEKEND_MULTIPLIER
    return 1.0


def _confidence(features: OrderFeatures) -> float:
    confidence = BASE_CONFIDENCE
    if features.item_count > 50 or features.item_count < 1:
        confidence -= 0.15
    if features.zone_diversity > 4:
        confidence -= 0.10
    if features.sku_count > 20:
        confidence -= 0.05
    return round(max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, confidence)), 2)


def estimate_raw_duration(features: OrderFeatures) -> float:
    """Unrounded duration in minutes, including the fixed overhead."""
    duration = (
        features.item_count * MINUTES_PER_ITEM
        + features.sku_count * MINUTES_PER_SKU
        + features.zone_diversity * MINUTES_PER_ZONE
    )
    # Unknown priority levels are neutral.
    duration *= PRIORITY_MULTIPLIERS.get(features.priority_level, 1.0)
    if is_peak_hour(features.hour_of_day):
        duration *= PEAK_HOUR_MULTIPLIER
    duration *= _day_multiplier(features.day_of_week)
    return duration + FIXED_OVERHEAD_MINUTES


def predict_order_duration(features: OrderFeatures) -> DurationPrediction:
    """Predict fulfillment duration and its activity breakdown for an order.

    Malformed numbers are not rejected here; they yield a meaningless but
    well-formed prediction. Validation belongs to the request boundary.
    """
    duration = estimate_raw_duration(features)
    breakdown = DurationBreakdown(
        **{activity: duration * share for activity, share in BREAKDOWN_SHARES.items()}
    )
    return DurationPrediction(
        duration_minutes=round_half_up(duration),
        confidence=_confidence(features),
        breakdown=breakdown,
    )
