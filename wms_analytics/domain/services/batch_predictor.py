"""
Domain service - batch duration predictions.

Applies the duration heuristic to every order independently. Items do not
share state, so the fan-out is safe to parallelise; results keep input order.
"""

from typing import List, Optional, Sequence

from wms_analytics.domain.entities.order import (
    BatchDurationResult,
    BatchItemFailure,
    BatchItemPrediction,
    BatchOrder,
    BatchSummary,
)
from wms_analytics.domain.services.duration_predictor import predict_order_duration
from wms_analytics.domain.services.numeric import mean, round_half_up

HIGH_PRIORITY_MAX_LEVEL = 2


def summarize_batch(
    predictions: Sequence[BatchItemPrediction],
    failures: Sequence[BatchItemFailure],
    high_priority_count: int,
) -> BatchSummary:
    durations = [item.duration_minutes for item in predictions]
    return BatchSummary(
        total_orders=len(predictions) + len(failures),
        successful_orders=len(predictions),
        failed_orders=len(failures),
        average_duration=round_half_up(mean(durations)),
        high_priority_count=high_priority_count,
    )


def predict_duration_batch(
    orders: Sequence[BatchOrder],
    rejected: Sequence[BatchItemFailure] = (),
    high_priority_count: Optional[int] = None,
) -> BatchDurationResult:
    """Predict every order of a batch.

    ``rejected`` carries orders already refused upstream so that the summary
    accounts for the whole submitted batch. ``high_priority_count`` likewise
    counts every submitted order with ``priority_level <= 2``, rejected ones
    included; when omitted it is counted over ``orders``. An order whose
    numbers cannot be evaluated (for instance overflowing values) becomes a
    failure instead of aborting the batch.
    """
    predictions: List[BatchItemPrediction] = []
    failures: List[BatchItemFailure] = list(rejected)
    if high_priority_count is None:
        high_priority_count = sum(
            1
            for order in orders
            if order.features.priority_level <= HIGH_PRIORITY_MAX_LEVEL
        )

    for order in orders:
        try:
            prediction = predict_order_duration(order.features)
        except (ArithmeticError, ValueError) as exc:
            failures.append(
                BatchItemFailure(index=order.index, order_id=order.order_id, error=str(exc))
            )
            continue
        predictions.append(
            BatchItemPrediction(
                order_id=order.order_id,
                duration_minutes=prediction.duration_minutes,
                confidence=prediction.confidence,
            )
        )

    failures.sort(key=lambda failure: failure.index)
    return BatchDurationResult(
        summary=summarize_batch(predictions, failures, high_priority_count),
        predictions=predictions,
        failures=failures,
    )
