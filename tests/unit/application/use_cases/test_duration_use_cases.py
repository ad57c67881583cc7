from __future__ import annotations

import pytest

from wms_analytics.application.dtos.duration_dto import (
    BatchDurationRequestDTO,
    OrderFeaturesDTO,
)
from wms_analytics.application.use_cases.duration_use_cases import (
    NOT_AN_OBJECT_ERROR,
    UNKNOWN_ORDER_ID,
    BatchPredictDurationUseCase,
    PredictOrderDurationUseCase,
)


@pytest.mark.asyncio
async def test_predict_order_duration_use_case_wraps_envelope(sample_order_payload):
    use_case = PredictOrderDurationUseCase()

    response = await use_case.execute(OrderFeaturesDTO(**sample_order_payload))

    assert response.prediction_id.startswith("pred-")
    assert response.model_version == "heuristic-v1.0"
    assert response.confidence == 0.85
    assert response.prediction.duration_minutes == 84
    assert response.prediction.duration_hours == 1.4
    assert response.prediction.breakdown.picking == pytest.approx(37.6875)
    assert response.metadata.model_type == "duration_prediction"
    assert response.metadata.algorithm == "weighted_heuristic"


@pytest.mark.asyncio
async def test_prediction_ids_are_unique(sample_order_payload):
    use_case = PredictOrderDurationUseCase()
    dto = OrderFeaturesDTO(**sample_order_payload)

    first = await use_case.execute(dto)
    second = await use_case.execute(dto)

    assert first.prediction_id != second.prediction_id


@pytest.mark.asyncio
async def test_batch_use_case_isolates_invalid_orders(sample_order_payload):
    request = BatchDurationRequestDTO(
        orders=[
            {**sample_order_payload, "order_id": "ORD-1"},
            {**sample_order_payload, "hour_of_day": 42},
            {**sample_order_payload, "order_id": "ORD-3", "priority_level": 1},
        ]
    )

    response = await BatchPredictDurationUseCase().execute(request)

    payload = response.prediction
    assert response.prediction_id.startswith("batch-")
    assert payload.count == 2
    assert [item.order_id for item in payload.predictions] == ["ORD-1", "ORD-3"]
    assert len(payload.failures) == 1
    assert payload.failures[0].index == 1
    assert payload.failures[0].order_id == UNKNOWN_ORDER_ID
    assert "hour_of_day" in payload.failures[0].error
    assert payload.summary.total_orders == 3
    assert payload.summary.successful_orders == 2
    assert payload.summary.failed_orders == 1
    assert payload.summary.average_duration == 77
    assert payload.summary.high_priority_count == 1


@pytest.mark.asyncio
async def test_batch_use_case_handles_empty_batch():
    response = await BatchPredictDurationUseCase().execute(
        BatchDurationRequestDTO(orders=[])
    )

    assert response.prediction.count == 0
    assert response.prediction.summary.average_duration == 0


@pytest.mark.asyncio
async def test_batch_high_priority_count_includes_rejected_orders(sample_order_payload):
    missing_item_count = {
        key: value
        for key, value in sample_order_payload.items()
        if key != "order_item_count"
    }
    request = BatchDurationRequestDTO(
        orders=[
            sample_order_payload,
            {**missing_item_count, "order_id": "ORD-2", "priority_level": 1},
            {**missing_item_count, "priority_level": "1"},
            {**missing_item_count, "priority_level": True},
            {**sample_order_payload, "priority_level": "2"},
        ]
    )

    response = await BatchPredictDurationUseCase().execute(request)

    summary = response.prediction.summary
    failures = response.prediction.failures
    assert [failure.index for failure in failures] == [1, 2, 3]
    assert failures[0].order_id == "ORD-2"
    assert "order_item_count" in failures[0].error
    assert summary.successful_orders == 2
    assert summary.high_priority_count == 2


@pytest.mark.asyncio
async def test_batch_reports_non_object_orders_as_failures(sample_order_payload):
    request = BatchDurationRequestDTO(
        orders=[{**sample_order_payload, "order_id": "ORD-1"}, 5, None, ["ORD-4"]]
    )

    response = await BatchPredictDurationUseCase().execute(request)

    payload = response.prediction
    assert payload.count == 1
    assert [failure.index for failure in payload.failures] == [1, 2, 3]
    assert all(failure.order_id == UNKNOWN_ORDER_ID for failure in payload.failures)
    assert all(failure.error == NOT_AN_OBJECT_ERROR for failure in payload.failures)
    assert payload.summary.total_orders == 4
    assert payload.summary.high_priority_count == 0
