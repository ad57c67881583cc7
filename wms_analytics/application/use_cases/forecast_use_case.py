"""
Application Use Case - Demand forecast

Projects daily demand for a SKU and summarises the horizon.
"""

from __future__ import annotations

from datetime import date
from typing import Callable

import structlog

from wms_analytics.application.dtos.forecast_dto import (
    DemandForecastPayloadDTO,
    DemandForecastRequestDTO,
    DemandForecastResponseDTO,
)
from wms_analytics.application.dtos.prediction_dto import (
    PredictionMetadataDTO,
    new_prediction_id,
)
from wms_analytics.domain.services.demand_forecaster import DemandForecaster
from wms_analytics.shared.consts import EnumModelVersion

logger = structlog.get_logger(__name__)


class ForecastDemandUseCase:
    """Coordinates a demand forecast for one SKU."""

    def __init__(
        self,
        forecaster: DemandForecaster,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.forecaster = forecaster
        self._today = today

    async def execute(
        self, request: DemandForecastRequestDTO
    ) -> DemandForecastResponseDTO:
        logger.info(
            "forecast.start",
            sku_id=request.sku_id,
            historical_days=len(request.historical_data),
            horizon_days=request.forecast_horizon_days,
        )

        forecast = self.forecaster.forecast(
            request.historical_data,
            request.forecast_horizon_days,
            start_date=self._today(),
        )

        logger.info(
            "forecast.completed",
            sku_id=request.sku_id,
            total_demand=forecast.statistics.total_demand,
            confidence=forecast.confidence,
        )

        return DemandForecastResponseDTO(
            prediction_id=new_prediction_id("forecast"),
            model_version=EnumModelVersion.DEMAND.value,
            confidence=forecast.confidence,
            prediction=DemandForecastPayloadDTO.from_domain(
                request.sku_id, request.forecast_horizon_days, forecast
            ),
            metadata=PredictionMetadataDTO(
                model_type="demand_forecasting",
                algorithm="weighted_moving_average_trend",
                extras={
                    "historical_days": forecast.historical_days,
                    "jitter_enabled": self.forecaster.jitter_enabled,
                    "calendar_aligned_seasonality": (
                        self.forecaster.calendar_aligned_seasonality
                    ),
                },
            ),
        )
