"""
Application DTOs - Demand forecast

Payloads for projecting daily SKU demand from a historical series.
"""

from datetime import date
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field

from wms_analytics.application.dtos.prediction_dto import PredictionEnvelopeDTO
from wms_analytics.domain.entities.demand import (
    DemandForecast,
    ForecastPoint,
    ForecastStatistics,
)

MAX_HISTORY_POINTS = 3660
MAX_HORIZON_DAYS = 365
MAX_DAILY_QUANTITY = 1_000_000_000


class DemandForecastRequestDTO(BaseModel):
    """Historical daily demand for a SKU, oldest first."""

    sku_id: str = Field(min_length=1, description="SKU identifier")
    historical_data: List[
        Annotated[float, Field(ge=0, le=MAX_DAILY_QUANTITY, allow_inf_nan=False)]
    ] = Field(
        max_length=MAX_HISTORY_POINTS,
        description="Historical daily demand (last 30+ days recommended)",
    )
    forecast_horizon_days: int = Field(
        ge=1, le=MAX_HORIZON_DAYS, description="Number of days to forecast"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "sku_id": "SKU-00042",
                "historical_data": [12, 15, 11, 14, 18, 7, 5, 13, 16, 12],
                "forecast_horizon_days": 7,
            }
        }
    }


class ForecastPointDTO(BaseModel):
    """One forecast day."""

    day: int = Field(ge=1, description="Offset from today (1 = tomorrow)")
    forecast_date: date
    forecast_quantity: int = Field(ge=0)

    @classmethod
    def from_domain(cls, point: ForecastPoint) -> "ForecastPointDTO":
        return cls(
            day=point.day,
            forecast_date=point.forecast_date,
            forecast_quantity=point.forecast_quantity,
        )


class ForecastStatisticsDTO(BaseModel):
    total_demand: int
    average_daily: int
    peak_day: int = Field(description="Day (1-based) with the highest demand")

    @classmethod
    def from_domain(cls, stats: ForecastStatistics) -> "ForecastStatisticsDTO":
        return cls(
            total_demand=stats.total_demand,
            average_daily=stats.average_daily,
            peak_day=stats.peak_day,
        )


class DemandForecastPayloadDTO(BaseModel):
    sku_id: str
    forecast_horizon_days: int
    forecasts: List[ForecastPointDTO] = Field(default_factory=list)
    statistics: ForecastStatisticsDTO
    moving_average_7: Optional[float] = None
    moving_average_30: Optional[float] = None

    @classmethod
    def from_domain(
        cls, sku_id: str, horizon_days: int, forecast: DemandForecast
    ) -> "DemandForecastPayloadDTO":
        return cls(
            sku_id=sku_id,
            forecast_horizon_days=horizon_days,
            forecasts=[ForecastPointDTO.from_domain(p) for p in forecast.points],
            statistics=ForecastStatisticsDTO.from_domain(forecast.statistics),
            moving_average_7=forecast.moving_average_7,
            moving_average_30=forecast.moving_average_30,
        )


class DemandForecastResponseDTO(PredictionEnvelopeDTO):
    """DTO returned by the demand forecast endpoint."""

    prediction: DemandForecastPayloadDTO
