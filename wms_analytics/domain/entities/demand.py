"""Domain entities for SKU demand forecasting."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class ForecastPoint:
    """Projected demand for one day of the horizon."""

    day: int
    forecast_date: date
    forecast_quantity: int


@dataclass(slots=True)
class ForecastStatistics:
    total_demand: int
    average_daily: int
    peak_day: int


@dataclass(slots=True)
class DemandForecast:
    """Result of projecting a historical daily demand series forward."""

    confidence: float
    statistics: ForecastStatistics
    historical_days: int
    points: List[ForecastPoint] = field(default_factory=list)
    moving_average_7: Optional[float] = None
    moving_average_30: Optional[float] = None

    @property
    def quantities(self) -> List[int]:
        return [point.forecast_quantity for point in self.points]
