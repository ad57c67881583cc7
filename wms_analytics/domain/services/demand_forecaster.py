"""
Domain service - SKU demand forecasting.

Projects daily demand from a trailing 7-day moving average, a week-over-week
trend and fixed weekday seasonality. Cost is O(n) in the history length
plus O(h) in the horizon, so callers should bound both at the boundary.
"""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import List, Optional, Sequence

import numpy as np

from wms_analytics.domain.entities.demand import (
    DemandForecast,
    ForecastPoint,
    ForecastStatistics,
)
from wms_analytics.domain.ports.random_source import IRandomSource
from wms_analytics.domain.services.numeric import (
    finite_or_none,
    mean,
    round_half_up,
    to_quantity,
)

SHORT_WINDOW = 7
LONG_WINDOW = 30
# Monday..Sunday
WEEKDAY_SEASONALITY = (1.00, 1.05, 1.02, 1.00, 1.08, 0.70, 0.50)
JITTER_SPREAD = 0.1


def moving_average(values: Sequence[float], window: int) -> np.ndarray:
    """Trailing moving average; one value per complete window."""
    data = np.asarray(values, dtype=float)
    if window <= 0 or data.size < window:
        return np.empty(0, dtype=float)
    # Huge inputs overflow to inf; callers treat non-finite averages as unknown.
    with np.errstate(over="ignore", invalid="ignore"):
        return np.convolve(data, np.ones(window), mode="valid") / window


def history_confidence(history_length: int) -> float:
    if history_length >= 90:
        return 0.92
    if history_length >= LONG_WINDOW:
        return 0.85
    return 0.70


def summarize(quantities: Sequence[int]) -> ForecastStatistics:
    if not quantities:
        return ForecastStatistics(total_demand=0, average_daily=0, peak_day=0)
    total = int(sum(quantities))
    peak = max(quantities)
    return ForecastStatistics(
        total_demand=total,
        average_daily=round_half_up(total / len(quantities)),
        peak_day=list(quantities).index(peak) + 1,
    )


class DemandForecaster:
    """
    Heuristic demand forecaster.

    Args:
        random_source: Source for the jitter; a seeded ``random.Random``
            makes forecasts reproducible.
        jitter_enabled: Perturb each projected day by up to 5% either way.
        calendar_aligned_seasonality: Index the weekday factors by the real
            weekday of each forecast date. When off, the first forecast day
            uses factor ``horizon_days % 7``, which is how forecasts were
            produced historically.
    """

    def __init__(
        self,
        random_source: Optional[IRandomSource] = None,
        jitter_enabled: bool = True,
        calendar_aligned_seasonality: bool = False,
    ) -> None:
        self._random = random_source or random.Random()
        self.jitter_enabled = jitter_enabled
        self.calendar_aligned_seasonality = calendar_aligned_seasonality

    def forecast(
        self,
        historical: Sequence[float],
        horizon_days: int,
        start_date: Optional[date] = None,
    ) -> DemandForecast:
        """Forecast ``horizon_days`` days following ``start_date`` (default today)."""
        today = start_date or date.today()
        history = [float(value) for value in historical]
        horizon = max(0, int(horizon_days))

        ma7_last: Optional[float] = None
        ma30_last: Optional[float] = None

        if len(history) < SHORT_WINDOW:
            flat = to_quantity(mean(history))
            quantities = [flat] * horizon
        else:
            ma7 = moving_average(history, SHORT_WINDOW)
            if len(history) >= LONG_WINDOW:
                ma30_last = finite_or_none(
                    float(moving_average(history, LONG_WINDOW)[-1])
                )
            ma7_last = finite_or_none(float(ma7[-1]))
            quantities = self._project(ma7, horizon, today)

        points = [
            ForecastPoint(
                day=i + 1,
                forecast_date=today + timedelta(days=i + 1),
                forecast_quantity=quantity,
            )
            for i, quantity in enumerate(quantities)
        ]

        return DemandForecast(
            confidence=history_confidence(len(history)),
            statistics=summarize(quantities),
            historical_days=len(history),
            points=points,
            moving_average_7=ma7_last,
            moving_average_30=ma30_last,
        )

    def _project(self, ma7: np.ndarray, horizon: int, today: date) -> List[int]:
        last = float(ma7[-1])
        reference = float(ma7[max(0, ma7.size - SHORT_WINDOW)])
        trend = (last - reference) / max(1.0, reference)
        offset = self._seasonal_offset(horizon, today)

        quantities: List[int] = []
        for i in range(horizon):
            value = last * (1 + trend * (i + 1))
            value *= WEEKDAY_SEASONALITY[(offset + i) % 7]
            if self.jitter_enabled:
                value += (self._random.random() - 0.5) * value * JITTER_SPREAD
            quantities.append(to_quantity(value))
        return quantities

    def _seasonal_offset(self, horizon: int, today: date) -> int:
        if self.calendar_aligned_seasonality:
            return (today + timedelta(days=1)).weekday()
        return horizon % 7
