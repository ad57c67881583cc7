"""Infrastructure implementation for system health checks."""

from __future__ import annotations

from time import perf_counter
from typing import List

from wms_analytics.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from wms_analytics.domain.entities.order import OrderFeatures
from wms_analytics.domain.ports.health_check import IHealthCheckService
from wms_analytics.domain.services.duration_predictor import predict_order_duration
from wms_analytics.infrastructure.cache import InMemoryPredictionCache

_REFERENCE_ORDER = OrderFeatures(
    item_count=1,
    hour_of_day=12,
    day_of_week=2,
    sku_count=1,
    zone_diversity=1,
    priority_level=3,
)


class HealthCheckService(IHealthCheckService):
    """Report on the in-process components of the analytics engine."""

    def __init__(self, prediction_cache: InMemoryPredictionCache) -> None:
        self._prediction_cache = prediction_cache

    async def evaluate(self) -> SystemHealth:
        dependency_statuses: List[DependencyStatus] = [
            self._check_prediction_cache(),
            self._check_heuristics(),
        ]
        return SystemHealth.from_dependencies(dependency_statuses)

    def _check_prediction_cache(self) -> DependencyStatus:
        start = perf_counter()
        try:
            purged = self._prediction_cache.purge_expired()
            entries = len(self._prediction_cache)
        except Exception as exc:  # pragma: no cover
            return DependencyStatus(
                name="prediction_cache",
                status=ServiceStatus.DEGRADED,
                message=f"Prediction cache check failed: {exc}",
            )
        return DependencyStatus(
            name="prediction_cache",
            status=ServiceStatus.UP,
            message="In-memory prediction cache available",
            latency_ms=self._elapsed_ms(start),
            details={
                "entries": entries,
                "max_entries": self._prediction_cache.max_entries,
                "purged": purged,
            },
        )

    def _check_heuristics(self) -> DependencyStatus:
        start = perf_counter()
        try:
            reference = predict_order_duration(_REFERENCE_ORDER)
        except Exception as exc:  # pragma: no cover
            return DependencyStatus(
                name="heuristics",
                status=ServiceStatus.DOWN,
                message=f"Duration heuristic failed: {exc}",
            )
        return DependencyStatus(
            name="heuristics",
            status=ServiceStatus.UP,
            message="Duration heuristic evaluated",
            latency_ms=self._elapsed_ms(start),
            details={"reference_duration_minutes": reference.duration_minutes},
        )

    @staticmethod
    def _elapsed_ms(start: float) -> float:
        return round((perf_counter() - start) * 1000, 3)
