"""Domain ports package."""

from .health_check import IHealthCheckService
from .prediction_cache import IPredictionCache
from .random_source import IRandomSource

__all__ = ["IHealthCheckService", "IPredictionCache", "IRandomSource"]
