"""
Domain Entities Package

This package contains the core domain entities of the analytics engine.
"""

from .demand import DemandForecast, ForecastPoint, ForecastStatistics
from .errors import DomainError, InvalidBinLocationError
from .health import ApplicationInfo, DependencyStatus, ServiceStatus, SystemHealth
from .order import (
    BatchDurationResult,
    BatchItemFailure,
    BatchItemPrediction,
    BatchOrder,
    BatchSummary,
    DurationBreakdown,
    DurationPrediction,
    OrderFeatures,
)
from .route import BinLocation, PickPath

__all__ = [
    "OrderFeatures",
    "DurationBreakdown",
    "DurationPrediction",
    "BatchOrder",
    "BatchItemPrediction",
    "BatchItemFailure",
    "BatchSummary",
    "BatchDurationResult",
    "ForecastPoint",
    "ForecastStatistics",
    "DemandForecast",
    "BinLocation",
    "PickPath",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "ApplicationInfo",
    "DomainError",
    "InvalidBinLocationError",
]
