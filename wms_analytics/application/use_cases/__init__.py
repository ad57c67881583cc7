"""
Use Cases Package - Application Layer

This package contains use cases that drive the analytics heuristics.
Use cases translate request DTOs into domain inputs, invoke the domain
services and wrap the results in prediction envelopes.
"""

from .cached_use_case import CachedPredictionUseCase
from .duration_use_cases import BatchPredictDurationUseCase, PredictOrderDurationUseCase
from .errors import PredictionError, PredictionValidationError
from .forecast_use_case import ForecastDemandUseCase
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .route_use_case import OptimizePickRouteUseCase

__all__ = [
    "PredictOrderDurationUseCase",
    "BatchPredictDurationUseCase",
    "ForecastDemandUseCase",
    "OptimizePickRouteUseCase",
    "CachedPredictionUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
    "PredictionError",
    "PredictionValidationError",
]
