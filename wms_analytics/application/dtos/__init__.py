"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .duration_dto import (
    BatchDurationRequestDTO,
    BatchDurationResponseDTO,
    BatchOrderDTO,
    DurationPredictionResponseDTO,
    OrderFeaturesDTO,
)
from .forecast_dto import (
    DemandForecastRequestDTO,
    DemandForecastResponseDTO,
    ForecastPointDTO,
)
from .health_dto import ApplicationInfoDTO, DependencyStatusDTO, SystemHealthDTO
from .prediction_dto import PredictionEnvelopeDTO, PredictionMetadataDTO
from .route_dto import PickRouteRequestDTO, PickRouteResponseDTO

__all__ = [
    "OrderFeaturesDTO",
    "BatchOrderDTO",
    "DurationPredictionResponseDTO",
    "BatchDurationRequestDTO",
    "BatchDurationResponseDTO",
    "DemandForecastRequestDTO",
    "DemandForecastResponseDTO",
    "ForecastPointDTO",
    "PickRouteRequestDTO",
    "PickRouteResponseDTO",
    "PredictionEnvelopeDTO",
    "PredictionMetadataDTO",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
]
