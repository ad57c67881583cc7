"""
Application DTOs - Pick route

Payloads for ordering warehouse bin locations into a pick tour.
"""

from typing import Annotated, List, Optional

from pydantic import BaseModel, Field

from wms_analytics.application.dtos.prediction_dto import PredictionEnvelopeDTO
from wms_analytics.domain.entities.route import PickPath
from wms_analytics.shared.consts import BIN_LOCATION_PATTERN

MAX_ROUTE_LOCATIONS = 1000

LocationCode = Annotated[str, Field(pattern=BIN_LOCATION_PATTERN)]


class PickRouteRequestDTO(BaseModel):
    """Bin locations to visit, formatted ``<Zone>-<Aisle>-<Shelf>``."""

    locations: List[LocationCode] = Field(
        max_length=MAX_ROUTE_LOCATIONS,
        description="List of bin locations to visit (format: A-01-01)",
    )
    start_point: Optional[LocationCode] = Field(
        default=None, description="Starting location (defaults to the depot)"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "locations": ["B-02-05", "A-01-03", "A-03-01"],
                "start_point": "A-01-01",
            }
        }
    }


class RouteOptimizationDTO(BaseModel):
    algorithm: str
    zones_optimized: int


class PickRoutePayloadDTO(BaseModel):
    locations: List[str]
    optimized_path: List[str]
    start_point: str
    total_distance_meters: int = Field(ge=0)
    estimated_time_seconds: int = Field(ge=0)
    estimated_time_minutes: int = Field(ge=0)
    optimization: RouteOptimizationDTO

    @classmethod
    def from_domain(
        cls,
        locations: List[str],
        start_point: str,
        path: PickPath,
        estimated_time_minutes: int,
    ) -> "PickRoutePayloadDTO":
        return cls(
            locations=list(locations),
            optimized_path=path.codes,
            start_point=start_point,
            total_distance_meters=path.total_distance,
            estimated_time_seconds=path.estimated_time,
            estimated_time_minutes=estimated_time_minutes,
            optimization=RouteOptimizationDTO(
                algorithm=path.algorithm, zones_optimized=path.zones_optimized
            ),
        )


class PickRouteResponseDTO(PredictionEnvelopeDTO):
    """DTO returned by the pick route endpoint."""

    prediction: PickRoutePayloadDTO
