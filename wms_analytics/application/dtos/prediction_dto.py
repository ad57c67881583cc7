"""
Application DTOs - Prediction envelope

Every prediction response is wrapped in the same envelope: a generated id,
the heuristic's version tag, a confidence score and descriptive metadata.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, Field


def new_prediction_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex}"


class PredictionMetadataDTO(BaseModel):
    """Describes which heuristic produced a prediction and when."""

    model_type: Optional[str] = Field(
        default=None, description="Kind of prediction (e.g. duration_prediction)"
    )
    algorithm: Optional[str] = Field(
        default=None, description="Heuristic used to compute the prediction"
    )
    predicted_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Timestamp of the computation (ISO8601)",
    )
    extras: Dict[str, Any] = Field(
        default_factory=dict, description="Additional prediction diagnostics"
    )


class PredictionEnvelopeDTO(BaseModel):
    """Fields shared by every prediction response."""

    prediction_id: str = Field(description="Generated prediction identifier")
    model_version: str = Field(description="Version tag of the heuristic")
    confidence: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="Fixed heuristic confidence score, not a probability",
    )
    metadata: PredictionMetadataDTO = Field(default_factory=PredictionMetadataDTO)
