"""Errors raised by the prediction use cases."""

from typing import Any, Dict, Optional


class PredictionError(Exception):
    """Base exception for prediction failures."""

    pass


class PredictionValidationError(PredictionError):
    """Raised when the request cannot be evaluated by the heuristics."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.details = details or {}
        super().__init__(message)
