"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers are responsible for
input validation, error handling, and mapping between API DTOs
and application layer use cases.
"""

from .forecasts_controller import router as forecasts_router
from .predictions_controller import router as predictions_router
from .routes_controller import router as routes_router
from .system_controller import router as system_router

__all__ = ["predictions_router", "forecasts_router", "routes_router", "system_router"]
