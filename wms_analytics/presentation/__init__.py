"""
Presentation Layer Package

FastAPI routers exposing the duration, forecast, route and system
endpoints. Controllers only translate HTTP to use case calls and map
application errors to status codes.
"""

from wms_analytics.presentation import controllers

__all__ = ["controllers"]
