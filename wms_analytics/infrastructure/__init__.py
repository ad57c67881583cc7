"""
Infrastructure Layer Package

This package contains implementations of ports defined in the domain
layer: the prediction cache and the health check service.
"""

from wms_analytics.infrastructure import cache, services

__all__ = ["cache", "services"]
