"""
Domain Layer Package

This package contains the warehouse analytics heuristics and their
entities. It has no dependencies on web frameworks or infrastructure.
"""

# Re-export submodules
from wms_analytics.domain import entities, ports, services

__all__ = ["entities", "services", "ports"]
