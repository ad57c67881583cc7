"""
Application Layer Package

This package contains the application-specific rules and use cases. It
validates requests, drives the domain heuristics and shapes their results
into prediction envelopes for the presentation layer.
"""

# Re-export submodules
from wms_analytics.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
