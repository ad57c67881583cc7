"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Its primary responsibilities include:
- Defining cross-layer constants (environment names, log levels,
  model version tags, bin location format)
- Configuring structured logging for every entry point
- Serving as a common place for definitions that do not belong
  exclusively to Domain, Application, or Infrastructure

Following Clean Architecture principles:
- Shared module contains only *cross-cutting concerns*
- It must not depend on Infrastructure or Frameworks
"""

from .consts import (
    BIN_LOCATION_PATTERN,
    DEFAULT_START_POINT,
    EnumEnvironment,
    EnumLogLevel,
    EnumModelVersion,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "BIN_LOCATION_PATTERN",
    "DEFAULT_START_POINT",
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumModelVersion",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
