"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, List, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidBinLocationError(DomainError):
    """Raised when bin location codes do not follow ``<Zone>-<Aisle>-<Shelf>``."""

    def __init__(self, codes: List[str], details: Optional[Dict[str, Any]] = None):
        self.codes = list(codes)
        message = "Invalid bin location(s): " + ", ".join(repr(c) for c in codes)
        super().__init__(message, {"invalid_locations": self.codes, **(details or {})})
