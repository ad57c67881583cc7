"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration required by system-related use cases."""

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    forecast_jitter_enabled: bool = True
    forecast_random_seed: Optional[int] = None
    forecast_calendar_aligned_seasonality: bool = False
    route_default_start_point: str = "A-01-01"
    cache_enabled: bool = True
