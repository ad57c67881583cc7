"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wms_analytics.shared import (
    BIN_LOCATION_PATTERN,
    DEFAULT_START_POINT,
    EnumEnvironment,
    EnumLogLevel,
)


class ServiceSettings(BaseSettings):
    """HTTP service metadata and server options."""

    title: str = Field(default="Warehouse Analytics Engine", description="Title")
    description: str = Field(
        default="Heuristic order duration prediction, SKU demand forecasting "
        "and pick route optimization for warehouse operations",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("SERVICE_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("SERVICE_BUILD_TIME", "BUILD_TIME"),
    )
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class ForecastSettings(BaseSettings):
    """Demand forecaster behaviour."""

    jitter_enabled: bool = Field(
        default=True, description="Perturb projected demand with random jitter"
    )
    random_seed: Optional[int] = Field(
        default=None, description="Seed for the jitter source (reproducible runs)"
    )
    calendar_aligned_seasonality: bool = Field(
        default=False,
        description=(
            "Apply weekday seasonality by the real weekday of each forecast "
            "date instead of the horizon-derived offset"
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="FORECAST_", case_sensitive=False, extra="ignore"
    )


class RouteSettings(BaseSettings):
    """Pick route defaults."""

    default_start_point: str = Field(
        default=DEFAULT_START_POINT,
        pattern=BIN_LOCATION_PATTERN,
        description="Start and end point used when a request omits one",
    )

    model_config = SettingsConfigDict(
        env_prefix="ROUTE_", case_sensitive=False, extra="ignore"
    )


class CacheSettings(BaseSettings):
    """Prediction response cache."""

    enabled: bool = Field(default=True, description="Cache prediction responses")
    max_entries: int = Field(default=1024, ge=1, description="Maximum cached entries")
    duration_ttl_seconds: float = Field(
        default=300, ge=0, description="TTL for duration predictions"
    )
    forecast_ttl_seconds: float = Field(
        default=3600, ge=0, description="TTL for demand forecasts"
    )
    route_ttl_seconds: float = Field(
        default=60, ge=0, description="TTL for pick routes"
    )

    model_config = SettingsConfigDict(
        env_prefix="CACHE_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    service: ServiceSettings = Field(default_factory=ServiceSettings)
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)
    route: RouteSettings = Field(default_factory=RouteSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()
