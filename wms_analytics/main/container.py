"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

import random
from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from wms_analytics.application.models import SystemInfo
from wms_analytics.application.use_cases.cached_use_case import (
    CachedPredictionUseCase,
)
from wms_analytics.application.use_cases.duration_use_cases import (
    BatchPredictDurationUseCase,
    PredictOrderDurationUseCase,
)
from wms_analytics.application.use_cases.forecast_use_case import (
    ForecastDemandUseCase,
)
from wms_analytics.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from wms_analytics.application.use_cases.route_use_case import (
    OptimizePickRouteUseCase,
)
from wms_analytics.domain.services.demand_forecaster import DemandForecaster
from wms_analytics.infrastructure.cache import InMemoryPredictionCache
from wms_analytics.infrastructure.services.health_check_service import (
    HealthCheckService,
)
from wms_analytics.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _enum_value(value):
    return value.value if hasattr(value, "value") else str(value)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Domain services
    random_source = providers.Singleton(random.Random, config.forecast.random_seed)

    demand_forecaster = providers.Singleton(
        DemandForecaster,
        random_source=random_source,
        jitter_enabled=config.forecast.jitter_enabled,
        calendar_aligned_seasonality=config.forecast.calendar_aligned_seasonality,
    )

    # Infrastructure
    prediction_cache = providers.Singleton(
        InMemoryPredictionCache,
        max_entries=config.cache.max_entries,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        prediction_cache=prediction_cache,
    )

    # Application (use cases)
    predict_order_duration_use_case = providers.Factory(
        CachedPredictionUseCase,
        inner=providers.Factory(PredictOrderDurationUseCase),
        cache=prediction_cache,
        namespace=providers.Object("duration"),
        ttl_seconds=config.cache.duration_ttl_seconds,
        enabled=config.cache.enabled,
    )

    # Batches are never cached.
    batch_predict_duration_use_case = providers.Factory(BatchPredictDurationUseCase)

    forecast_demand_use_case = providers.Factory(
        CachedPredictionUseCase,
        inner=providers.Factory(ForecastDemandUseCase, forecaster=demand_forecaster),
        cache=prediction_cache,
        namespace=providers.Object("forecast"),
        ttl_seconds=config.cache.forecast_ttl_seconds,
        enabled=config.cache.enabled,
    )

    optimize_pick_route_use_case = providers.Factory(
        CachedPredictionUseCase,
        inner=providers.Factory(
            OptimizePickRouteUseCase,
            default_start_point=config.route.default_start_point,
        ),
        cache=prediction_cache,
        namespace=providers.Object("route"),
        ttl_seconds=config.cache.route_ttl_seconds,
        enabled=config.cache.enabled,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.service.title,
        description=config.service.description,
        version=config.service.version,
        environment=providers.Callable(_enum_value, config.environment),
        git_commit=config.service.git_commit,
        build_time=config.service.build_time,
        forecast_jitter_enabled=config.forecast.jitter_enabled,
        forecast_random_seed=config.forecast.random_seed,
        forecast_calendar_aligned_seasonality=(
            config.forecast.calendar_aligned_seasonality
        ),
        route_default_start_point=config.route.default_start_point,
        cache_enabled=config.cache.enabled,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for in-process resources.

    Used by the FastAPI lifespan. The prediction cache is created eagerly on
    startup and emptied on shutdown.
    """
    container = get_container()
    prediction_cache = container.prediction_cache()

    try:
        logger.info(
            "container.resources.initialized",
            cache_max_entries=prediction_cache.max_entries,
        )
        yield container

    finally:
        prediction_cache.clear()
        logger.info("container.resources.shutdown")
