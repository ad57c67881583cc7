"""Use cases for health and application info endpoints."""

from datetime import datetime, timezone
from typing import Optional

from wms_analytics.application.dtos.health_dto import (
    ApplicationInfoDTO,
    SystemHealthDTO,
)
from wms_analytics.application.models import SystemInfo
from wms_analytics.domain.entities.health import ApplicationInfo
from wms_analytics.domain.ports.health_check import IHealthCheckService
from wms_analytics.shared.consts import EnumModelVersion


class GetHealthStatusUseCase:
    """Use case responsible for returning health status."""

    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> SystemHealthDTO:
        system_health = await self._health_check_service.evaluate()
        return SystemHealthDTO.from_domain(system_health)


class GetApplicationInfoUseCase:
    """Use case responsible for returning application info."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        system_info: SystemInfo,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        system_health = await self._health_check_service.evaluate()

        now = datetime.now(timezone.utc)
        started = started_at or now
        uptime_seconds = max(0.0, (now - started).total_seconds())

        extras = {
            "environment": self._info.environment,
            "model_versions": {
                "duration": EnumModelVersion.DURATION.value,
                "demand": EnumModelVersion.DEMAND.value,
                "route": EnumModelVersion.ROUTE.value,
            },
            "forecast": {
                "jitter_enabled": self._info.forecast_jitter_enabled,
                "seeded": self._info.forecast_random_seed is not None,
                "calendar_aligned_seasonality": (
                    self._info.forecast_calendar_aligned_seasonality
                ),
            },
            "route": {"default_start_point": self._info.route_default_start_point},
            "cache": {"enabled": self._info.cache_enabled},
        }

        info = ApplicationInfo(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            git_commit=self._info.git_commit,
            build_time=self._info.build_time,
            started_at=started,
            uptime_seconds=uptime_seconds,
            status=system_health.status,
            dependencies=system_health.dependencies,
            extras=extras,
        )

        return ApplicationInfoDTO.from_domain(info)
