from __future__ import annotations

from datetime import datetime, timezone

from wms_analytics.application.dtos.health_dto import (
    ApplicationInfoDTO,
    SystemHealthDTO,
)
from wms_analytics.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


def test_system_health_dto_from_domain() -> None:
    health = SystemHealth(
        status=ServiceStatus.DEGRADED,
        dependencies=[
            DependencyStatus(
                name="prediction_cache",
                status=ServiceStatus.DEGRADED,
                details={"entries": 3},
            )
        ],
    )

    dto = SystemHealthDTO.from_domain(health)

    assert dto.status is ServiceStatus.DEGRADED
    assert dto.dependencies[0].name == "prediction_cache"
    assert dto.dependencies[0].details == {"entries": 3}


def test_application_info_dto_from_domain() -> None:
    now = datetime.now(timezone.utc)
    info = ApplicationInfo(
        name="Warehouse Analytics Engine",
        description="desc",
        version="1.0.0",
        environment="development",
        git_commit="abc",
        build_time="now",
        started_at=now,
        uptime_seconds=1.5,
        status=ServiceStatus.UP,
        extras={"cache": {"enabled": True}},
    )

    dto = ApplicationInfoDTO.from_domain(info)

    assert dto.name == "Warehouse Analytics Engine"
    assert dto.started_at == now
    assert dto.dependencies == []
    assert dto.extras["cache"]["enabled"] is True
