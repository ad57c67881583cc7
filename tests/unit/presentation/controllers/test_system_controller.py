from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from fastapi import Request, Response

from wms_analytics.application.models import SystemInfo
from wms_analytics.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from wms_analytics.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from wms_analytics.presentation.controllers.system_controller import health, info


class _HealthService:
    def __init__(self, status: ServiceStatus):
        self._health = SystemHealth(
            status=status,
            dependencies=[DependencyStatus(name="heuristics", status=status)],
        )

    async def evaluate(self) -> SystemHealth:
        return self._health


@pytest.mark.asyncio
async def test_health_endpoint_returns_status():
    response = Response()
    dto = await health(
        response=response,
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ServiceStatus.UP)
        ),
    )
    assert dto.status is ServiceStatus.UP
    assert dto.dependencies[0].name == "heuristics"
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_health_endpoint_signals_unavailable_when_down():
    response = Response()
    dto = await health(
        response=response,
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ServiceStatus.DOWN)
        ),
    )
    assert dto.status is ServiceStatus.DOWN
    assert response.status_code == 503


@pytest.mark.asyncio
async def test_info_endpoint_returns_application_info():
    health_service = _HealthService(ServiceStatus.UP)
    system_info = SystemInfo(
        title="Warehouse Analytics Engine",
        description="desc",
        version="1.0",
        environment="dev",
        git_commit="abc",
        build_time="now",
    )
    info_use_case = GetApplicationInfoUseCase(health_service, system_info)

    scope = {
        "type": "http",
        "method": "GET",
        "path": "/info",
        "headers": [],
        "query_string": b"",
        "server": ("test", 80),
        "app": SimpleNamespace(
            state=SimpleNamespace(started_at=datetime.now(timezone.utc))
        ),
    }
    request = Request(scope)

    dto = await info(request=request, get_application_info_use_case=info_use_case)
    assert dto.name == "Warehouse Analytics Engine"
    assert dto.status is ServiceStatus.UP
