from __future__ import annotations

import pytest

from wms_analytics.main import app as module_app
from wms_analytics.main.app import create_app


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan() -> None:
    app = create_app()
    assert app.title == "Warehouse Analytics Engine"

    paths = {route.path for route in app.routes}
    assert {
        "/health",
        "/info",
        "/predictions/order-duration",
        "/predictions/order-duration/batch",
        "/forecasts/demand",
        "/routes/pick-path",
    } <= paths

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None

    # Ensure module-level app is instantiated
    assert isinstance(module_app.app, type(app))
