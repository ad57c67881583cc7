"""
Main Application - Main Layer

Builds the FastAPI application serving the warehouse analytics heuristics:
logging bootstrap, container initialization, CORS and the API routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from wms_analytics.main.config import get_settings
from wms_analytics.main.container import app_lifespan, init_container
from wms_analytics.presentation.controllers import (
    forecasts_router,
    predictions_router,
    routes_router,
    system_router,
)
from wms_analytics.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

# Bootstrap logging from the environment so settings loading can log too
configure_logging()
update_logging_from_settings(get_settings())

logger = get_logger(__name__)

API_ROUTERS = (system_router, predictions_router, forecasts_router, routes_router)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Record the start time and hold the container resources open."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("app.startup", title=app.title, version=app.version)

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("app.shutdown")


async def log_validation_error(request: Request, exc: RequestValidationError):
    logger.info(
        "request.validation_failed",
        path=request.url.path,
        errors=len(exc.errors()),
    )
    return await request_validation_exception_handler(request, exc)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()
    init_container(settings)

    app = FastAPI(
        title=settings.service.title,
        description=settings.service.description,
        version=settings.service.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, log_validation_error)

    for router in API_ROUTERS:
        app.include_router(router)

    return app


app = create_app()
