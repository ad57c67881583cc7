"""
Server Entry Point - Main Layer

Starts uvicorn with the host, port and reload options from the settings.
"""

import uvicorn

from wms_analytics.main.config import get_settings
from wms_analytics.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

logger = get_logger(__name__)


def main() -> None:
    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    logger.info(
        "server.starting",
        host=settings.service.host,
        port=settings.service.port,
        environment=settings.environment.value,
    )

    uvicorn.run(
        "wms_analytics.main.app:app",
        host=settings.service.host,
        port=settings.service.port,
        reload=settings.service.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
