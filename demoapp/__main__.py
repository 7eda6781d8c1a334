"""Run the API with uvicorn: ``python -m demoapp``."""
from __future__ import annotations

import logging

from uvicorn import Config, Server
from uvicorn.config import LOG_LEVELS

from demoapp.app import create_app
from demoapp.core.config import get_settings

logger = logging.getLogger("demoapp")


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    log_level = settings.log_level.lower()
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        log_level=log_level if log_level in LOG_LEVELS else "info",
    )
    logger.info("Server running on port %s", settings.port)
    logger.info("Environment: %s", settings.app_env)
    logger.info("Health check available at: http://localhost:%s/api/health", settings.port)
    Server(config).run()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
