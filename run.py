"""Entry point for the Explorer API server.

This script starts the FastAPI application under Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

The listening port comes from the ``PORT`` environment variable
(default ``5000``) and the bind address from ``HOST`` (default
``0.0.0.0``).  See ``explorer_api/app/core/config.py`` for the other
supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from explorer_api.app.core.config import settings
from explorer_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Logging is configured by the app (core/logging_config.py); keep
        # uvicorn from installing its own handlers over it.
        log_config=None,
        # Replaced by the explorer_api.access middleware log, which adds
        # the response size and timing.
        access_log=False,
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Explorer API running on http://localhost:%s%s", settings.port, settings.api_prefix
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
