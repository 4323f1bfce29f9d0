"""Entry point for the Car Catalog API server.

Reads ``HOST`` and ``PORT`` (``.env`` is honoured) and serves the
application with Uvicorn.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from car_catalog_api.app.core.config import settings
from car_catalog_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
