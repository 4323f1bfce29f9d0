"""
Main entrypoint for the Car Catalog API.

This module assembles the FastAPI application: logging, the request
body dump middleware, the ``/api`` routes, the LINE webhook and the
static top page.  The ``create_app`` function builds and configures the
app, which is then instantiated at module import time as ``app``::

    uvicorn car_catalog_api.app.main:app --port 1323

On startup the application fetches a LINE channel access token (when
``KEYPATH`` is configured) and truncates/reseeds the car storage.  Any
failure during startup is logged and re‑raised, which aborts the server.
"""

import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router, webhook_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.middleware import BodyDumpMiddleware
from .services.car_service import CarService
from .services.token_service import TokenService

logger = logging.getLogger(__name__)

# Repository root; relative static paths are resolved against it.
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def format_bind_errors(exc: RequestValidationError) -> str:
    """Flatten validation errors into a single human readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


async def bind_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """Reject bodies that cannot be bound with 400 and the raw error string."""
    message = "Bind: " + format_bind_errors(exc)
    logger.error("%s %s %s", request.method, request.url.path, message)
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.channel_access_token = None

    app.add_middleware(BodyDumpMiddleware)
    app.add_exception_handler(RequestValidationError, bind_error_handler)

    app.include_router(api_router, prefix="/api")
    app.include_router(webhook_router)

    @app.on_event("startup")
    async def startup_event() -> None:
        app.state.channel_access_token = None
        if settings.key_path:
            try:
                app.state.channel_access_token = TokenService.fetch_access_token()
            except Exception:
                logger.exception("Could not obtain a LINE channel access token")
                raise
        else:
            logger.info("KEYPATH is not set; skipping channel access token fetch")

        try:
            CarService.seed()
        except Exception:
            logger.exception("Could not initialise car storage")
            raise

    # Mounted last so that API routes take precedence over static files.
    static_dir = Path(settings.static_dir)
    if not static_dir.is_absolute():
        static_dir = PROJECT_ROOT / static_dir
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
    else:
        logger.debug("Static directory %s not found; top page disabled", static_dir)

    return app


app = create_app()
