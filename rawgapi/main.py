"""Demo FastAPI application with lifespan management.

Startup: load settings, configure logging, create the shared RAWG service,
and fetch the first page of games in the background, logging the result.
Shutdown: cancel the startup fetch if still running and close the client.

Run with: uvicorn --factory rawgapi.main:create_app
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import assert_never

import httpx
from fastapi import FastAPI

from rawgapi.config.settings import RawgSettings
from rawgapi.logging_config import configure_logging
from rawgapi.middleware.error_handler import register_error_handlers
from rawgapi.network.result import ApiError, NetworkError, Success, UnknownError
from rawgapi.routers.games import create_games_router
from rawgapi.routers.greeting import create_greeting_router
from rawgapi.routers.health import create_health_router
from rawgapi.service import RawgService, create_service

logger = logging.getLogger(__name__)


async def log_first_page(service: RawgService) -> None:
    """Fetch the first page of games and log the outcome."""
    try:
        response = await service.list_games()
    except ValueError as exc:
        logger.error("Could not decode games list: %s", exc)
        return

    if isinstance(response, Success):
        logger.info(
            "Fetched %d of %d games",
            len(response.payload.results),
            response.payload.count,
            extra={"endpoint": "list_games", "outcome": "success"},
        )
    elif isinstance(response, ApiError):
        logger.error(
            "RAWG API error on startup fetch (status %s)",
            response.status_code,
            extra={"endpoint": "list_games", "outcome": "api_error"},
        )
    elif isinstance(response, NetworkError):
        logger.error(
            "RAWG API unreachable on startup fetch: %s",
            response.cause,
            extra={"endpoint": "list_games", "outcome": "network_error"},
        )
    elif isinstance(response, UnknownError):
        logger.error(
            "Unknown error on startup fetch: %s",
            response.cause,
            extra={"endpoint": "list_games", "outcome": "unknown_error"},
        )
    else:
        assert_never(response)


def create_app(
    settings: RawgSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Loads ``RawgSettings`` eagerly so that a missing ``RAWG_API_KEY``
    environment variable fails immediately. *transport* overrides the HTTP
    transport of the shared client (used by tests).
    """
    settings = settings or RawgSettings()  # type: ignore[call-arg]
    service = create_service(settings=settings, transport=transport)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level, json_format=settings.log_json)
        logger.info("Starting RAWG demo app on port %d", settings.port)

        startup_fetch: asyncio.Task | None = None
        if settings.fetch_on_startup:
            startup_fetch = asyncio.create_task(log_first_page(service))
        app.state.startup_fetch = startup_fetch

        yield

        logger.info("Shutting down RAWG demo app")
        if startup_fetch is not None:
            startup_fetch.cancel()
            try:
                await startup_fetch
            except asyncio.CancelledError:
                pass
        await service.close()
        logger.info("RAWG demo app shut down")

    app = FastAPI(
        title="RAWG API Example",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.service = service

    register_error_handlers(app)

    app.include_router(create_greeting_router(name=settings.greeting_name))
    app.include_router(create_health_router(base_url=settings.base_url))
    app.include_router(create_games_router(service=service))

    return app
