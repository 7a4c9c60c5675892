"""Game endpoints of the demo app.

- GET /games: one page of games, optionally filtered by a search query
- GET /games/{game_id}: details of a single game

Each handler resolves every ``ApiResponse`` variant explicitly; non-success
variants become ``RawgError`` subclasses rendered by the error handlers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, assert_never

from fastapi import APIRouter, Query

from rawgapi.middleware.error_handler import (
    NotFoundError,
    PayloadDecodeError,
    UpstreamApiError,
    UpstreamUnavailableError,
    UpstreamUnknownError,
)
from rawgapi.models.responses import ResponseEnvelope
from rawgapi.network.result import (
    ApiError,
    ApiResponse,
    NetworkError,
    Success,
    UnknownError,
)

if TYPE_CHECKING:
    from rawgapi.service import RawgService

logger = logging.getLogger(__name__)


def unwrap(response: ApiResponse[Any]) -> Any:
    """Return the success payload or raise the matching ``RawgError``."""
    if isinstance(response, Success):
        return response.payload
    elif isinstance(response, ApiError):
        if response.status_code == 404:
            raise NotFoundError()
        raise UpstreamApiError(upstream_status=response.status_code)
    elif isinstance(response, NetworkError):
        raise UpstreamUnavailableError(cause=type(response.cause).__name__)
    elif isinstance(response, UnknownError):
        raise UpstreamUnknownError()
    else:
        assert_never(response)


def create_games_router(*, service: RawgService) -> APIRouter:
    """Factory that creates the games router bound to *service*."""

    games_router = APIRouter(prefix="/games", tags=["games"])

    @games_router.get("")
    async def list_games(
        page: int | None = Query(default=None, ge=1),
        page_size: int | None = Query(default=None, ge=1, le=40),
        search: str | None = None,
    ) -> dict:
        try:
            response = await service.list_games(
                page=page, page_size=page_size, search=search
            )
        except ValueError as exc:
            logger.error("Could not decode games list: %s", exc)
            raise PayloadDecodeError() from exc

        envelope = unwrap(response)
        return ResponseEnvelope.ok(
            [game.model_dump() for game in envelope.results],
            count=envelope.count,
            next=envelope.next,
        ).model_dump()

    @games_router.get("/{game_id}")
    async def get_game(game_id: str) -> dict:
        try:
            response = await service.get_game(game_id)
        except ValueError as exc:
            logger.error("Could not decode game %s: %s", game_id, exc)
            raise PayloadDecodeError() from exc

        game = unwrap(response)
        return ResponseEnvelope.ok(game.model_dump()).model_dump()

    return games_router
