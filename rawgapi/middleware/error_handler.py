"""Demo app error hierarchy and FastAPI exception handlers.

Routes turn every non-success ``ApiResponse`` into one of the ``RawgError``
subclasses below. The handlers render those, request validation failures
and anything unexpected as a ``ResponseEnvelope`` with ``success=False``.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from rawgapi.models.responses import ResponseEnvelope

logger = logging.getLogger(__name__)


class RawgError(Exception):
    """Base error for the demo app.

    Keyword arguments become the ``meta`` of the rendered envelope.
    """

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, **details: Any) -> None:
        self.message = message or type(self).message
        self.details = details
        super().__init__(self.message)


class UpstreamApiError(RawgError):
    """RAWG answered with a non-success status, or with no known status."""

    status_code = 502
    message = "RAWG API returned an error"


class UpstreamUnavailableError(RawgError):
    """RAWG could not be reached."""

    status_code = 503
    message = "RAWG API is unreachable"


class UpstreamUnknownError(RawgError):
    status_code = 502
    message = "Unknown error calling RAWG API"


class PayloadDecodeError(RawgError):
    """RAWG answered successfully but the body could not be decoded."""

    status_code = 502
    message = "Could not decode RAWG API response"


class NotFoundError(RawgError):
    status_code = 404
    message = "Resource not found"


def _error_response(
    status_code: int, error: str, meta: dict[str, Any] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ResponseEnvelope.failure(error, meta).model_dump(),
    )


async def handle_rawg_error(request: Request, exc: RawgError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.warning(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.message,
            extra={"status_code": exc.status_code},
        )
    return _error_response(exc.status_code, exc.message, exc.details or None)


def _describe_field_error(error: dict[str, Any]) -> dict[str, str]:
    return {
        "field": " -> ".join(str(part) for part in error["loc"]),
        "message": error["msg"],
        "type": error["type"],
    }


async def handle_validation_error(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Bad query or path parameters on a demo route (422)."""
    fields = [_describe_field_error(error) for error in exc.errors()]
    return _error_response(422, "Validation error", {"fields": fields})


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Log the traceback and answer with a generic 500 that leaks nothing."""
    logger.error(
        "Unhandled %s on %s %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return _error_response(500, RawgError.message)


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope-rendering exception handlers on *app*."""
    handlers = {
        RawgError: handle_rawg_error,
        RequestValidationError: handle_validation_error,
        Exception: handle_unexpected_error,
    }
    for exc_class, handler in handlers.items():
        app.add_exception_handler(exc_class, handler)  # type: ignore[arg-type]
