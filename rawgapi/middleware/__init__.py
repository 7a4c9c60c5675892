"""Demo app error handling."""

from rawgapi.middleware.error_handler import (
    NotFoundError,
    PayloadDecodeError,
    RawgError,
    UpstreamApiError,
    UpstreamUnavailableError,
    UpstreamUnknownError,
    register_error_handlers,
)

__all__ = [
    "NotFoundError",
    "PayloadDecodeError",
    "RawgError",
    "UpstreamApiError",
    "UpstreamUnavailableError",
    "UpstreamUnknownError",
    "register_error_handlers",
]
