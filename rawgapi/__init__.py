"""Async client binding for the RAWG video game database API."""

from rawgapi.network.result import (
    ApiError,
    ApiResponse,
    NetworkError,
    Success,
    UnknownError,
    match_response,
)
from rawgapi.service import RawgService, create_service

__all__ = [
    "ApiError",
    "ApiResponse",
    "NetworkError",
    "RawgService",
    "Success",
    "UnknownError",
    "create_service",
    "match_response",
]
