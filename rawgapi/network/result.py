"""Closed result model for every RAWG API call.

Each completed call yields exactly one of four variants:

- ``Success``: the server answered with a 2xx status and the body decoded.
- ``ApiError``: the server answered with any other status, or a fault with
  no known status occurred (``status_code`` is ``None``).
- ``NetworkError``: the transport failed before any response existed.
- ``UnknownError``: reserved for callers; the adapter never builds it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Request completed with a 2xx status."""

    payload: T


@dataclass(frozen=True)
class ApiError:
    """Request completed with a non-2xx status, or failed with unknown status."""

    status_code: int | None = None


@dataclass(frozen=True)
class NetworkError:
    """Transport failed before a response was obtained."""

    cause: Exception


@dataclass(frozen=True)
class UnknownError:
    """Failure that is neither an API error nor a transport error."""

    cause: BaseException | None = None


ApiResponse = Union[Success[T], ApiError, NetworkError, UnknownError]


def match_response(
    response: ApiResponse[T],
    *,
    on_success: Callable[[T], R],
    on_api_error: Callable[[int | None], R],
    on_network_error: Callable[[Exception], R],
    on_unknown_error: Callable[[BaseException | None], R],
) -> R:
    """Dispatch *response* to the handler for its variant.

    All four handlers are required so that no variant can be silently
    dropped. Anything that is not one of the variants raises ``TypeError``.
    """
    if isinstance(response, Success):
        return on_success(response.payload)
    if isinstance(response, ApiError):
        return on_api_error(response.status_code)
    if isinstance(response, NetworkError):
        return on_network_error(response.cause)
    if isinstance(response, UnknownError):
        return on_unknown_error(response.cause)
    raise TypeError(f"Not an ApiResponse variant: {response!r}")


def outcome_name(response: Any) -> str:
    """Short label for *response*, used in log records."""
    return {
        Success: "success",
        ApiError: "api_error",
        NetworkError: "network_error",
        UnknownError: "unknown_error",
    }.get(type(response), "invalid")
