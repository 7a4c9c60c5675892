"""Transport calls and the response-classification adapter.

``HttpxCall`` is a single, cancellable request on a shared
``httpx.AsyncClient``. ``ApiResponseCall`` wraps any ``Call`` and folds its
outcome into an :data:`~rawgapi.network.result.ApiResponse`:

    status in [200, 300)        -> Success(decode(body))
    any other status            -> ApiError(status)
    httpx.TransportError/OSError -> NetworkError(exc)
    any other exception         -> ApiError(None)

Decoder exceptions are not classified; they propagate to the caller.
Cancellation propagates as ``asyncio.CancelledError``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Generic, Protocol, TypeVar, runtime_checkable

import httpx

from rawgapi.network.result import (
    ApiError,
    ApiResponse,
    NetworkError,
    Success,
    outcome_name,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

SUCCESS_RANGE = range(200, 300)


class CallAlreadyExecutedError(RuntimeError):
    """Raised when a call is executed more than once. Use ``clone()`` instead."""


@runtime_checkable
class Call(Protocol):
    """A single transport request that can be executed once."""

    @property
    def request(self) -> httpx.Request: ...

    @property
    def is_executed(self) -> bool: ...

    @property
    def is_canceled(self) -> bool: ...

    async def execute(self) -> httpx.Response: ...

    def cancel(self) -> None: ...

    def clone(self) -> Call: ...


class HttpxCall:
    """One request sent through a shared ``httpx.AsyncClient``.

    The send runs in its own task so that :meth:`cancel` can abort it while
    in flight. The client is borrowed, never closed here.
    """

    def __init__(self, client: httpx.AsyncClient, request: httpx.Request) -> None:
        self._client = client
        self._request = request
        # Request hooks rewrite the request in place on send; clones start
        # from the request as it was built.
        self._method = request.method
        self._url = request.url
        self._headers = request.headers.copy()
        self._task: asyncio.Task[httpx.Response] | None = None
        self._executed = False
        self._canceled = False

    @property
    def request(self) -> httpx.Request:
        return self._request

    @property
    def is_executed(self) -> bool:
        return self._executed

    @property
    def is_canceled(self) -> bool:
        return self._canceled

    async def execute(self) -> httpx.Response:
        if self._executed:
            raise CallAlreadyExecutedError("Call already executed")
        self._executed = True
        if self._canceled:
            raise asyncio.CancelledError("Call canceled before execution")

        self._task = asyncio.ensure_future(self._client.send(self._request))
        return await self._task

    def cancel(self) -> None:
        if self._canceled:
            return
        self._canceled = True
        if self._task is not None and not self._task.done():
            self._task.cancel()

    def clone(self) -> HttpxCall:
        request = httpx.Request(self._method, self._url, headers=self._headers)
        return HttpxCall(self._client, request)


def classify_response(
    status_code: int,
    body: bytes,
    decode: Callable[[bytes], T],
) -> ApiResponse[T]:
    """Map a completed HTTP exchange to ``Success`` or ``ApiError``."""
    if status_code in SUCCESS_RANGE:
        return Success(decode(body))
    return ApiError(status_code)


def classify_failure(exc: Exception) -> ApiResponse:
    """Map a fault raised before any response existed."""
    if isinstance(exc, (httpx.TransportError, OSError)):
        return NetworkError(exc)
    return ApiError(None)


class ApiResponseCall(Generic[T]):
    """Adapter exposing a ``Call`` as a call that never raises transport faults.

    Parameters
    ----------
    proxy:
        The underlying transport call. Owned by this adapter.
    decode:
        Turns a 2xx response body into ``T``.
    endpoint:
        Name used in log records.
    """

    def __init__(
        self,
        proxy: Call,
        decode: Callable[[bytes], T],
        endpoint: str = "",
    ) -> None:
        self._proxy = proxy
        self._decode = decode
        self._endpoint = endpoint

    @property
    def request(self) -> httpx.Request:
        return self._proxy.request

    @property
    def is_executed(self) -> bool:
        return self._proxy.is_executed

    @property
    def is_canceled(self) -> bool:
        return self._proxy.is_canceled

    async def execute(self) -> ApiResponse[T]:
        if self._proxy.is_executed:
            raise CallAlreadyExecutedError("Call already executed")

        try:
            response = await self._proxy.execute()
        except Exception as exc:
            result = classify_failure(exc)
            logger.warning(
                "Request failed before a response: %s %s (%s)",
                self._endpoint,
                type(exc).__name__,
                outcome_name(result),
                extra={"endpoint": self._endpoint, "outcome": outcome_name(result)},
            )
            return result

        result = classify_response(response.status_code, response.content, self._decode)
        if isinstance(result, ApiError):
            logger.warning(
                "API error %d from %s",
                response.status_code,
                self._endpoint,
                extra={
                    "endpoint": self._endpoint,
                    "status_code": response.status_code,
                    "outcome": "api_error",
                },
            )
        else:
            logger.debug(
                "Request to %s succeeded with status %d",
                self._endpoint,
                response.status_code,
                extra={
                    "endpoint": self._endpoint,
                    "status_code": response.status_code,
                    "outcome": "success",
                },
            )
        return result

    def cancel(self) -> None:
        self._proxy.cancel()

    def clone(self) -> ApiResponseCall[T]:
        return ApiResponseCall(self._proxy.clone(), self._decode, self._endpoint)
