"""Shared ``httpx.AsyncClient`` construction.

The API key is injected by a request event hook installed once here, so
every outgoing request carries ``key=<api key>`` as its last query parameter
regardless of which endpoint built it.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.rawg.io"
API_KEY_PARAM = "key"


def api_key_hook(api_key: str) -> Callable[[httpx.Request], Awaitable[None]]:
    """Build a request hook that sets the API key query parameter.

    Setting rather than adding keeps a single ``key`` even if a request
    object is sent more than once.
    """

    async def add_api_key(request: httpx.Request) -> None:
        request.url = request.url.copy_set_param(API_KEY_PARAM, api_key)

    return add_api_key


def build_http_client(
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    *,
    max_connections: int = 100,
    max_keepalive_connections: int = 20,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the process-wide client used by every endpoint call.

    Parameters
    ----------
    api_key:
        RAWG API key appended to every request.
    base_url:
        Origin of the API; endpoint paths carry the ``/api`` prefix.
    transport:
        Optional transport override (e.g. ``httpx.MockTransport`` in tests).
    """
    if not api_key:
        raise ValueError("A RAWG API key is required")

    client = httpx.AsyncClient(
        base_url=base_url.rstrip("/"),
        limits=httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive_connections,
        ),
        event_hooks={"request": [api_key_hook(api_key)]},
        transport=transport,
    )
    logger.debug("HTTP client created for %s", base_url)
    return client
