"""HTTP helpers shared by unit and property tests."""

from __future__ import annotations

import json
from typing import Callable

import httpx

TEST_API_KEY = "test-api-key"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def json_response(status_code: int, payload: object) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode())


def paged(results: list[dict], count: int | None = None) -> dict:
    return {
        "count": len(results) if count is None else count,
        "next": None,
        "previous": None,
        "results": results,
    }


def game_payload(game_id: int, name: str = "Game") -> dict:
    return {"id": game_id, "slug": f"game-{game_id}", "name": name, "rating": 4.5}
