"""Unit tests for the error hierarchy and FastAPI exception handlers."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from rawgapi.middleware.error_handler import (
    NotFoundError,
    PayloadDecodeError,
    RawgError,
    UpstreamApiError,
    UpstreamUnavailableError,
    UpstreamUnknownError,
    register_error_handlers,
)


def _make_app() -> FastAPI:
    """Build a minimal FastAPI app with error handlers registered."""
    app = FastAPI()
    register_error_handlers(app)

    errors: dict[str, RawgError] = {
        "base": RawgError(),
        "api": UpstreamApiError(upstream_status=500),
        "unavailable": UpstreamUnavailableError(),
        "unknown": UpstreamUnknownError(),
        "decode": PayloadDecodeError(),
        "missing": NotFoundError("Game not found"),
    }

    @app.get("/raise/{kind}")
    async def _raise(kind: str):
        raise errors[kind]

    @app.get("/boom")
    async def _boom():
        raise RuntimeError("unexpected failure")

    @app.get("/typed")
    async def _typed(n: int):
        return {"n": n}

    return app


@pytest.fixture(scope="module")
def client() -> TestClient:
    return TestClient(_make_app(), raise_server_exceptions=False)


class TestErrorEnvelope:
    @pytest.mark.parametrize(
        ("kind", "status", "message"),
        [
            ("base", 500, "Internal server error"),
            ("api", 502, "RAWG API returned an error"),
            ("unavailable", 503, "RAWG API is unreachable"),
            ("unknown", 502, "Unknown error calling RAWG API"),
            ("decode", 502, "Could not decode RAWG API response"),
            ("missing", 404, "Game not found"),
        ],
    )
    def test_rawg_errors(self, client: TestClient, kind: str, status: int, message: str):
        response = client.get(f"/raise/{kind}")

        body = response.json()
        assert response.status_code == status
        assert body["success"] is False
        assert body["data"] is None
        assert body["error"] == message

    def test_details_become_meta(self, client: TestClient):
        body = client.get("/raise/api").json()
        assert body["meta"] == {"upstream_status": 500}

    def test_no_details_means_null_meta(self, client: TestClient):
        body = client.get("/raise/unavailable").json()
        assert body["meta"] is None

    def test_unhandled_exception_is_generic_500(self, client: TestClient):
        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error"
        assert "unexpected failure" not in response.text

    def test_validation_error_lists_fields(self, client: TestClient):
        response = client.get("/typed", params={"n": "abc"})

        body = response.json()
        assert response.status_code == 422
        assert body["error"] == "Validation error"
        assert body["meta"]["fields"][0]["field"] == "query -> n"


class TestHierarchy:
    def test_all_errors_extend_rawg_error(self):
        for cls in (
            UpstreamApiError,
            UpstreamUnavailableError,
            UpstreamUnknownError,
            PayloadDecodeError,
            NotFoundError,
        ):
            assert issubclass(cls, RawgError)

    def test_default_message(self):
        assert str(UpstreamUnavailableError()) == "RAWG API is unreachable"
