"""Health endpoint.

- GET /health: service status and the configured upstream origin
"""

from __future__ import annotations

from fastapi import APIRouter

from rawgapi.models.responses import ResponseEnvelope


def create_health_router(*, base_url: str) -> APIRouter:
    """Factory that creates the health router."""

    health_router = APIRouter(tags=["health"])

    @health_router.get("/health")
    async def health() -> dict:
        return ResponseEnvelope.ok({"status": "healthy", "upstream": base_url}).model_dump()

    return health_router
