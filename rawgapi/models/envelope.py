"""Paginated list envelope returned by RAWG list endpoints.

    { "count": 123, "next": "<url>", "previous": null, "results": [...] }
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PagedEnvelope(BaseModel, Generic[T]):
    """One page of results plus the total count and pagination cursors."""

    count: int = Field(..., ge=0)
    next: str | None = None
    previous: str | None = None
    results: list[T] = Field(default_factory=list)
