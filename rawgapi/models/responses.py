"""JSON envelope returned by every demo app route.

{ success: bool, data: T | None, error: str | None, meta: dict | None }

Success envelopes carry ``data`` (and optionally paging ``meta``); failure
envelopes carry ``error`` and never ``data``.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ResponseEnvelope(BaseModel, Generic[T]):
    """Envelope for demo app responses, successful or not."""

    success: bool
    data: T | None = None
    error: str | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def ok(cls, data: T, **meta: Any) -> ResponseEnvelope[T]:
        return cls(success=True, data=data, meta=meta or None)

    @classmethod
    def failure(cls, error: str, meta: dict[str, Any] | None = None) -> ResponseEnvelope[Any]:
        return cls(success=False, error=error, meta=meta)
