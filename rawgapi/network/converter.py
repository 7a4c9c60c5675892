"""Lenient JSON decoding of response bodies into declared payload types.

Bodies are parsed with ``json.loads(strict=False)`` (control characters in
strings, ``NaN`` and ``Infinity`` are accepted) and then validated with a
pydantic ``TypeAdapter`` in lax mode, so ``"42"`` still fills an ``int``
field. Decoding failures are raised as-is: ``json.JSONDecodeError`` or
``pydantic.ValidationError`` (both are ``ValueError`` subclasses).
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Callable, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")

Decoder = Callable[[bytes], Any]


@lru_cache(maxsize=None)
def _adapter_for(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def json_decoder(shape: Any) -> Decoder:
    """Return a decoder turning a raw body into an instance of *shape*.

    An empty (or whitespace-only) body decodes to ``None``.
    """
    adapter = _adapter_for(shape)

    def decode(body: bytes) -> Any:
        if not body.strip():
            return None
        data = json.loads(body, strict=False)
        return adapter.validate_python(data)

    return decode
