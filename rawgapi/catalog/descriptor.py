"""Static endpoint declarations.

An ``EndpointDescriptor`` holds everything needed to build one request:
the path template, its query parameters in wire order, and the shape the
response body decodes into. Descriptors carry no behavior beyond turning
call arguments into an ``httpx.Request``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping
from urllib.parse import quote

import httpx

_PLACEHOLDER = re.compile(r"\{([a-z_]+)\}")


class ParamKind(str, Enum):
    """How a query parameter value is written on the wire."""

    INT = "int"
    STRING = "string"
    CSV = "csv"  # list joined with commas, or a string passed verbatim
    BOOL = "bool"


@dataclass(frozen=True)
class QueryParam:
    name: str
    kind: ParamKind = ParamKind.STRING
    required: bool = False

    def serialize(self, value: Any) -> str:
        """Render *value* as the query string value for this parameter."""
        if self.kind is ParamKind.BOOL:
            if not isinstance(value, bool):
                raise TypeError(f"Query parameter '{self.name}' expects a bool")
            return "true" if value else "false"
        if self.kind is ParamKind.INT:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Query parameter '{self.name}' expects an integer")
            return str(value)
        if self.kind is ParamKind.CSV and not isinstance(value, str):
            return ",".join(str(item) for item in value)
        return str(value)


@dataclass(frozen=True)
class EndpointDescriptor:
    """One remote operation: ``GET path?params`` decoding into ``response``."""

    name: str
    path: str
    response: Any
    params: tuple[QueryParam, ...] = ()
    method: str = "GET"
    path_params: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "path_params", tuple(_PLACEHOLDER.findall(self.path))
        )

    def render_path(self, path_values: Mapping[str, Any]) -> str:
        """Substitute URL-quoted values into the path placeholders."""
        missing = [p for p in self.path_params if path_values.get(p) is None]
        if missing:
            raise ValueError(
                f"Missing path parameter(s) for {self.name}: {', '.join(missing)}"
            )
        return _PLACEHOLDER.sub(
            lambda m: quote(str(path_values[m.group(1)]), safe=""), self.path
        )

    def query_items(self, values: Mapping[str, Any]) -> list[tuple[str, str]]:
        """Serialize present query values in declared order.

        ``None`` values are omitted entirely, never sent empty.
        """
        known = {p.name for p in self.params}
        unknown = set(values) - known
        if unknown:
            raise ValueError(
                f"Unknown query parameter(s) for {self.name}: {', '.join(sorted(unknown))}"
            )

        items: list[tuple[str, str]] = []
        for param in self.params:
            value = values.get(param.name)
            if value is None:
                if param.required:
                    raise ValueError(
                        f"Missing required query parameter '{param.name}' for {self.name}"
                    )
                continue
            items.append((param.name, param.serialize(value)))
        return items

    def build_request(
        self,
        client: httpx.AsyncClient,
        path_values: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> httpx.Request:
        """Build the request for this endpoint on *client*."""
        path = self.render_path(path_values or {})
        params = self.query_items(query or {})
        return client.build_request(self.method, path, params=params)
