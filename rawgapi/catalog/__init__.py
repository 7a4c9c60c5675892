"""Endpoint catalog for the RAWG API."""

from rawgapi.catalog.descriptor import EndpointDescriptor, ParamKind, QueryParam
from rawgapi.catalog.endpoints import ALL_ENDPOINTS, ENDPOINTS_BY_NAME

__all__ = [
    "ALL_ENDPOINTS",
    "ENDPOINTS_BY_NAME",
    "EndpointDescriptor",
    "ParamKind",
    "QueryParam",
]
