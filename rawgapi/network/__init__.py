"""Transport adapter, result model and client construction."""

from rawgapi.network.call import (
    ApiResponseCall,
    Call,
    CallAlreadyExecutedError,
    HttpxCall,
    classify_failure,
    classify_response,
)
from rawgapi.network.client import build_http_client
from rawgapi.network.converter import json_decoder
from rawgapi.network.result import (
    ApiError,
    ApiResponse,
    NetworkError,
    Success,
    UnknownError,
    match_response,
)

__all__ = [
    "ApiError",
    "ApiResponse",
    "ApiResponseCall",
    "Call",
    "CallAlreadyExecutedError",
    "HttpxCall",
    "NetworkError",
    "Success",
    "UnknownError",
    "build_http_client",
    "classify_failure",
    "classify_response",
    "json_decoder",
    "match_response",
]
