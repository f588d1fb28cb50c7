"""REST runtime abstractions."""

from .descriptor import BinanceRequest, RequestDescriptor
from .http_client import HTTPClient, HTTPResponse
from .runner import RequestDispatcher
from .signing import (
    build_query,
    current_timestamp_ms,
    encode_params,
    format_value,
    render_path,
    sign,
    sign_query,
)

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "BinanceRequest",
    "RequestDescriptor",
    "RequestDispatcher",
    "build_query",
    "current_timestamp_ms",
    "encode_params",
    "format_value",
    "render_path",
    "sign",
    "sign_query",
]
