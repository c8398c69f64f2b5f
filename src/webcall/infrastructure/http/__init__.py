"""HTTP Client Utilities."""

from .client import Request, build_query_url, encode_data
from .config import ClientConfig
from .headers import parse_http_headers, render_header_block
from .jsonrpc import JsonRpcRequest

__all__ = [
    # Outbound calls
    "Request",
    "build_query_url",
    "encode_data",
    # Configuration
    "ClientConfig",
    # Header parsing
    "parse_http_headers",
    "render_header_block",
    # JSON-RPC
    "JsonRpcRequest",
]
