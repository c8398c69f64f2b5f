"""
webcall - HTTP call helpers and inbound request accessors

A thin convenience layer over httpx for one-shot outbound calls, plus
read-only accessors for the request a handler is serving.

Usage:
    from webcall import Request, DataFormat

    request = Request()
    result = request.post("https://api.example.com/items", {"name": "x"}, data_format=DataFormat.JSON)
    print(result.http_code, result.header["content-type"], result.body)

    rpc = request.json_rpc("https://rpc.example.com", "status")
    print(rpc.body["result"])

Features:
    - GET / POST / PUT / DELETE with form or JSON bodies
    - JSON-RPC 2.0 calls with JSON response enforcement
    - Parsed response headers (lowercased names, raw status line)
    - Final URL after redirects
    - Query / form / session / server / file accessors over an injected context
"""

from .application.inbound import InboundContext, InboundRequest, RedirectRequested
from .domain.entities import CallResult, DataFormat, HttpMethod, OutboundCall, ResponseHeader
from .infrastructure.http import ClientConfig, Request, parse_http_headers
from .shared.exceptions import (
    ConfigurationError,
    InvalidParameterError,
    MalformedResponseError,
    TransportError,
    WebcallError,
)

__version__ = "0.1.0"

__all__ = [
    # Outbound
    "Request",
    "ClientConfig",
    "DataFormat",
    "HttpMethod",
    "OutboundCall",
    "CallResult",
    "ResponseHeader",
    "parse_http_headers",
    # Inbound
    "InboundContext",
    "InboundRequest",
    "RedirectRequested",
    # Errors
    "WebcallError",
    "TransportError",
    "MalformedResponseError",
    "InvalidParameterError",
    "ConfigurationError",
]
