"""
Domain Entities

Core value objects for outbound calls and their results.
"""

from __future__ import annotations

from .response import (
    HTTP_STATUS_KEY,
    CallResult,
    DataFormat,
    HttpMethod,
    OutboundCall,
    ResponseHeader,
)

__all__ = [
    "HTTP_STATUS_KEY",
    "CallResult",
    "DataFormat",
    "HttpMethod",
    "OutboundCall",
    "ResponseHeader",
]
