"""Inbound request accessors."""

from .context import InboundContext, parse_query_string
from .request import InboundRequest, RedirectRequested, has_data, read_data

__all__ = [
    "InboundContext",
    "InboundRequest",
    "RedirectRequested",
    "has_data",
    "parse_query_string",
    "read_data",
]
