"""
Response Entities - Outbound Call and Call Result Domain Model

Key Entities:
    - DataFormat: Body encoding for mutating verbs
    - OutboundCall: Everything needed to perform one exchange
    - ResponseHeader: Parsed header block (lowercased names)
    - CallResult: Outcome of a completed exchange

Architecture:
    Uses frozen dataclasses; a result is never mutated after it is built.
    ``CallResult.with_body()`` returns a copy instead.

Example:
    >>> header = ResponseHeader({"http-status": "HTTP/1.1 200 OK", "content-type": "text/html"})
    >>> result = CallResult(http_code=200, header=header, body="<p>hi</p>", last_url="https://example.com/")
    >>> result.header.content_type
    'text/html'
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

HTTP_STATUS_KEY = "http-status"


class DataFormat(str, Enum):
    """Encoding applied to the data mapping of POST / PUT / DELETE calls."""

    QUERY_STRING = "query-string"  # application/x-www-form-urlencoded
    JSON = "json"  # application/json


class HttpMethod(str, Enum):
    """Verbs supported by the outbound call builder."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class OutboundCall:
    """
    A single outbound exchange, built per call and discarded afterwards.

    Attributes:
        url: Target URL (query string already appended for GET)
        method: HTTP method
        body: Encoded request body, or None when the call carries no body
        headers: Per-call request headers
        options: Transport option overrides; these win over client defaults
    """

    url: str
    method: HttpMethod = HttpMethod.GET
    body: bytes | None = None
    headers: dict[str, str] = field(default_factory=dict)
    options: dict[str, Any] = field(default_factory=dict)

    @property
    def has_body(self) -> bool:
        return self.method is not HttpMethod.GET


class ResponseHeader(Mapping[str, str]):
    """
    Read-only view over a parsed header block.

    Keys are lowercased header names. The raw status line lives under
    ``http-status``.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(data or {})

    def __getitem__(self, key: str) -> str:
        return self._data[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._data

    def __repr__(self) -> str:
        return f"ResponseHeader({self._data!r})"

    def get(self, key: str, fallback: str | None = None) -> str | None:  # type: ignore[override]
        return self._data.get(key.lower(), fallback)

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def to_dict(self) -> dict[str, str]:
        return dict(self._data)

    @property
    def http_status(self) -> str | None:
        return self._data.get(HTTP_STATUS_KEY)

    @property
    def content_type(self) -> str | None:
        return self._data.get("content-type")

    @property
    def content_length(self) -> int | None:
        value = self._data.get("content-length")
        if value is None or not value.isdigit():
            return None
        return int(value)

    @property
    def location(self) -> str | None:
        return self._data.get("location")


@dataclass(frozen=True)
class CallResult:
    """
    Outcome of a completed exchange.

    Attributes:
        http_code: Numeric status code
        header: Parsed response headers
        body: Raw body text, or the decoded structure on the JSON-RPC path
        last_url: URL reached after following redirects
    """

    http_code: int
    header: ResponseHeader
    body: Any
    last_url: str

    @property
    def ok(self) -> bool:
        return 200 <= self.http_code < 300

    def with_body(self, body: Any) -> CallResult:
        """Return a copy carrying a different body."""
        return replace(self, body=body)

    def to_dict(self) -> dict[str, Any]:
        return {
            "http_code": self.http_code,
            "header": self.header.to_dict(),
            "body": self.body,
            "last_url": self.last_url,
        }
