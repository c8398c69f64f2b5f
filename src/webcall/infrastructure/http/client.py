"""
HTTP Client Module - Verb helpers over a single blocking exchange.

This module provides:
- GET / POST / PUT / DELETE wrappers with form or JSON bodies
- A JSON-RPC 2.0 call that requires a JSON response
- Header block parsing into a ResponseHeader
- Consistent error handling with proper exceptions

Usage:
    from webcall.infrastructure.http.client import Request

    request = Request()
    result = request.get("https://api.example.com/items", {"page": "2"})
    print(result.http_code, result.header.content_type)

    result = request.post("https://api.example.com/items", {"name": "x"}, data_format=DataFormat.JSON)

Every call opens its own httpx.Client and closes it before returning.
"""

from __future__ import annotations

import json
import logging
import urllib.parse
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from webcall.domain.entities.response import CallResult, DataFormat, HttpMethod, OutboundCall
from webcall.infrastructure.http.config import ClientConfig
from webcall.infrastructure.http.headers import parse_http_headers, render_header_block
from webcall.infrastructure.http.jsonrpc import JsonRpcRequest
from webcall.shared.exceptions import (
    ErrorContext,
    InvalidParameterError,
    MalformedResponseError,
    TransportError,
)

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


def build_query_url(url: str, data: Mapping[str, Any] | None = None) -> str:
    """Append ``data`` to ``url`` as a query string; unchanged when data is empty."""
    if not data:
        return url
    return f"{url}?{urllib.parse.urlencode(data, doseq=True)}"


def encode_data(
    data: Mapping[str, Any],
    data_format: DataFormat | str = DataFormat.QUERY_STRING,
) -> tuple[bytes, str]:
    """
    Encode a data mapping as a request body.

    Returns:
        Tuple of (body bytes, content type)

    Raises:
        InvalidParameterError: Unknown data format, or data that JSON cannot encode
    """
    try:
        fmt = DataFormat(data_format)
    except ValueError as e:
        raise InvalidParameterError(
            "data_format",
            data_format,
            " or ".join(repr(f.value) for f in DataFormat),
        ) from e

    if fmt is DataFormat.JSON:
        try:
            return json.dumps(data).encode("utf-8"), JSON_CONTENT_TYPE
        except (TypeError, ValueError) as e:
            raise InvalidParameterError("data", data, "JSON-serializable values") from e
    return urllib.parse.urlencode(data, doseq=True).encode("utf-8"), FORM_CONTENT_TYPE


class Request:
    """
    Outbound call builder and exchange executor.

    Args:
        config: Client settings shared by every call (defaults from environment)

    Example:
        request = Request(ClientConfig(timeout=5.0))
        result = request.json_rpc("https://rpc.example.com", "sum", [1, 2])
        assert result.body["result"] == 3
    """

    def __init__(self, config: ClientConfig | None = None) -> None:
        self._config = config or ClientConfig.from_env()

    @property
    def config(self) -> ClientConfig:
        return self._config

    # =========================================================================
    # Verbs
    # =========================================================================

    def get(
        self,
        url: str,
        data: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> CallResult:
        """
        Perform a GET request.

        Args:
            url: Target URL
            data: Query parameters appended to the URL
            options: httpx.Client option overrides for this call

        Raises:
            TransportError: When the exchange could not complete
        """
        call = OutboundCall(
            url=build_query_url(url, data),
            method=HttpMethod.GET,
            options=dict(options or {}),
        )
        return self.process(call)

    def post(
        self,
        url: str,
        data: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
        data_format: DataFormat | str = DataFormat.QUERY_STRING,
    ) -> CallResult:
        """Perform a POST request with a form or JSON body."""
        return self._send_with_body(HttpMethod.POST, url, data, options, data_format)

    def put(
        self,
        url: str,
        data: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
        data_format: DataFormat | str = DataFormat.QUERY_STRING,
    ) -> CallResult:
        """Perform a PUT request with a form or JSON body."""
        return self._send_with_body(HttpMethod.PUT, url, data, options, data_format)

    def delete(
        self,
        url: str,
        data: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
        data_format: DataFormat | str = DataFormat.QUERY_STRING,
    ) -> CallResult:
        """Perform a DELETE request with a form or JSON body."""
        return self._send_with_body(HttpMethod.DELETE, url, data, options, data_format)

    def json_rpc(
        self,
        url: str,
        method: str,
        params: Mapping[str, Any] | list[Any] | None = None,
        id: int | str = 1,
        options: Mapping[str, Any] | None = None,
    ) -> CallResult:
        """
        Perform a JSON-RPC 2.0 call.

        Args:
            url: RPC endpoint
            method: Remote method name
            params: Positional (list) or named (mapping) parameters
            id: JSON-RPC request id
            options: httpx.Client option overrides for this call

        Returns:
            CallResult whose body is the decoded JSON response

        Raises:
            TransportError: When the exchange could not complete
            MalformedResponseError: When the response body is not JSON
            InvalidParameterError: When the envelope fields are invalid
        """
        try:
            envelope = JsonRpcRequest(
                id=id,
                method=method,
                params=dict(params) if isinstance(params, Mapping) else (params if params is not None else {}),
            )
        except PydanticValidationError as e:
            raise InvalidParameterError(
                "json_rpc",
                {"method": method, "id": id},
                "a non-empty method name and list or mapping params",
            ) from e

        # PydanticSerializationError is a ValueError
        try:
            body = envelope.encode()
        except ValueError as e:
            raise InvalidParameterError("params", params, "JSON-serializable values") from e

        call = OutboundCall(
            url=url,
            method=HttpMethod.POST,
            body=body,
            headers={"Content-Type": JSON_CONTENT_TYPE},
            options=dict(options or {}),
        )
        result = self.process(call)

        try:
            decoded = json.loads(result.body)
        except (json.JSONDecodeError, TypeError):
            decoded = None

        # JSON "null" is treated the same as an undecodable body
        if decoded is None:
            logger.warning(f"JSON-RPC {method} at {url}: response body is not JSON (HTTP {result.http_code})")
            raise MalformedResponseError(result, context=ErrorContext(operation="json_rpc", url=url))

        return result.with_body(decoded)

    def _send_with_body(
        self,
        method: HttpMethod,
        url: str,
        data: Mapping[str, Any] | None,
        options: Mapping[str, Any] | None,
        data_format: DataFormat | str,
    ) -> CallResult:
        body: bytes | None = None
        headers: dict[str, str] = {}

        if data:
            body, content_type = encode_data(data, data_format)
            headers["Content-Type"] = content_type

        call = OutboundCall(
            url=url,
            method=method,
            body=body,
            headers=headers,
            options=dict(options or {}),
        )
        return self.process(call)

    # =========================================================================
    # Exchange
    # =========================================================================

    def process(self, call: OutboundCall) -> CallResult:
        """
        Perform one blocking exchange for ``call``.

        Raises:
            TransportError: DNS, connection, timeout or redirect failures
        """
        client_options = self._config.merge_options(call.options, headers=call.headers)
        content = call.body if call.body is not None else (b"" if call.has_body else None)

        logger.debug(f"{call.method.value} {call.url}")

        try:
            with httpx.Client(**client_options) as client:
                response = client.request(call.method.value, call.url, content=content)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.exception(f"Transport error for {call.method.value} {call.url}: {e}")
            raise TransportError(
                str(e) or type(e).__name__,
                context=ErrorContext(operation=call.method.value, url=call.url),
            ) from e

        status_line = f"{response.http_version} {response.status_code} {response.reason_phrase}"
        fields = [(name.decode("latin-1"), value.decode("latin-1")) for name, value in response.headers.raw]
        header = parse_http_headers(render_header_block(status_line, fields))

        logger.debug(f"{call.method.value} {call.url} -> {response.status_code} ({len(response.content)} bytes)")

        return CallResult(
            http_code=response.status_code,
            header=header,
            body=response.text,
            last_url=str(response.url),
        )
