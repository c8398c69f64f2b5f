"""
Inbound Request - accessors over an injected InboundContext.

Lookups never raise for missing data: a missing store or key returns the
fallback value. A key that is present but holds None is treated as missing.

Usage:
    ctx = InboundContext.from_wsgi_environ(environ, session=session)
    request = InboundRequest(ctx)

    page = request.get_query_data("page", "1")
    if request.is_post() and request.has_post_data("name"):
        ...
    request.redirect("/done")  # raises RedirectRequested
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from webcall.application.inbound.context import InboundContext

logger = logging.getLogger(__name__)


class RedirectRequested(Exception):  # noqa: N818
    """
    Raised by InboundRequest.redirect() to end the current handler.

    The hosting adapter catches it and answers with a redirect response.
    """

    def __init__(self, location: str, status: int = 302) -> None:
        super().__init__(f"Redirect to {location}")
        self.location = location
        self.status = status

    def wsgi_response(self) -> tuple[str, list[tuple[str, str]]]:
        """Return the ``(status, headers)`` pair for ``start_response``."""
        reason = {301: "Moved Permanently", 302: "Found", 303: "See Other", 307: "Temporary Redirect"}
        return f"{self.status} {reason.get(self.status, 'Found')}", [("Location", self.location)]


def read_data(source: Mapping[str, Any] | None, key: str | None = None, fallback: Any = None) -> Any:
    """Return the whole store, the value at ``key``, or ``fallback``."""
    if source is not None:
        if key is None:
            return source
        value = source.get(key)
        if value is not None:
            return value
    return fallback


def has_data(source: Mapping[str, Any] | None, key: str | None = None) -> bool:
    return read_data(source, key) is not None


class InboundRequest:
    """
    Read-only view over the inbound request.

    Args:
        context: Request state supplied by the hosting environment
    """

    def __init__(self, context: InboundContext | None = None) -> None:
        self._context = context or InboundContext()

    @property
    def context(self) -> InboundContext:
        return self._context

    # Query string

    def get_query_data(self, key: str | None = None, fallback: Any = None) -> Any:
        return read_data(self._context.query, key, fallback)

    def has_query_data(self, key: str | None = None) -> bool:
        return has_data(self._context.query, key)

    def is_get(self) -> bool:
        return self.is_request_method("GET")

    # Form body

    def get_post_data(self, key: str | None = None, fallback: Any = None) -> Any:
        return read_data(self._context.form, key, fallback)

    def has_post_data(self, key: str | None = None) -> bool:
        return has_data(self._context.form, key)

    def is_post(self) -> bool:
        return self.is_request_method("POST")

    # Session

    def get_session_data(self, key: str | None = None, fallback: Any = None) -> Any:
        return read_data(self._context.session, key, fallback)

    def has_session_data(self, key: str | None = None) -> bool:
        return has_data(self._context.session, key)

    # Server metadata

    def get_server_data(self, key: str | None = None, fallback: Any = None) -> Any:
        return read_data(self._context.server, key, fallback)

    def has_server_data(self, key: str | None = None) -> bool:
        return has_data(self._context.server, key)

    # Uploaded files

    def get_file_data(self, key: str | None = None, fallback: Any = None) -> Any:
        return read_data(self._context.files, key, fallback)

    def has_file_data(self, key: str | None = None) -> bool:
        return has_data(self._context.files, key)

    # Raw input stream

    def get_input_stream(self, as_json: bool = True) -> dict[str, Any] | list[Any] | str:
        """
        Read the raw request body.

        Args:
            as_json: Decode as JSON; otherwise return the raw text

        Returns:
            Decoded JSON object or array ({} when the body is empty, not JSON,
            or JSON null; a scalar is wrapped in a one-item list), or the raw
            body text
        """
        text = self._context.body.decode("utf-8", errors="replace")
        if not as_json:
            return text

        if not text.strip():
            return {}
        try:
            decoded = json.loads(text)
        except json.JSONDecodeError:
            logger.debug("Inbound body is not valid JSON, using empty object")
            return {}
        if decoded is None:
            return {}
        if isinstance(decoded, (dict, list)):
            return decoded
        return [decoded]

    def has_input_stream(self) -> bool:
        return bool(self.get_input_stream())

    # Method checks

    def is_request_method(self, method: str) -> bool:
        """Compare REQUEST_METHOD with ``method``, ignoring case."""
        current = self.get_server_data("REQUEST_METHOD")
        return isinstance(current, str) and current.upper() == method.upper()

    # Redirect

    def redirect(self, url: str, status: int = 302) -> None:
        """
        Redirect the caller to ``url`` and stop handling the current request.

        Raises:
            RedirectRequested: Always
        """
        logger.debug(f"Redirecting to {url}")
        raise RedirectRequested(url, status)
