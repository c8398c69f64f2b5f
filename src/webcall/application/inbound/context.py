"""
Inbound Context - the request state a handler reads from.

The stores (query, form, session, server, files) are owned by the hosting
environment. InboundContext only holds read-only views over them; nothing in
webcall writes to these stores.

Example:
    >>> ctx = InboundContext(query={"page": "2"}, server={"REQUEST_METHOD": "GET"})
    >>> ctx.query["page"]
    '2'
"""

from __future__ import annotations

import logging
import urllib.parse
from collections.abc import Mapping
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def parse_query_string(query: str) -> dict[str, str | list[str]]:
    """
    Parse a query string into a flat mapping.

    A name that appears once maps to its value; a repeated name maps to the
    list of its values in order.
    """
    parsed = urllib.parse.parse_qs(query, keep_blank_values=True)
    return {key: values[0] if len(values) == 1 else values for key, values in parsed.items()}


def _read_wsgi_body(environ: Mapping[str, Any]) -> bytes:
    stream = environ.get("wsgi.input")
    if stream is None:
        return b""
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        logger.debug(f"Ignoring invalid CONTENT_LENGTH: {environ.get('CONTENT_LENGTH')!r}")
        return b""
    if length <= 0:
        return b""
    return stream.read(length)


@dataclass(frozen=True)
class InboundContext:
    """
    Read-only inbound request state.

    Attributes:
        query: Query-string parameters
        form: Form fields from a urlencoded body
        session: Session store (None when no session is active)
        server: Server / environment metadata (REQUEST_METHOD, HTTP_HOST, ...)
        files: Uploaded file descriptors
        body: Raw request body
    """

    query: Mapping[str, Any] | None = None
    form: Mapping[str, Any] | None = None
    session: Mapping[str, Any] | None = None
    server: Mapping[str, Any] | None = None
    files: Mapping[str, Any] | None = None
    body: bytes = b""

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Mapping) and not isinstance(value, MappingProxyType):
                object.__setattr__(self, f.name, MappingProxyType(value))  # type: ignore[arg-type]

    @classmethod
    def from_wsgi_environ(
        cls,
        environ: Mapping[str, Any],
        session: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> InboundContext:
        """
        Build a context from a WSGI environ.

        The body is read once from ``wsgi.input`` (bounded by CONTENT_LENGTH).
        Form fields are parsed only for urlencoded bodies; multipart uploads
        are left to the hosting framework and passed in through ``files``.

        Args:
            environ: WSGI environ dict
            session: Session store supplied by the host, if any
            files: Uploaded files supplied by the host, if any
        """
        body = _read_wsgi_body(environ)
        content_type = str(environ.get("CONTENT_TYPE", "")).split(";", 1)[0].strip().lower()

        form: dict[str, Any] = {}
        if content_type == FORM_CONTENT_TYPE and body:
            form = parse_query_string(body.decode("utf-8", errors="replace"))

        return cls(
            query=parse_query_string(str(environ.get("QUERY_STRING", ""))),
            form=form,
            session=session,
            server={key: value for key, value in environ.items() if isinstance(value, str)},
            files=files if files is not None else {},
            body=body,
        )
