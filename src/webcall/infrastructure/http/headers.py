"""
Header block parsing.

A header block is the status line followed by field lines, separated by
CRLF. Parsing lowercases names, trims values, and keeps the last occurrence
of a repeated name.
"""

from __future__ import annotations

from collections.abc import Iterable

from webcall.domain.entities.response import HTTP_STATUS_KEY, ResponseHeader

CRLF = "\r\n"


def parse_http_headers(raw: str) -> ResponseHeader:
    """
    Parse a raw header block into a ResponseHeader.

    Args:
        raw: Status line plus field lines, CRLF separated

    Returns:
        ResponseHeader with ``http-status`` holding the first line verbatim

    Example:
        >>> h = parse_http_headers("HTTP/1.1 200 OK\\r\\nX-Foo: Bar\\r\\n")
        >>> h["x-foo"]
        'Bar'
    """
    lines = raw.rstrip().split(CRLF)
    data: dict[str, str] = {HTTP_STATUS_KEY: lines[0]}

    for line in lines[1:]:
        name, _, value = line.partition(":")
        data[name.lower()] = value.strip()

    return ResponseHeader(data)


def render_header_block(status_line: str, fields: Iterable[tuple[str, str]]) -> str:
    """Render a status line and field pairs back into a CRLF header block."""
    lines = [status_line]
    lines.extend(f"{name}: {value}" for name, value in fields)
    return CRLF.join(lines) + CRLF + CRLF
