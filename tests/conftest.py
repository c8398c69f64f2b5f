"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import io
from collections.abc import Callable

import httpx
import pytest

from webcall.infrastructure.http import ClientConfig, Request

# ============================================================
# Outbound Fixtures
# ============================================================


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Build a Request whose exchanges are answered by ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], **config: object) -> Request:
        # trust_env off so proxy variables cannot mount a real transport
        transport_options = {"transport": httpx.MockTransport(handler), "trust_env": False}
        return Request(ClientConfig(transport_options=transport_options, **config))

    return _make


@pytest.fixture
def captured() -> list[httpx.Request]:
    """Collects the requests seen by a mock handler."""
    return []


# ============================================================
# Inbound Fixtures
# ============================================================


@pytest.fixture
def wsgi_environ():
    """A urlencoded POST as a WSGI server would present it."""
    body = b"name=Ada&tags=a&tags=b"
    return {
        "REQUEST_METHOD": "POST",
        "QUERY_STRING": "page=2&empty=",
        "CONTENT_TYPE": "application/x-www-form-urlencoded; charset=utf-8",
        "CONTENT_LENGTH": str(len(body)),
        "HTTP_HOST": "example.com",
        "wsgi.input": io.BytesIO(body),
        "wsgi.version": (1, 0),
    }
