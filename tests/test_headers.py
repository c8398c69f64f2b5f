"""Tests for header block parsing and the ResponseHeader view."""

import pytest

from webcall.domain.entities.response import ResponseHeader
from webcall.infrastructure.http.headers import parse_http_headers, render_header_block


class TestParseHttpHeaders:
    """Tests for parse_http_headers."""

    def test_basic_block(self):
        """Status line and fields are split into the mapping."""
        header = parse_http_headers("HTTP/1.1 200 OK\r\nContent-Type: text/html\r\nX-Foo: Bar\r\n")
        assert header.to_dict() == {
            "http-status": "HTTP/1.1 200 OK",
            "content-type": "text/html",
            "x-foo": "Bar",
        }

    def test_keys_lowercased_values_trimmed(self):
        header = parse_http_headers("HTTP/1.1 200 OK\r\nX-MiXeD-Case:    padded value  \r\n")
        assert header["x-mixed-case"] == "padded value"
        assert "X-MiXeD-Case" not in header.to_dict()

    def test_duplicate_header_last_wins(self):
        """Later occurrence overwrites the earlier one."""
        header = parse_http_headers("HTTP/1.1 200 OK\r\nSet-Cookie: a=1\r\nset-cookie: b=2\r\n")
        assert header["set-cookie"] == "b=2"

    def test_value_with_colons_split_at_first_colon(self):
        header = parse_http_headers("HTTP/1.1 302 Found\r\nLocation: https://example.com:8443/next\r\n")
        assert header["location"] == "https://example.com:8443/next"

    def test_status_line_never_merged(self):
        """A status line that looks like a field still lands in http-status."""
        header = parse_http_headers("Weird: status\r\nX-A: 1\r\n")
        assert header["http-status"] == "Weird: status"
        assert "weird" not in header.to_dict()

    def test_trailing_blank_lines_ignored(self):
        header = parse_http_headers("HTTP/1.1 204 No Content\r\nX-A: 1\r\n\r\n")
        assert header.to_dict() == {"http-status": "HTTP/1.1 204 No Content", "x-a": "1"}

    def test_line_without_colon_maps_to_empty_value(self):
        header = parse_http_headers("HTTP/1.1 200 OK\r\nbroken-line\r\n")
        assert header["broken-line"] == ""

    def test_render_then_parse(self):
        block = render_header_block("HTTP/2 404 Not Found", [("Content-Length", "0"), ("Server", "x")])
        assert block.endswith("\r\n\r\n")
        header = parse_http_headers(block)
        assert header.http_status == "HTTP/2 404 Not Found"
        assert header.content_length == 0


class TestResponseHeader:
    """Tests for the ResponseHeader mapping."""

    def setup_method(self):
        self.header = ResponseHeader(
            {
                "http-status": "HTTP/1.1 301 Moved Permanently",
                "content-type": "application/json",
                "content-length": "42",
                "location": "https://example.com/new",
            }
        )

    def test_lookup_is_case_insensitive(self):
        assert self.header["Content-Type"] == "application/json"
        assert "LOCATION" in self.header

    def test_get_with_fallback(self):
        assert self.header.get("x-missing") is None
        assert self.header.get("x-missing", "fallback") == "fallback"

    def test_has(self):
        assert self.header.has("content-type") is True
        assert self.header.has("x-missing") is False

    def test_properties(self):
        assert self.header.http_status == "HTTP/1.1 301 Moved Permanently"
        assert self.header.content_type == "application/json"
        assert self.header.content_length == 42
        assert self.header.location == "https://example.com/new"

    def test_invalid_content_length(self):
        assert ResponseHeader({"content-length": "abc"}).content_length is None

    def test_missing_key_raises(self):
        with pytest.raises(KeyError):
            self.header["x-missing"]

    def test_len_and_iter(self):
        assert len(self.header) == 4
        assert set(self.header) == {"http-status", "content-type", "content-length", "location"}
