"""Tests for exceptions.py: coverage of the exception hierarchy."""

from webcall.domain.entities.response import CallResult, ResponseHeader
from webcall.shared.exceptions import (
    ConfigurationError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidParameterError,
    MalformedResponseError,
    RequestError,
    TransportError,
    ValidationError,
    WebcallError,
    is_retryable_error,
)


def _result(body: str = "<html>", code: int = 500) -> CallResult:
    return CallResult(
        http_code=code,
        header=ResponseHeader({"http-status": f"HTTP/1.1 {code} Internal Server Error"}),
        body=body,
        last_url="https://rpc.test.com/",
    )


class TestWebcallError:
    def test_basic_creation(self):
        e = WebcallError("test error")
        assert str(e) == "test error"
        assert e.severity == ErrorSeverity.ERROR
        assert e.category == ErrorCategory.TRANSPORT
        assert e.retryable is False

    def test_to_dict(self):
        ctx = ErrorContext(operation="GET", url="https://x.test/", suggestion="s")
        d = WebcallError("fail", context=ctx, retryable=True).to_dict()
        assert d["error"] == "fail"
        assert d["operation"] == "GET"
        assert d["url"] == "https://x.test/"
        assert d["suggestion"] == "s"
        assert d["retryable"] is True

    def test_to_dict_minimal(self):
        d = WebcallError("fail").to_dict()
        assert "operation" not in d
        assert "url" not in d


class TestTransportError:
    def test_default(self):
        e = TransportError()
        assert "transport" in str(e).lower()
        assert e.retryable is True
        assert e.severity == ErrorSeverity.TRANSIENT
        assert isinstance(e, RequestError)

    def test_carries_diagnostic(self):
        e = TransportError("Name or service not known", context=ErrorContext(url="https://nowhere.test/"))
        assert str(e) == "Name or service not known"
        assert e.context.url == "https://nowhere.test/"


class TestMalformedResponseError:
    def test_carries_result(self):
        result = _result()
        e = MalformedResponseError(result)
        assert e.result is result
        assert e.category == ErrorCategory.RESPONSE
        assert e.retryable is False
        assert "500" in str(e)

    def test_context_filled_from_result(self):
        e = MalformedResponseError(_result(body="oops"))
        assert e.context.url == "https://rpc.test.com/"
        assert e.context.input_value == "oops"
        assert e.context.suggestion

    def test_keeps_given_context(self):
        e = MalformedResponseError(_result(), context=ErrorContext(operation="json_rpc", url="https://a.test/"))
        assert e.context.operation == "json_rpc"
        assert e.context.url == "https://a.test/"


class TestValidationErrors:
    def test_not_retryable(self):
        e = ValidationError("bad input")
        assert e.retryable is False
        assert e.category == ErrorCategory.VALIDATION
        assert e.severity == ErrorSeverity.WARNING

    def test_invalid_parameter(self):
        e = InvalidParameterError("data_format", "xml", "'query-string' or 'json'")
        assert "data_format" in str(e)
        assert "'xml'" in str(e)
        assert e.context.input_value == "xml"
        assert e.context.suggestion == "Expected 'query-string' or 'json'"


class TestConfigurationError:
    def test_basic(self):
        e = ConfigurationError("bad timeout")
        assert e.severity == ErrorSeverity.CRITICAL
        assert e.category == ErrorCategory.CONFIGURATION
        assert e.retryable is False


class TestIsRetryableError:
    def test_webcall_errors(self):
        assert is_retryable_error(TransportError()) is True
        assert is_retryable_error(MalformedResponseError(_result())) is False

    def test_generic_transient_message(self):
        assert is_retryable_error(OSError("Connection reset by peer")) is True
        assert is_retryable_error(ValueError("bad value")) is False
