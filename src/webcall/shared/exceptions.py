"""
Unified Exception Hierarchy for webcall.

Exception Hierarchy:
    WebcallError (base)
    ├── RequestError
    │   ├── TransportError
    │   └── MalformedResponseError
    ├── ValidationError
    │   └── InvalidParameterError
    └── ConfigurationError
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from webcall.domain.entities.response import CallResult


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    WARNING = auto()      # Recoverable, can continue
    ERROR = auto()        # Failed but can retry
    CRITICAL = auto()     # Cannot continue
    TRANSIENT = auto()    # Temporary, a later attempt may succeed


class ErrorCategory(Enum):
    """Categories for error classification."""
    TRANSPORT = "transport"
    RESPONSE = "response"
    VALIDATION = "validation"
    CONFIGURATION = "config"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Rich context attached to every webcall error."""
    operation: str | None = None
    url: str | None = None
    input_value: Any = None
    suggestion: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class WebcallError(Exception):
    """
    Base exception for all webcall errors.

    Provides:
    - Structured error context
    - Severity classification
    - Retry guidance
    """

    __slots__ = ('context', 'severity', 'category', 'retryable')

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        category: ErrorCategory = ErrorCategory.TRANSPORT,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.context = context or ErrorContext()
        self.severity = severity
        self.category = category
        self.retryable = retryable

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "error": str(self),
            "category": self.category.value,
            "severity": self.severity.name.lower(),
            "retryable": self.retryable,
        }
        if self.context.operation:
            result["operation"] = self.context.operation
        if self.context.url:
            result["url"] = self.context.url
        if self.context.suggestion:
            result["suggestion"] = self.context.suggestion
        return result


# =============================================================================
# Request Errors
# =============================================================================

class RequestError(WebcallError):
    """Base class for errors raised while performing an outbound call."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        category: ErrorCategory = ErrorCategory.TRANSPORT,
        retryable: bool = True,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.ERROR,
            category=category,
            retryable=retryable,
        )


class TransportError(RequestError):
    """Raised when the exchange could not be completed at all (DNS, connect, timeout)."""

    def __init__(
        self,
        message: str = "Transport exchange failed",
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, context=context, retryable=True)
        self.severity = ErrorSeverity.TRANSIENT


class MalformedResponseError(RequestError):
    """
    Raised when a JSON-RPC response body does not decode as JSON.

    The complete call result is kept on ``result`` so callers can inspect
    the status code, headers and raw body that came back.
    """

    def __init__(
        self,
        result: CallResult,
        message: str = "Response body is not valid JSON",
        *,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx = ErrorContext(
            operation=ctx.operation,
            url=ctx.url or result.last_url,
            input_value=result.body,
            suggestion=ctx.suggestion or "Inspect error.result for the raw response",
            metadata=ctx.metadata,
        )
        super().__init__(
            f"{message} (HTTP {result.http_code})",
            context=ctx,
            category=ErrorCategory.RESPONSE,
            retryable=False,
        )
        self.result = result


# =============================================================================
# Validation Errors
# =============================================================================

class ValidationError(WebcallError):
    """Base class for validation errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.WARNING,
            category=ErrorCategory.VALIDATION,
            retryable=False,
        )


class InvalidParameterError(ValidationError):
    """Raised when a parameter value is invalid."""

    def __init__(
        self,
        param_name: str,
        value: Any,
        expected: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx = ErrorContext(
            operation=ctx.operation,
            url=ctx.url,
            input_value=value,
            suggestion=f"Expected {expected}",
            metadata=ctx.metadata,
        )
        super().__init__(
            f"Invalid parameter '{param_name}': {value!r} (expected {expected})",
            context=ctx
        )


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(WebcallError):
    """Raised for configuration-related errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
            retryable=False,
        )


def is_retryable_error(error: Exception) -> bool:
    """Check if an error could succeed on a later attempt."""
    if isinstance(error, WebcallError):
        return error.retryable

    error_str = str(error).lower()
    transient_patterns = [
        "timed out",
        "timeout",
        "connection reset",
        "connection refused",
        "temporarily unavailable",
    ]
    return any(pattern in error_str for pattern in transient_patterns)
