"""
Shared module for webcall.

Provides the unified exception hierarchy used by every layer.
"""

from .exceptions import (
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

__all__ = [
    # Base
    "WebcallError",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorCategory",
    # Request errors
    "RequestError",
    "TransportError",
    "MalformedResponseError",
    # Validation / configuration
    "ValidationError",
    "InvalidParameterError",
    "ConfigurationError",
    # Utilities
    "is_retryable_error",
]
