"""
HTTP client configuration.

Named settings cover the common knobs; ``transport_options`` is the escape
hatch for any other ``httpx.Client`` keyword argument. Per-call overrides
are merged on top, caller values winning.

Usage:
    from webcall.infrastructure.http.config import ClientConfig

    config = ClientConfig(timeout=10.0, headers={"Accept": "application/json"})
    kwargs = config.merge_options({"timeout": 2.0})

Environment variables read by ``ClientConfig.from_env()``:
    - WEBCALL_TIMEOUT
    - WEBCALL_USER_AGENT
    - WEBCALL_VERIFY_SSL
    - WEBCALL_FOLLOW_REDIRECTS
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from webcall.shared.exceptions import ConfigurationError, ErrorContext

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "webcall/0.1.0"

# Keyword arguments accepted by httpx.Client
TRANSPORT_OPTION_NAMES: frozenset[str] = frozenset(
    {
        "auth",
        "params",
        "headers",
        "cookies",
        "verify",
        "cert",
        "http1",
        "http2",
        "proxy",
        "mounts",
        "timeout",
        "follow_redirects",
        "limits",
        "max_redirects",
        "event_hooks",
        "transport",
        "trust_env",
        "default_encoding",
    }
)

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def check_option_names(options: Mapping[str, Any], *, source: str) -> None:
    """Raise ConfigurationError when ``options`` holds names httpx.Client does not accept."""
    unknown = sorted(set(options) - TRANSPORT_OPTION_NAMES)
    if unknown:
        raise ConfigurationError(
            f"Unknown transport option(s) in {source}: {', '.join(unknown)}",
            context=ErrorContext(
                operation=source,
                input_value=unknown,
                suggestion=f"Use one of: {', '.join(sorted(TRANSPORT_OPTION_NAMES))}",
            ),
        )


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings applied to every outbound call.

    Attributes:
        timeout: Transport timeout in seconds (must be positive)
        follow_redirects: Follow 3xx responses to the final URL
        verify: Verify TLS certificates
        user_agent: User-Agent header value
        headers: Default request headers
        transport_options: Extra httpx.Client keyword arguments
    """

    timeout: float = DEFAULT_TIMEOUT
    follow_redirects: bool = True
    verify: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    headers: Mapping[str, str] = field(default_factory=dict)
    transport_options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise ConfigurationError(
                f"timeout must be a positive number, got {self.timeout!r}",
                context=ErrorContext(operation="ClientConfig", input_value=self.timeout),
            )
        check_option_names(self.transport_options, source="transport_options")

    @classmethod
    def from_env(cls, **overrides: Any) -> ClientConfig:
        """
        Build a config from WEBCALL_* environment variables.

        Explicit keyword arguments take priority over the environment.
        """
        settings: dict[str, Any] = {
            "follow_redirects": _env_flag("WEBCALL_FOLLOW_REDIRECTS", True),
            "verify": _env_flag("WEBCALL_VERIFY_SSL", True),
        }

        raw_timeout = os.environ.get("WEBCALL_TIMEOUT", "").strip()
        if raw_timeout:
            try:
                settings["timeout"] = float(raw_timeout)
            except ValueError as e:
                raise ConfigurationError(f"WEBCALL_TIMEOUT is not a number: {raw_timeout!r}") from e

        user_agent = os.environ.get("WEBCALL_USER_AGENT", "").strip()
        if user_agent:
            settings["user_agent"] = user_agent

        settings.update(overrides)
        logger.debug(f"Client settings from environment: {settings}")
        return cls(**settings)

    def merge_options(
        self,
        overrides: Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """
        Build httpx.Client keyword arguments for one call.

        Precedence, lowest first: named settings, ``transport_options``,
        per-call ``headers`` set by the call builder, ``overrides``.
        Headers are merged key by key (case-insensitive) rather than
        replaced wholesale.
        """
        overrides = dict(overrides or {})
        check_option_names(overrides, source="call options")

        merged_headers = httpx.Headers({"User-Agent": self.user_agent})
        merged_headers.update(self.headers)

        options: dict[str, Any] = {
            "timeout": self.timeout,
            "follow_redirects": self.follow_redirects,
            "verify": self.verify,
        }
        for layer in (self.transport_options, {"headers": headers}, overrides):
            for key, value in layer.items():
                if key == "headers":
                    merged_headers.update(value or {})
                else:
                    options[key] = value

        options["headers"] = merged_headers
        return options
