"""
Application DI Container (dependency-injector).

Wires client settings into the outbound Request and the per-request
InboundContext into InboundRequest.

Usage::

    from webcall.container import ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict({"timeout": 10.0, "user_agent": "my-app/1.0"})

    request = container.request()

    # Per inbound request:
    container.inbound_context.override(providers.Object(InboundContext.from_wsgi_environ(environ)))
    inbound = container.inbound_request()
"""

from __future__ import annotations

import logging

from dependency_injector import containers, providers

from webcall.application.inbound import InboundContext, InboundRequest
from webcall.infrastructure.http import ClientConfig, Request
from webcall.infrastructure.http.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for webcall.

    Providers:
    - ``client_config``: ClientConfig built from ``config`` (Singleton)
    - ``request``: outbound Request sharing that config (Singleton)
    - ``inbound_context``: request state, override per inbound request
    - ``inbound_request``: InboundRequest over the current context (Factory)
    """

    config = providers.Configuration(
        default={
            "timeout": DEFAULT_TIMEOUT,
            "follow_redirects": True,
            "verify": True,
            "user_agent": DEFAULT_USER_AGENT,
            "headers": {},
            "transport_options": {},
        }
    )

    client_config = providers.Singleton(
        ClientConfig,
        timeout=config.timeout.as_float(),
        follow_redirects=config.follow_redirects,
        verify=config.verify,
        user_agent=config.user_agent,
        headers=config.headers,
        transport_options=config.transport_options,
    )

    request = providers.Singleton(Request, config=client_config)

    inbound_context = providers.Factory(InboundContext)

    inbound_request = providers.Factory(InboundRequest, context=inbound_context)


__all__ = ["ApplicationContainer"]
