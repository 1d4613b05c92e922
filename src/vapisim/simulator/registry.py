"""Endpoint registry for the simulator host.

Simulated API endpoints register a factory here when their module is
imported. Every time the host builds an application it calls each
factory with the fresh service, so each application gets its own
handlers and state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from vapisim.simulator.service import Service

logger = logging.getLogger(__name__)

EndpointFactory = Callable[["Service"], None]

_endpoints: list[EndpointFactory] = []


def register_endpoint(factory: EndpointFactory) -> EndpointFactory:
    """Add an endpoint factory to the registry.

    Returns the factory unchanged so this can be used as a decorator.
    Registering the same factory twice is a no-op.
    """
    if factory not in _endpoints:
        _endpoints.append(factory)
        logger.debug("Registered endpoint factory %s", getattr(factory, "__qualname__", factory))
    return factory


def registered_endpoints() -> list[EndpointFactory]:
    """Return the registered factories in registration order."""
    return list(_endpoints)
